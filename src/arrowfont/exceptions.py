"""Exception hierarchy for Arrowfont."""


class ArrowFontError(Exception):
    """Base exception for all Arrowfont errors."""

    pass


class StrokeSpecError(ArrowFontError):
    """Stroke parameters outside the supported domain."""

    def __init__(self, field: str, reason: str) -> None:
        self.field = field
        self.reason = reason
        super().__init__(f"Invalid stroke parameter '{field}': {reason}")


class GlyphError(ArrowFontError):
    """Errors related to glyph construction."""

    pass


class GlyphBuildError(GlyphError):
    """Error building a glyph outline."""

    def __init__(self, glyph_name: str, reason: str) -> None:
        self.glyph_name = glyph_name
        self.reason = reason
        super().__init__(f"Error building glyph '{glyph_name}': {reason}")
