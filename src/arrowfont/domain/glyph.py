"""Glyph outline representation.

This module defines the glyph domain model: a named, encoded glyph whose
outline is a list of closed polygons. It is independent of fonttools; the
io layer draws it into fonttools pens.
"""

from dataclasses import dataclass, field

from arrowfont.domain.vector import Point


@dataclass
class GlyphOutline:
    """A glyph built from straight-edged closed polygons.

    Attributes:
        name: Glyph name (e.g., ".notdef", "pua_dash")
        unicode: Unicode code point (None for unencoded glyphs)
        advance_width: Horizontal advance width in font units
        polygons: Closed polygons; each polygon is an ordered list of points
    """

    name: str
    unicode: int | None
    advance_width: float
    polygons: list[list[Point]] = field(default_factory=list)

    @property
    def point_count(self) -> int:
        """Total number of points across all polygons."""
        return sum(len(polygon) for polygon in self.polygons)

    def bounding_box(self) -> tuple[float, float, float, float]:
        """Calculate bounding box of all polygons.

        Returns:
            Tuple of (min_x, min_y, max_x, max_y)
        """
        points = [p for polygon in self.polygons for p in polygon]
        if not points:
            return (0.0, 0.0, 0.0, 0.0)

        xs = [p.x for p in points]
        ys = [p.y for p in points]
        return (min(xs), min(ys), max(xs), max(ys))
