"""Domain models for arrowfont.

This module contains the geometric value types and the outline models the
outliner produces. All models are designed to be:

- Immutable where possible (using frozen dataclasses)
- Serializable to plain dictionaries
- Independent of fonttools implementation details

Key classes:
- Point: A 2D point
- Vector: A 2D direction with normalization and left normal
- Segment: A directed centerline segment
- OutlinePolygon: The six-point chevron stroke outline
- GlyphOutline: A named glyph made of closed polygons
"""

from arrowfont.domain.glyph import GlyphOutline
from arrowfont.domain.outline import POINT_NAMES, OutlinePolygon
from arrowfont.domain.vector import Point, Segment, Vector

__all__: list[str] = [
    "POINT_NAMES",
    # Core types
    "Point",
    "Vector",
    "Segment",
    "OutlinePolygon",
    "GlyphOutline",
]
