"""Core outline algorithms for arrowfont.

This module contains the core algorithms for:

- Geometry operations (normalization, normals, line intersection, area)
- Chevron stroke outlining (butt caps and mitered tip)
- Glyph outline construction for the arrow glyphs

All functions are pure and stateless, safe to call concurrently.

Key functions:
- compute_chevron_outline: Outline a chevron with default tolerances
- chevron_centerline: Centerline vertices of a chevron
- line_intersection: Intersect two point-direction lines
- make_glyphs: Build the .notdef, dash and chevron glyphs

Key classes:
- StrokeOutliner: Computes stroke outlines with configurable tolerances
"""

from arrowfont.core.geometry import (
    left_normal,
    line_intersection,
    normalize,
    offset_point,
    signed_area,
)
from arrowfont.core.glyphs import (
    make_chevron_glyph,
    make_dash_glyph,
    make_glyphs,
    make_notdef_glyph,
)
from arrowfont.core.outliner import (
    StrokeOutliner,
    chevron_centerline,
    chevron_segments,
    compute_chevron_outline,
)

__all__ = [
    "StrokeOutliner",
    "chevron_centerline",
    "chevron_segments",
    "compute_chevron_outline",
    "left_normal",
    "line_intersection",
    "make_chevron_glyph",
    "make_dash_glyph",
    "make_glyphs",
    "make_notdef_glyph",
    "normalize",
    "offset_point",
    "signed_area",
]
