"""Pen adapters for arrowfont.

This module draws domain polygons and glyphs into fonttools pens. It is
the only place the core touches fonttools; font assembly and file output
are left to the caller.

Key functions:
- draw_polygon: Draw a closed polygon into any pen
- compute_simple_polygon_outline: Record a closed polygon contour
- chevron_stroke_path: Outline a chevron and record its contour
- glyph_to_ttglyph: Build a fonttools TrueType glyph
"""

from arrowfont.io.pens import (
    chevron_stroke_path,
    compute_simple_polygon_outline,
    draw_polygon,
    glyph_to_pen,
    glyph_to_ttglyph,
)

__all__ = [
    "chevron_stroke_path",
    "compute_simple_polygon_outline",
    "draw_polygon",
    "glyph_to_pen",
    "glyph_to_ttglyph",
]
