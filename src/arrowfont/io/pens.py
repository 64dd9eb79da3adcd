"""Adapters from point sequences to fonttools pens.

This module draws closed straight-edged polygons into any fonttools pen:
move to the first point, line to each following point, close the path.
"""

from collections.abc import Sequence
from typing import Any

from fontTools.pens.recordingPen import RecordingPen
from fontTools.pens.ttGlyphPen import TTGlyphPen

from arrowfont.core.outliner import compute_chevron_outline
from arrowfont.domain import GlyphOutline, Point


def draw_polygon(points: Sequence[Point], pen: Any) -> None:
    """Draw a closed polygon into a pen.

    An empty sequence draws nothing. A single point draws a degenerate
    closed contour.

    Args:
        points: Ordered polygon vertices
        pen: Any fonttools segment pen
    """
    if not points:
        return

    first_point = points[0]
    pen.moveTo((first_point.x, first_point.y))
    for point in points[1:]:
        pen.lineTo((point.x, point.y))
    pen.closePath()


def compute_simple_polygon_outline(points: Sequence[Point]) -> RecordingPen:
    """Convert an ordered point sequence to a closed contour.

    Args:
        points: Ordered polygon vertices

    Returns:
        RecordingPen holding moveTo/lineTo/closePath commands

    Example:
        pen = compute_simple_polygon_outline([Point(0, 0), Point(0, 10), Point(10, 0)])
        pen.value[-1]  # ("closePath", ())
    """
    pen = RecordingPen()
    draw_polygon(points, pen)
    return pen


def chevron_stroke_path(
    triangle_size: float,
    angle_deg: float,
    stroke_width: float,
) -> RecordingPen:
    """Outline a chevron and convert it to a closed contour."""
    outline = compute_chevron_outline(triangle_size, angle_deg, stroke_width)
    return compute_simple_polygon_outline(outline.points)


def glyph_to_pen(glyph: GlyphOutline, pen: Any) -> None:
    """Draw every polygon of a glyph into a pen.

    Args:
        glyph: Domain glyph outline
        pen: Any fonttools segment pen
    """
    for polygon in glyph.polygons:
        draw_polygon(polygon, pen)


def glyph_to_ttglyph(glyph: GlyphOutline) -> Any:
    """Convert a domain glyph to a fonttools TrueType glyph.

    Coordinates are rounded to integers by TTGlyphPen.

    Args:
        glyph: Domain glyph outline

    Returns:
        fontTools.ttLib.tables._g_l_y_f.Glyph
    """
    pen = TTGlyphPen(None)  # type: ignore[arg-type]
    glyph_to_pen(glyph, pen)
    return pen.glyph()
