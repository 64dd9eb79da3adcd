"""Glyph outline factories for the arrow glyphs.

Builds the three glyphs an arrow font needs:
- .notdef: a centred box (required first glyph)
- U+E000: a solid dash centred on the baseline
- U+E001: a single-stroke chevron with mitered tip

All polygons are wound clockwise, the TrueType convention for outer
contours.
"""

import logging

from arrowfont.config import ArrowFontSettings, GlyphConfig
from arrowfont.core.geometry import signed_area
from arrowfont.core.outliner import StrokeOutliner
from arrowfont.domain import GlyphOutline, Point
from arrowfont.exceptions import GlyphBuildError, StrokeSpecError

logger = logging.getLogger(__name__)


def _clockwise_rect(x_min: float, y_min: float, x_max: float, y_max: float) -> list[Point]:
    return [
        Point(x_min, y_min),
        Point(x_min, y_max),
        Point(x_max, y_max),
        Point(x_max, y_min),
    ]


def make_notdef_glyph(config: GlyphConfig) -> GlyphOutline:
    """Build the .notdef box glyph.

    The box side is 70% of the em, inset 15% from the left and centred
    between descender and ascender.

    Args:
        config: Glyph metrics

    Returns:
        .notdef glyph outline
    """
    upm = config.units_per_em
    size = upm * 0.7
    margin = upm * 0.15
    y_bottom = config.descender + (config.ascender - config.descender - size) / 2

    box = _clockwise_rect(margin, y_bottom, margin + size, y_bottom + size)
    return GlyphOutline(
        name=".notdef",
        unicode=0,
        advance_width=upm * 0.6,
        polygons=[box],
    )


def make_dash_glyph(config: GlyphConfig) -> GlyphOutline:
    """Build the dash glyph: a stroke-width rectangle on the baseline.

    Args:
        config: Glyph metrics

    Returns:
        Dash glyph outline
    """
    half_height = config.stroke.stroke_width / 2
    rect = _clockwise_rect(0.0, -half_height, config.dash_length, half_height)
    return GlyphOutline(
        name="pua_dash",
        unicode=config.dash_unicode,
        advance_width=config.dash_length + config.gap_after_dash,
        polygons=[rect],
    )


def make_chevron_glyph(
    config: GlyphConfig,
    outliner: StrokeOutliner | None = None,
) -> GlyphOutline:
    """Build the single-stroke chevron glyph.

    The back edge sits at x=0 and the tip near x=triangle_size; the advance
    adds the dash gap after the tip.

    Args:
        config: Glyph metrics
        outliner: Outliner to use (default tolerances if None)

    Returns:
        Chevron glyph outline

    Raises:
        GlyphBuildError: If the stroke cannot be outlined
    """
    outliner = outliner or StrokeOutliner()
    stroke = config.stroke
    name = f"pua_chevron_{stroke.angle_deg:g}"

    try:
        outline = outliner.outline(stroke)
    except StrokeSpecError as e:
        raise GlyphBuildError(name, str(e)) from e

    return GlyphOutline(
        name=name,
        unicode=config.chevron_unicode,
        advance_width=stroke.triangle_size + config.gap_after_dash,
        polygons=[list(outline.points)],
    )


def make_glyphs(settings: ArrowFontSettings) -> list[GlyphOutline]:
    """Build all arrow glyphs in font order.

    Args:
        settings: Application settings

    Returns:
        [.notdef, dash, chevron]
    """
    outliner = StrokeOutliner(settings.geometry)
    glyphs = [
        make_notdef_glyph(settings.glyphs),
        make_dash_glyph(settings.glyphs),
        make_chevron_glyph(settings.glyphs, outliner),
    ]

    for glyph in glyphs:
        for polygon in glyph.polygons:
            if signed_area(polygon) > 0:
                logger.warning("Glyph %s has a counter-clockwise polygon", glyph.name)
        logger.debug(
            "Built glyph %s (U+%04X, advance=%.1f, points=%d)",
            glyph.name, glyph.unicode or 0, glyph.advance_width, glyph.point_count
        )

    return glyphs
