"""Chevron stroke outliner.

This module turns a ">" shaped centerline into a closed stroke outline.

The centerline has three vertices:

    c0 = (0, +H)  ->  c1 = (S, 0)  ->  c2 = (0, -H)

where S is the triangle size and H = S * tan(angle). Each leg is offset by
half the stroke width along its own left normal. The open ends get butt
caps; on each side the two offset legs are extended to their intersection
to form the miter at the tip.

The resulting polygon is wound clockwise:

    [cap_top_L, tip_miter_L, cap_bottom_L, cap_bottom_R, tip_miter_R, cap_top_R]

Angles outside (0, 90) degrees are not rejected here. They still yield six
finite points, but the polygon may self-intersect or invert. Use
StrokeSpec.checked() at the boundary to reject them. Sizes large enough to
overflow the float range give non-finite points; StrokeOutliner.outline()
raises StrokeSpecError for those.
"""

import logging
import math

from arrowfont.config import GeometryConfig, StrokeSpec
from arrowfont.core.geometry import line_intersection, offset_point
from arrowfont.domain import OutlinePolygon, Point, Segment, Vector
from arrowfont.exceptions import StrokeSpecError

logger = logging.getLogger(__name__)


def chevron_centerline(triangle_size: float, angle_deg: float) -> tuple[Point, Point, Point]:
    """Compute the three centerline vertices of a chevron.

    Args:
        triangle_size: Baseline distance from the back edge to the tip
        angle_deg: Leg angle relative to the baseline, in degrees

    Returns:
        Tuple of (back_top, tip, back_bottom)
    """
    height = math.tan(math.radians(angle_deg)) * triangle_size
    return (
        Point(0.0, height),
        Point(triangle_size, 0.0),
        Point(0.0, -height),
    )


def chevron_segments(triangle_size: float, angle_deg: float) -> tuple[Segment, Segment]:
    """Compute the two centerline legs of a chevron.

    Returns:
        Tuple of (upper leg c0->c1, lower leg c1->c2)
    """
    c0, c1, c2 = chevron_centerline(triangle_size, angle_deg)
    return Segment(c0, c1), Segment(c1, c2)


class StrokeOutliner:
    """Computes stroke outlines with butt caps and mitered joins.

    The outliner holds only numeric tolerances, so one instance can be
    shared freely between callers.

    Example:
        outliner = StrokeOutliner()
        outline = outliner.chevron_outline(300, 45, 75)
    """

    def __init__(self, config: GeometryConfig | None = None) -> None:
        """Initialize the outliner.

        Args:
            config: Geometry tolerances (defaults used if None)
        """
        self.config = config or GeometryConfig()

    def outline(self, spec: StrokeSpec) -> OutlinePolygon:
        """Outline a validated stroke spec.

        Args:
            spec: Chevron stroke parameters

        Returns:
            Clockwise six-point outline

        Raises:
            StrokeSpecError: If the outline overflows to non-finite coordinates
        """
        result = self.chevron_outline(spec.triangle_size, spec.angle_deg, spec.stroke_width)
        if not result.is_finite():
            raise StrokeSpecError("triangle_size", "outline overflows to non-finite coordinates")
        return result

    def chevron_outline(
        self,
        triangle_size: float,
        angle_deg: float,
        stroke_width: float,
    ) -> OutlinePolygon:
        """Outline a chevron centerline with uniform stroke width.

        Args:
            triangle_size: Baseline distance from the back edge to the tip
            angle_deg: Leg angle relative to the baseline, in degrees
            stroke_width: Stroke thickness, centered on the centerline

        Returns:
            Clockwise six-point outline
        """
        upper, lower = chevron_segments(triangle_size, angle_deg)
        half_width = stroke_width / 2.0

        normal_eps = self.config.normal_epsilon
        n_upper = upper.left_normal(normal_eps)
        n_lower = lower.left_normal(normal_eps)

        # Butt caps use each leg's own normal
        cap_top_left = offset_point(upper.start, n_upper, half_width)
        cap_top_right = offset_point(upper.start, n_upper, -half_width)
        cap_bottom_left = offset_point(lower.end, n_lower, half_width)
        cap_bottom_right = offset_point(lower.end, n_lower, -half_width)

        tip_miter_left = self._miter(upper, lower, cap_top_left, n_lower, half_width)
        tip_miter_right = self._miter(upper, lower, cap_top_right, n_lower, -half_width)

        # line_intersection hands back the fallback object itself for parallel legs
        degenerate = tip_miter_left is upper.end
        if degenerate:
            logger.debug(
                "Parallel legs at joint (%.3f, %.3f), using joint as miter point",
                upper.end.x, upper.end.y
            )

        return OutlinePolygon(
            cap_top_left=cap_top_left,
            tip_miter_left=tip_miter_left,
            cap_bottom_left=cap_bottom_left,
            cap_bottom_right=cap_bottom_right,
            tip_miter_right=tip_miter_right,
            cap_top_right=cap_top_right,
            degenerate=degenerate,
        )

    def _miter(
        self,
        upper: Segment,
        lower: Segment,
        upper_start: Point,
        n_lower: Vector,
        offset: float,
    ) -> Point:
        """Intersect both legs offset to the same side.

        Args:
            upper: Upper centerline leg
            lower: Lower centerline leg
            upper_start: Upper leg start already offset to this side
            n_lower: Unit left normal of the lower leg
            offset: Signed half width for this side

        Returns:
            Miter point, or the joint vertex when the legs are parallel
        """
        return line_intersection(
            upper_start,
            upper.direction,
            offset_point(lower.start, n_lower, offset),
            lower.direction,
            fallback=upper.end,
            epsilon=self.config.intersection_epsilon,
        )


def compute_chevron_outline(
    triangle_size: float,
    angle_deg: float,
    stroke_width: float,
) -> OutlinePolygon:
    """Outline a chevron with default tolerances.

    Args:
        triangle_size: Baseline distance from the back edge to the tip
        angle_deg: Leg angle relative to the baseline, in degrees
        stroke_width: Stroke thickness, centered on the centerline

    Returns:
        Clockwise six-point outline
    """
    return StrokeOutliner().chevron_outline(triangle_size, angle_deg, stroke_width)
