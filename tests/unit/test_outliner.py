"""Unit tests for the chevron stroke outliner."""

import math

import pytest

from arrowfont.config import GeometryConfig, StrokeSpec
from arrowfont.core.geometry import signed_area
from arrowfont.core.outliner import (
    StrokeOutliner,
    chevron_centerline,
    chevron_segments,
    compute_chevron_outline,
)
from arrowfont.domain import OutlinePolygon, Point
from arrowfont.exceptions import StrokeSpecError

ANGLES = [1.0, 15.0, 30.0, 45.0, 60.0, 75.0, 89.0]


def _close(a: Point, b: Point, tol: float = 1e-6) -> bool:
    return math.isclose(a.x, b.x, abs_tol=tol) and math.isclose(a.y, b.y, abs_tol=tol)


class TestCenterline:
    """Tests for chevron centerline construction."""

    def test_45_degrees(self) -> None:
        c0, c1, c2 = chevron_centerline(300, 45)
        assert c0.x == 0.0
        assert c0.y == pytest.approx(300.0)
        assert c1 == Point(300.0, 0.0)
        assert c2.x == 0.0
        assert c2.y == pytest.approx(-300.0)

    def test_height_from_tangent(self) -> None:
        c0, _, c2 = chevron_centerline(200, 30)
        expected = 200 * math.tan(math.radians(30))
        assert c0.y == pytest.approx(expected)
        assert c2.y == pytest.approx(-expected)

    def test_segments_share_tip(self) -> None:
        upper, lower = chevron_segments(300, 45)
        assert upper.end == lower.start == Point(300.0, 0.0)


class TestChevronOutline:
    """Tests for compute_chevron_outline."""

    @pytest.fixture
    def outline(self) -> OutlinePolygon:
        """Reference 300/45/75 chevron."""
        return compute_chevron_outline(300, 45, 75)

    def test_returns_six_points(self, outline: OutlinePolygon) -> None:
        assert len(outline.points) == 6

    def test_reference_tip_miters(self, outline: OutlinePolygon) -> None:
        """Test miter offset equals half width over sin(45 deg)."""
        miter = 37.5 / math.sin(math.radians(45))
        assert miter == pytest.approx(53.033, abs=1e-3)
        assert outline.tip_miter_left.x == pytest.approx(300 + miter)
        assert outline.tip_miter_left.y == pytest.approx(0.0, abs=1e-9)
        assert outline.tip_miter_right.x == pytest.approx(300 - miter)
        assert outline.tip_miter_right.y == pytest.approx(0.0, abs=1e-9)

    def test_reference_caps(self, outline: OutlinePolygon) -> None:
        d = 37.5 * math.sqrt(0.5)
        assert _close(outline.cap_top_left, Point(d, 300 + d))
        assert _close(outline.cap_top_right, Point(-d, 300 - d))
        assert _close(outline.cap_bottom_left, Point(d, -300 - d))
        assert _close(outline.cap_bottom_right, Point(-d, -300 + d))

    def test_clockwise(self, outline: OutlinePolygon) -> None:
        assert signed_area(outline.points) < 0

    def test_area_equals_width_times_centerline_length(self, outline: OutlinePolygon) -> None:
        """Test mitered butt-capped stroke area is width x centerline length."""
        leg = math.hypot(300, 300)
        assert abs(signed_area(outline.points)) == pytest.approx(75 * 2 * leg)

    @pytest.mark.parametrize("angle", ANGLES)
    @pytest.mark.parametrize("size,width", [(300, 75), (50, 10), (1000, 1)])
    def test_finite_points(self, angle: float, size: float, width: float) -> None:
        outline = compute_chevron_outline(size, angle, width)
        assert len(outline.points) == 6
        assert outline.is_finite()

    @pytest.mark.parametrize("angle", ANGLES)
    def test_mirror_symmetry(self, angle: float) -> None:
        """Test left/right tip miters and caps mirror across the baseline."""
        outline = compute_chevron_outline(300, angle, 75)
        assert outline.tip_miter_left.x == pytest.approx(outline.tip_miter_right.x + 2 * 37.5 / math.sin(math.radians(angle)))
        assert outline.tip_miter_left.y == pytest.approx(-outline.tip_miter_right.y, abs=1e-6)
        assert outline.cap_top_left.x == pytest.approx(outline.cap_bottom_left.x)
        assert outline.cap_top_left.y == pytest.approx(-outline.cap_bottom_left.y)
        assert outline.cap_top_right.x == pytest.approx(outline.cap_bottom_right.x)
        assert outline.cap_top_right.y == pytest.approx(-outline.cap_bottom_right.y)

    @pytest.mark.parametrize("angle", ANGLES)
    @pytest.mark.parametrize("width", [1.0, 75.0, 120.0])
    def test_stroke_width_recovered_at_caps(self, angle: float, width: float) -> None:
        outline = compute_chevron_outline(300, angle, width)
        top = math.dist(outline.cap_top_left.to_tuple(), outline.cap_top_right.to_tuple())
        bottom = math.dist(outline.cap_bottom_left.to_tuple(), outline.cap_bottom_right.to_tuple())
        assert top == pytest.approx(width, abs=1e-6)
        assert bottom == pytest.approx(width, abs=1e-6)

    @pytest.mark.parametrize("angle", ANGLES)
    def test_miter_distance(self, angle: float) -> None:
        outline = compute_chevron_outline(300, angle, 75)
        expected = 37.5 / math.sin(math.radians(angle))
        assert outline.tip_miter_left.x - 300 == pytest.approx(expected)
        assert 300 - outline.tip_miter_right.x == pytest.approx(expected)

    @pytest.mark.parametrize("angle", ANGLES)
    def test_clockwise_for_supported_angles(self, angle: float) -> None:
        assert signed_area(compute_chevron_outline(300, angle, 75).points) < 0

    def test_idempotent(self) -> None:
        """Test identical inputs give bit-identical outlines."""
        first = compute_chevron_outline(123.4, 37.5, 19.0)
        second = compute_chevron_outline(123.4, 37.5, 19.0)
        assert first == second
        assert first.to_tuples() == second.to_tuples()

    def test_zero_width_collapses_to_centerline(self) -> None:
        c0, c1, c2 = chevron_centerline(300, 45)
        outline = compute_chevron_outline(300, 45, 0)

        assert outline.cap_top_left == outline.cap_top_right == c0
        assert outline.cap_bottom_left == outline.cap_bottom_right == c2
        assert _close(outline.tip_miter_left, c1)
        assert _close(outline.tip_miter_right, c1)
        assert signed_area(outline.points) == pytest.approx(0.0, abs=1e-6)
        assert not outline.degenerate


class TestDegenerateAngles:
    """Tests for the parallel-leg fallback."""

    @pytest.mark.parametrize("angle", [0.0, 1e-10])
    def test_parallel_legs_use_joint(self, angle: float) -> None:
        outline = compute_chevron_outline(300, angle, 75)
        joint = Point(300.0, 0.0)
        assert outline.tip_miter_left == joint
        assert outline.tip_miter_right == joint
        assert outline.is_finite()
        assert outline.degenerate

    def test_zero_size_is_finite(self) -> None:
        outline = compute_chevron_outline(0, 45, 75)
        assert outline.is_finite()
        assert outline.tip_miter_left == Point(0.0, 0.0)

    @pytest.mark.parametrize("angle", ANGLES)
    def test_regular_angles_not_degenerate(self, angle: float) -> None:
        assert not compute_chevron_outline(300, angle, 75).degenerate

    def test_fallback_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level("DEBUG", logger="arrowfont.core.outliner"):
            compute_chevron_outline(300, 0, 75)
        assert "Parallel legs" in caplog.text

    def test_out_of_range_angle_still_returns_polygon(self) -> None:
        """Test angles outside (0, 90) are not rejected by the raw function."""
        outline = compute_chevron_outline(300, 120, 75)
        assert len(outline.points) == 6
        assert outline.is_finite()

    def test_larger_epsilon_triggers_fallback(self) -> None:
        outliner = StrokeOutliner(GeometryConfig(intersection_epsilon=1.0))
        outline = outliner.chevron_outline(0.01, 10, 1)
        assert outline.tip_miter_left == Point(0.01, 0.0)
        assert outline.degenerate

    def test_overflowing_size_is_not_finite(self) -> None:
        """Test the unvalidated function does not guard against float overflow."""
        outline = compute_chevron_outline(1e308, 60, 75)
        assert len(outline.points) == 6
        assert not outline.is_finite()


class TestStrokeOutliner:
    """Tests for StrokeOutliner class."""

    def test_default_config(self) -> None:
        outliner = StrokeOutliner()
        assert outliner.config.intersection_epsilon == 1e-6

    def test_outline_from_spec(self) -> None:
        spec = StrokeSpec(triangle_size=300, angle_deg=45, stroke_width=75)
        assert StrokeOutliner().outline(spec) == compute_chevron_outline(300, 45, 75)

    def test_shared_instance(self) -> None:
        outliner = StrokeOutliner()
        a = outliner.chevron_outline(300, 30, 40)
        outliner.chevron_outline(100, 60, 10)
        assert outliner.chevron_outline(300, 30, 40) == a

    def test_outline_rejects_non_finite_result(self) -> None:
        """Test an unvalidated spec that overflows raises instead of returning NaN."""
        spec = StrokeSpec.model_construct(triangle_size=1e308, angle_deg=60.0, stroke_width=75.0)
        with pytest.raises(StrokeSpecError) as exc_info:
            StrokeOutliner().outline(spec)
        assert exc_info.value.field == "triangle_size"
