"""Outline polygon produced by the chevron outliner.

The outline is a closed six-point polygon wound clockwise. The first three
points trace the left-offset side of the stroke from the top butt cap,
through the tip miter, to the bottom butt cap; the last three return along
the right-offset side.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

from arrowfont.domain.vector import Point

POINT_NAMES: tuple[str, ...] = (
    "cap_top_left",
    "tip_miter_left",
    "cap_bottom_left",
    "cap_bottom_right",
    "tip_miter_right",
    "cap_top_right",
)


@dataclass(frozen=True, slots=True)
class OutlinePolygon:
    """Closed chevron stroke outline.

    The implicit closing edge runs from cap_top_right back to cap_top_left.

    Attributes:
        cap_top_left: Left butt-cap corner at the top back end
        tip_miter_left: Miter corner on the left-offset side of the tip
        cap_bottom_left: Left butt-cap corner at the bottom back end
        cap_bottom_right: Right butt-cap corner at the bottom back end
        tip_miter_right: Miter corner on the right-offset side of the tip
        cap_top_right: Right butt-cap corner at the top back end
        degenerate: True when the legs were parallel and both tip miters
            fell back to the joint vertex
    """

    cap_top_left: Point
    tip_miter_left: Point
    cap_bottom_left: Point
    cap_bottom_right: Point
    tip_miter_right: Point
    cap_top_right: Point
    degenerate: bool = field(default=False, compare=False)

    @property
    def points(self) -> tuple[Point, ...]:
        """The six points in clockwise order."""
        return (
            self.cap_top_left,
            self.tip_miter_left,
            self.cap_bottom_left,
            self.cap_bottom_right,
            self.tip_miter_right,
            self.cap_top_right,
        )

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def __len__(self) -> int:
        return len(POINT_NAMES)

    def to_tuples(self) -> list[tuple[float, float]]:
        """Convert to a list of (x, y) tuples in outline order."""
        return [p.to_tuple() for p in self.points]

    def is_finite(self) -> bool:
        """Check that every point has finite coordinates."""
        return all(p.is_finite() for p in self.points)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary keyed by point name.

        Returns:
            Dictionary mapping each point name to its x/y dictionary
        """
        return {name: p.to_dict() for name, p in zip(POINT_NAMES, self.points)}
