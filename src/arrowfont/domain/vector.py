"""Core geometric value types.

This module defines the fundamental geometric types used by the outliner:
- Point: A 2D position
- Vector: A 2D direction or displacement
- Segment: A directed line segment between two points
"""

import math
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Vector:
    """A direction or displacement in 2D space.

    Attributes:
        x: X component
        y: Y component
    """

    x: float
    y: float

    @classmethod
    def between(cls, start: "Point", end: "Point") -> "Vector":
        """Create the displacement from start to end."""
        return cls(end.x - start.x, end.y - start.y)

    def length(self) -> float:
        """Euclidean length of the vector."""
        return math.hypot(self.x, self.y)

    def cross(self, other: "Vector") -> float:
        """Z component of the 2D cross product (self x other)."""
        return self.x * other.y - self.y * other.x

    def normalized(self, epsilon: float = 1e-12) -> "Vector":
        """Scale the vector to unit length.

        A vector shorter than epsilon is divided by 1 instead of its length,
        so it comes back unchanged rather than as NaN or infinity.

        Args:
            epsilon: Length below which the vector is left as is

        Returns:
            Unit vector, or the original vector when it is (near-)zero
        """
        length = self.length()
        if length < epsilon:
            length = 1.0
        return Vector(self.x / length, self.y / length)

    def left_normal(self, epsilon: float = 1e-12) -> "Vector":
        """Unit normal rotated +90 degrees from this direction.

        Rotation maps (x, y) to (-y, x), so for a direction pointing right
        the normal points up.

        Args:
            epsilon: Passed to normalized()

        Returns:
            Left-hand unit normal
        """
        unit = self.normalized(epsilon)
        return Vector(-unit.y, unit.x)


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D space.

    Immutable and hashable for use in sets/dicts.

    Attributes:
        x: X coordinate in font units
        y: Y coordinate in font units
    """

    x: float
    y: float

    def translated(self, vector: Vector, factor: float = 1.0) -> "Point":
        """Move the point by factor * vector.

        Args:
            vector: Displacement direction
            factor: Scalar applied to the vector

        Returns:
            New translated point
        """
        return Point(self.x + vector.x * factor, self.y + vector.y * factor)

    def is_finite(self) -> bool:
        """Check that neither coordinate is NaN or infinite."""
        return math.isfinite(self.x) and math.isfinite(self.y)

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with x and y fields
        """
        return {"x": self.x, "y": self.y}


@dataclass(frozen=True, slots=True)
class Segment:
    """A directed centerline segment from start to end."""

    start: Point
    end: Point

    @property
    def direction(self) -> Vector:
        """Displacement from start to end (not normalized)."""
        return Vector.between(self.start, self.end)

    def left_normal(self, epsilon: float = 1e-12) -> Vector:
        """Unit left normal of the segment direction."""
        return self.direction.left_normal(epsilon)
