"""Geometric operations for stroke outlining.

This module provides core mathematical utilities for:
- Vector normalization with a safe zero-length fallback
- Left normal computation
- Offsetting points along a normal
- Infinite line intersection with a parallel-line fallback
- Signed area calculation (shoelace formula)

All functions are pure and stateless.
"""

from collections.abc import Sequence

from arrowfont.domain import Point, Vector

DEFAULT_INTERSECTION_EPSILON = 1e-6
DEFAULT_NORMAL_EPSILON = 1e-12


def normalize(vector: Vector, epsilon: float = DEFAULT_NORMAL_EPSILON) -> Vector:
    """Scale a vector to unit length.

    Vectors shorter than epsilon are treated as having length 1 and come
    back unchanged, so a zero vector never produces NaN.

    Args:
        vector: Vector to normalize
        epsilon: Length below which no scaling is applied

    Returns:
        Unit vector, or the input for (near-)zero vectors

    Examples:
        >>> normalize(Vector(3.0, 4.0))
        Vector(x=0.6, y=0.8)
        >>> normalize(Vector(0.0, 0.0))
        Vector(x=0.0, y=0.0)
    """
    return vector.normalized(epsilon)


def left_normal(vector: Vector, epsilon: float = DEFAULT_NORMAL_EPSILON) -> Vector:
    """Calculate the unit normal rotated 90 degrees counter-clockwise.

    Args:
        vector: Direction vector
        epsilon: Passed through to normalize()

    Returns:
        Unit vector (-y, x) of the normalized direction

    Examples:
        >>> left_normal(Vector(2.0, 0.0))  # Horizontal to the right
        Vector(x=-0.0, y=1.0)
    """
    return vector.left_normal(epsilon)


def offset_point(point: Point, normal: Vector, distance: float) -> Point:
    """Move a point by distance along a normal.

    Args:
        point: Point to offset
        normal: Offset direction (normally unit length)
        distance: Signed offset; negative moves against the normal

    Returns:
        Offset point
    """
    return point.translated(normal, distance)


def line_intersection(
    p1: Point,
    v1: Vector,
    p2: Point,
    v2: Vector,
    fallback: Point | None = None,
    epsilon: float = DEFAULT_INTERSECTION_EPSILON,
) -> Point:
    """Intersect two infinite lines given in point-direction form.

    Solves p1 + t*v1 = p2 + s*v2 for t. When the determinant of the
    directions is below epsilon the lines are (near-)parallel and no stable
    intersection exists; the fallback point is returned instead (p1 when no
    fallback is given). This branch never raises, so callers always get a
    finite point for finite input.

    Args:
        p1: Point on the first line
        v1: Direction of the first line
        p2: Point on the second line
        v2: Direction of the second line
        fallback: Point returned for parallel lines
        epsilon: Determinant threshold for parallel detection

    Returns:
        Intersection point, or the fallback for parallel lines

    Examples:
        >>> line_intersection(Point(0, 0), Vector(1, 1), Point(0, 2), Vector(1, -1))
        Point(x=1.0, y=1.0)
    """
    det = v1.cross(v2)

    if abs(det) < epsilon:
        return fallback if fallback is not None else p1

    t = ((p2.x - p1.x) * v2.y - (p2.y - p1.y) * v2.x) / det
    return Point(p1.x + t * v1.x, p1.y + t * v1.y)


def signed_area(points: Sequence[Point]) -> float:
    """Calculate signed area of a polygon using the shoelace formula.

    Args:
        points: Polygon vertices, implicitly closed

    Returns:
        Signed area; positive for counter-clockwise, negative for clockwise.
        Returns 0.0 for fewer than three points.

    Examples:
        >>> signed_area([Point(0, 0), Point(1, 0), Point(1, 1), Point(0, 1)])
        1.0
    """
    n = len(points)
    if n < 3:
        return 0.0

    area = 0.0
    for i in range(n):
        j = (i + 1) % n
        area += points[i].x * points[j].y
        area -= points[j].x * points[i].y

    return area / 2.0
