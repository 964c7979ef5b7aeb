"""Geometric operations shared by the outline pipelines.

This module provides core mathematical utilities for:
- Signed area calculation (shoelace formula)
- Squared point-to-segment distance
- Outward edge normals
- Intersection of two infinite lines
- Consecutive duplicate removal

All functions are pure and stateless.
"""

import math

from outline_forge.domain import Point, Polygon, WindingDirection

PARALLEL_EPSILON = 1e-5


def signed_area(points: list[Point] | tuple[Point, ...]) -> float:
    """Calculate signed area of a polygon using the shoelace formula.

    In screen coordinates (y grows downward) a positive area is a
    clockwise ring.

    Args:
        points: List of points forming the polygon boundary

    Returns:
        Signed area in square units. Returns 0.0 for degenerate polygons.

    Examples:
        >>> signed_area([Point(0, 0), Point(1, 0), Point(1, 1), Point(0, 1)])
        1.0
        >>> signed_area([Point(0, 0), Point(0, 1), Point(1, 1), Point(1, 0)])
        -1.0
    """
    return Polygon(tuple(points)).signed_area()


def orientation_sign(points: list[Point] | tuple[Point, ...]) -> int:
    """Return 1 for a clockwise (or degenerate) ring, -1 otherwise."""
    if Polygon(tuple(points)).direction is WindingDirection.CLOCKWISE:
        return 1
    return -1


def squared_segment_distance(point: Point, seg_start: Point, seg_end: Point) -> float:
    """Squared distance from a point to a line segment.

    Projects the point onto the infinite line, then clamps the projection
    parameter to [0, 1] so points beyond either end measure to that end.

    Examples:
        >>> squared_segment_distance(Point(1, 1), Point(0, 0), Point(2, 0))
        1.0
        >>> squared_segment_distance(Point(5, 0), Point(0, 0), Point(2, 0))
        9.0
    """
    x, y = seg_start.x, seg_start.y
    dx = seg_end.x - x
    dy = seg_end.y - y

    if dx != 0 or dy != 0:
        t = ((point.x - x) * dx + (point.y - y) * dy) / (dx * dx + dy * dy)
        if t > 1:
            x, y = seg_end.x, seg_end.y
        elif t > 0:
            x += dx * t
            y += dy * t

    dx = point.x - x
    dy = point.y - y
    return float(dx * dx + dy * dy)


def edge_normal(start: Point, end: Point, orientation: int) -> tuple[float, float]:
    """Unit normal of the edge start -> end pointing away from the interior.

    Args:
        start: Edge start
        end: Edge end
        orientation: Ring orientation sign from `orientation_sign`

    Returns:
        (nx, ny) unit vector; (0.0, 0.0) for a zero-length edge
    """
    dx = end.x - start.x
    dy = end.y - start.y
    length = math.hypot(dx, dy)
    if not length:
        return 0.0, 0.0
    if orientation >= 0:
        return dy / length, -dx / length
    return -dy / length, dx / length


def line_intersection(
    p1: Point,
    p2: Point,
    p3: Point,
    p4: Point,
    epsilon: float = PARALLEL_EPSILON,
) -> Point | None:
    """Intersection of the infinite lines p1-p2 and p3-p4.

    Uses the two-line determinant formula. Unlike a segment test the
    result may lie outside either segment.

    Returns:
        Intersection point, or None when the lines are parallel or
        coincident (|determinant| < epsilon)

    Examples:
        >>> line_intersection(Point(0, 0), Point(2, 2), Point(0, 2), Point(2, 0))
        Point(x=1.0, y=1.0)
    """
    denom = (p1.x - p2.x) * (p3.y - p4.y) - (p1.y - p2.y) * (p3.x - p4.x)
    if abs(denom) < epsilon:
        return None

    det1 = p1.x * p2.y - p1.y * p2.x
    det2 = p3.x * p4.y - p3.y * p4.x
    x = (det1 * (p3.x - p4.x) - (p1.x - p2.x) * det2) / denom
    y = (det1 * (p3.y - p4.y) - (p1.y - p2.y) * det2) / denom
    return Point(x, y)


def remove_sequential_duplicates(points: list[Point]) -> list[Point]:
    """Drop points equal to their predecessor."""
    result: list[Point] = []
    for point in points:
        if result and result[-1] == point:
            continue
        result.append(point)
    return result
