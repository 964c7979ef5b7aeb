"""Per-vertex polygon offsetting.

Every vertex is moved to where its two adjacent edges meet after both are
pushed along their outward normals. This is a miter-style offset rather
than a true Minkowski offset: sharp concave vertices or offsets large
relative to local features can produce a self-intersecting ring, and no
repair is attempted.
"""

import math

from outline_forge.core.geometry import (
    PARALLEL_EPSILON,
    edge_normal,
    line_intersection,
    orientation_sign,
)
from outline_forge.domain import Point

MIN_OFFSET = 1e-3


def offset_polygon(
    points: list[Point] | tuple[Point, ...],
    offset: float,
    parallel_epsilon: float = PARALLEL_EPSILON,
    min_offset: float = MIN_OFFSET,
) -> list[Point]:
    """Inflate (positive offset) or deflate (negative) a simple polygon.

    Outward is decided by the ring's own orientation, so clockwise and
    counter-clockwise input both grow for a positive offset.

    When the two edges at a vertex are parallel the intersection is
    undefined; the vertex then takes the shifted start of the second edge.

    Args:
        points: Polygon vertices (3 or more)
        offset: Signed distance to move each edge
        parallel_epsilon: Determinant magnitude treated as parallel
        min_offset: Offsets with smaller magnitude return a plain copy

    Returns:
        New vertices, same count and order as the input

    Examples:
        >>> square = [Point(0, 0), Point(10, 0), Point(10, 10), Point(0, 10)]
        >>> offset_polygon(square, 1)[0]
        Point(x=-1.0, y=-1.0)
    """
    if not math.isfinite(offset) or abs(offset) < min_offset:
        return list(points)

    orientation = orientation_sign(points)
    n = len(points)
    result: list[Point] = []

    for index in range(n):
        prev = points[(index - 1) % n]
        current = points[index]
        nxt = points[(index + 1) % n]

        prev_nx, prev_ny = edge_normal(prev, current, orientation)
        next_nx, next_ny = edge_normal(current, nxt, orientation)

        prev_start = prev.translated(prev_nx * offset, prev_ny * offset)
        prev_end = current.translated(prev_nx * offset, prev_ny * offset)
        next_start = current.translated(next_nx * offset, next_ny * offset)
        next_end = nxt.translated(next_nx * offset, next_ny * offset)

        vertex = line_intersection(
            prev_start, prev_end, next_start, next_end, epsilon=parallel_epsilon
        )
        result.append(vertex if vertex is not None else next_start)

    return result
