"""Polyline simplification with an iterative Douglas-Peucker pass."""

from outline_forge.core.geometry import squared_segment_distance
from outline_forge.domain import Point


def simplify_polyline(points: list[Point], tolerance: float) -> list[Point]:
    """Reduce a polyline to the vertices that matter within a tolerance.

    Ranges to examine are kept on an explicit stack instead of recursing.
    For each range the interior point farthest from the chord is found;
    if it lies beyond the tolerance it is kept and both sub-ranges are
    queued, otherwise the whole interior is dropped.

    The input should already have consecutive duplicates removed. Both
    endpoints are always kept and the original order is preserved.

    Args:
        points: Polyline vertices
        tolerance: Maximum distance a dropped point may lie from its chord

    Returns:
        Kept points in original order

    Examples:
        >>> line = [Point(0, 0), Point(1, 0.1), Point(2, 0)]
        >>> simplify_polyline(line, 0.5)
        [Point(x=0, y=0), Point(x=2, y=0)]
    """
    if len(points) <= 2:
        return list(points)

    sq_tolerance = tolerance * tolerance
    keep = [False] * len(points)
    keep[0] = True
    keep[-1] = True
    stack: list[tuple[int, int]] = [(0, len(points) - 1)]

    while stack:
        start, end = stack.pop()
        max_distance = 0.0
        index = start

        for i in range(start + 1, end):
            distance = squared_segment_distance(points[i], points[start], points[end])
            if distance > max_distance:
                index = i
                max_distance = distance

        if max_distance > sq_tolerance:
            keep[index] = True
            if index - start > 1:
                stack.append((start, index))
            if end - index > 1:
                stack.append((index, end))

    return [point for point, kept in zip(points, keep) if kept]
