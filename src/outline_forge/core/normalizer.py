"""Conversion of mask-space polylines to percentage clip polygons."""

from outline_forge.domain import Point, format_number


def to_clip_polygon(points: list[Point], width: int, height: int) -> str | None:
    """Format mask-space points as a `polygon(...)` clip description.

    Each point is sampled at its pixel center, so (x, y) maps to
    ((x + 0.5) / width * 100, (y + 0.5) / height * 100) percent.

    Args:
        points: Simplified boundary in mask pixels
        width: Mask width
        height: Mask height

    Returns:
        `polygon(x1% y1%, x2% y2%, ...)`, or None for an empty mask size

    Examples:
        >>> to_clip_polygon([Point(0, 0), Point(3, 0), Point(3, 3)], 4, 4)
        'polygon(12.50% 12.50%, 87.50% 12.50%, 87.50% 87.50%)'
    """
    if width <= 0 or height <= 0:
        return None

    vertices = ", ".join(
        f"{format_number((point.x + 0.5) / width * 100)}% "
        f"{format_number((point.y + 0.5) / height * 100)}%"
        for point in points
    )
    return f"polygon({vertices})"
