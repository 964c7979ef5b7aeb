"""Core geometric types for outline computation.

This module defines the value types shared by every pipeline stage:
- Point: A 2D point in screen (y-down) or mask coordinates
- Rect: An axis-aligned box with non-negative size
- CornerRadius / CornerRadii: Elliptical corner radii of a rounded box
- Polygon: An implicitly closed ring of points
- WindingDirection: Enum for polygon winding direction
"""

import math
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any


def finite_or_zero(value: float) -> float:
    """Coerce NaN and infinities to 0.0."""
    return value if math.isfinite(value) else 0.0


def clamp_dimension(value: float) -> float:
    """Clamp a size-like value to a finite, non-negative number."""
    return max(0.0, finite_or_zero(value))


class WindingDirection(Enum):
    """Polygon winding direction.

    Directions are given as seen on screen, where y grows downward:
    - A positive shoelace sum is a clockwise ring
    - A negative shoelace sum is a counter-clockwise ring
    """

    CLOCKWISE = auto()
    COUNTER_CLOCKWISE = auto()


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D space.

    Immutable and hashable. Mask tracing produces lattice points with
    integer coordinates; every other stage works with floats.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple."""
        return (self.x, self.y)

    def translated(self, dx: float, dy: float) -> "Point":
        """Return a copy moved by (dx, dy)."""
        return Point(self.x + dx, self.y + dy)


@dataclass(frozen=True, slots=True)
class Rect:
    """An axis-aligned rectangle.

    Width and height are clamped to non-negative finite values on
    construction; non-finite origins coerce to 0.

    Attributes:
        x: Left edge
        y: Top edge
        width: Horizontal size (>= 0)
        height: Vertical size (>= 0)
    """

    x: float
    y: float
    width: float
    height: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", finite_or_zero(self.x))
        object.__setattr__(self, "y", finite_or_zero(self.y))
        object.__setattr__(self, "width", clamp_dimension(self.width))
        object.__setattr__(self, "height", clamp_dimension(self.height))

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def is_empty(self) -> bool:
        """Check whether the rect has no area."""
        return self.width <= 0 or self.height <= 0

    def inflated(self, amount: float) -> "Rect":
        """Grow the rect by `amount` on every side.

        A negative amount shrinks it; the size never drops below zero.
        """
        return Rect(
            x=self.x - amount,
            y=self.y - amount,
            width=self.width + amount * 2,
            height=self.height + amount * 2,
        )

    def to_dict(self) -> dict[str, Any]:
        return {"x": self.x, "y": self.y, "width": self.width, "height": self.height}


@dataclass(frozen=True, slots=True)
class CornerRadius:
    """Elliptical radius of a single corner.

    Attributes:
        x: Horizontal radius (>= 0)
        y: Vertical radius (>= 0)
    """

    x: float = 0.0
    y: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", clamp_dimension(self.x))
        object.__setattr__(self, "y", clamp_dimension(self.y))

    def is_zero(self) -> bool:
        return self.x <= 0 and self.y <= 0

    def inflated(self, amount: float) -> "CornerRadius":
        """Add `amount` to both components, clamping at zero."""
        return CornerRadius(self.x + amount, self.y + amount)

    def scaled(self, factor: float) -> "CornerRadius":
        return CornerRadius(self.x * factor, self.y * factor)


@dataclass(frozen=True, slots=True)
class CornerRadii:
    """Radii for the four corners of a rounded rectangle.

    Corners are listed clockwise starting from the top-left.
    """

    top_left: CornerRadius = CornerRadius()
    top_right: CornerRadius = CornerRadius()
    bottom_right: CornerRadius = CornerRadius()
    bottom_left: CornerRadius = CornerRadius()

    @classmethod
    def uniform(cls, rx: float, ry: float | None = None) -> "CornerRadii":
        """Create radii with the same value on every corner."""
        corner = CornerRadius(rx, rx if ry is None else ry)
        return cls(corner, corner, corner, corner)

    def corners(self) -> tuple[CornerRadius, CornerRadius, CornerRadius, CornerRadius]:
        return (self.top_left, self.top_right, self.bottom_right, self.bottom_left)

    def has_rounding(self) -> bool:
        """Check whether any corner is rounded."""
        return any(not corner.is_zero() for corner in self.corners())

    def inflated(self, amount: float) -> "CornerRadii":
        return CornerRadii(*(corner.inflated(amount) for corner in self.corners()))

    def scaled(self, factor: float) -> "CornerRadii":
        return CornerRadii(*(corner.scaled(factor) for corner in self.corners()))


@dataclass(frozen=True)
class Polygon:
    """An implicitly closed ring of points.

    The edge from the last point back to the first is implied, never
    stored. Orientation is derived from the signed area.

    Attributes:
        points: Vertices in ring order
    """

    points: tuple[Point, ...]

    def __len__(self) -> int:
        return len(self.points)

    def signed_area(self) -> float:
        """Calculate signed area using the shoelace formula.

        Returns:
            Signed area; 0.0 for rings with fewer than 3 points
        """
        n = len(self.points)
        if n < 3:
            return 0.0

        area = 0.0
        for i in range(n):
            j = (i + 1) % n
            area += self.points[i].x * self.points[j].y
            area -= self.points[j].x * self.points[i].y

        return area / 2.0

    @property
    def direction(self) -> WindingDirection:
        """Winding direction as seen on screen (y-down).

        Degenerate rings with zero area count as clockwise.
        """
        if self.signed_area() >= 0:
            return WindingDirection.CLOCKWISE
        return WindingDirection.COUNTER_CLOCKWISE

    def bounding_box(self) -> tuple[float, float, float, float]:
        """Calculate bounding box as (min_x, min_y, max_x, max_y)."""
        if not self.points:
            return (0.0, 0.0, 0.0, 0.0)
        xs = [p.x for p in self.points]
        ys = [p.y for p in self.points]
        return (min(xs), min(ys), max(xs), max(ys))
