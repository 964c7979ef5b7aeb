"""Vector path commands.

Paths are kept as a list of tagged commands while geometry is computed and
are serialized to the SVG path mini-language only at the boundary. All
numbers are written with two decimals so output is byte-stable.
"""

import math
from dataclasses import dataclass, field


def format_number(value: float) -> str:
    """Format a coordinate with two decimals; non-finite values become '0'."""
    if not math.isfinite(value):
        return "0"
    text = f"{value:.2f}"
    return "0.00" if text == "-0.00" else text


@dataclass(frozen=True, slots=True)
class MoveTo:
    x: float
    y: float

    def to_svg(self) -> str:
        return f"M {format_number(self.x)} {format_number(self.y)}"


@dataclass(frozen=True, slots=True)
class LineTo:
    x: float
    y: float

    def to_svg(self) -> str:
        return f"L {format_number(self.x)} {format_number(self.y)}"


@dataclass(frozen=True, slots=True)
class HorizontalLineTo:
    x: float

    def to_svg(self) -> str:
        return f"H {format_number(self.x)}"


@dataclass(frozen=True, slots=True)
class VerticalLineTo:
    y: float

    def to_svg(self) -> str:
        return f"V {format_number(self.y)}"


@dataclass(frozen=True, slots=True)
class ArcTo:
    """Elliptical arc with zero rotation, small-arc flag and clockwise sweep."""

    rx: float
    ry: float
    x: float
    y: float

    def to_svg(self) -> str:
        return (
            f"A {format_number(self.rx)} {format_number(self.ry)} 0 0 1 "
            f"{format_number(self.x)} {format_number(self.y)}"
        )


@dataclass(frozen=True, slots=True)
class ClosePath:
    def to_svg(self) -> str:
        return "Z"


PathCommand = MoveTo | LineTo | HorizontalLineTo | VerticalLineTo | ArcTo | ClosePath


@dataclass
class Path:
    """An ordered sequence of drawing commands.

    Attributes:
        commands: Commands in drawing order
    """

    commands: list[PathCommand] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.commands)

    def __iter__(self):
        return iter(self.commands)

    def is_empty(self) -> bool:
        return not self.commands

    def arcs(self) -> list[ArcTo]:
        """Get the arc commands of the path."""
        return [command for command in self.commands if isinstance(command, ArcTo)]

    def to_svg(self) -> str:
        """Serialize to SVG path data."""
        return " ".join(command.to_svg() for command in self.commands)

    def __str__(self) -> str:
        return self.to_svg()
