"""Outline types: stroke style, outline specification and resolved output."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from outline_forge.domain.geometry import (
    CornerRadii,
    Polygon,
    Rect,
    clamp_dimension,
    finite_or_zero,
)
from outline_forge.domain.path import Path


@dataclass(frozen=True, slots=True)
class DashPattern:
    """A dash/gap pair for a stroked outline."""

    dash: float
    gap: float

    def to_svg(self) -> str:
        """Serialize as an SVG stroke-dasharray value."""
        return f"{self.dash:g} {self.gap:g}"


class OutlineStyle(str, Enum):
    """Outline stroke style."""

    SOLID = "solid"
    DOTTED = "dotted"
    DASHED = "dashed"
    DOUBLE = "double"
    GROOVE = "groove"
    RIDGE = "ridge"
    INSET = "inset"
    OUTSET = "outset"
    NONE = "none"

    @classmethod
    def parse(cls, raw: str | None, default: "OutlineStyle | None" = None) -> "OutlineStyle":
        """Parse a style keyword.

        `auto` maps to solid. Absent values give `default` (solid when not
        set) and unknown keywords give solid.
        """
        if not raw or not raw.strip():
            return default if default is not None else cls.SOLID
        keyword = raw.strip().lower()
        if keyword == "auto":
            return cls.SOLID
        try:
            return cls(keyword)
        except ValueError:
            return cls.SOLID

    def dash_pattern(self) -> DashPattern | None:
        """Dash pattern used to approximate this style with a single stroke."""
        if self is OutlineStyle.DOTTED:
            return DashPattern(2, 4)
        if self is OutlineStyle.DASHED:
            return DashPattern(8, 5)
        if self is OutlineStyle.DOUBLE:
            return DashPattern(3, 4)
        if self in (OutlineStyle.GROOVE, OutlineStyle.RIDGE):
            return DashPattern(5, 3)
        if self in (OutlineStyle.INSET, OutlineStyle.OUTSET):
            return DashPattern(4, 3)
        return None


@dataclass(frozen=True)
class OutlineSpec:
    """How an outline ring is stroked around its element.

    Attributes:
        width: Stroke width (>= 0)
        offset: Gap between element edge and stroke; negative is inward
        color: Stroke color, passed through untouched
        style: Stroke style
    """

    width: float
    offset: float = 0.0
    color: str = "currentcolor"
    style: OutlineStyle = OutlineStyle.SOLID

    def __post_init__(self) -> None:
        object.__setattr__(self, "width", clamp_dimension(self.width))
        object.__setattr__(self, "offset", finite_or_zero(self.offset))

    @property
    def inflate(self) -> float:
        """Outward margin from the element edge to the stroke centerline."""
        return self.offset + self.width / 2

    @property
    def dash_pattern(self) -> DashPattern | None:
        return self.style.dash_pattern()


@dataclass(frozen=True)
class ElementGeometry:
    """Resolved geometry of the element an outline surrounds.

    When `clip_polygon` holds at least three points it takes precedence
    over the rectangle and its corner radii.

    Attributes:
        rect: Element box in screen coordinates
        radii: Corner radii before any outline inflation
        clip_polygon: Clip region ring in screen coordinates
    """

    rect: Rect
    radii: CornerRadii = field(default_factory=CornerRadii)
    clip_polygon: Polygon | None = None

    def has_clip_polygon(self) -> bool:
        return self.clip_polygon is not None and len(self.clip_polygon) >= 3


@dataclass
class ResolvedOutline:
    """Drawable outline: path plus stroke metadata.

    Attributes:
        path: Outline path centered on the stroke
        width: Stroke width
        color: Stroke color
        dash_pattern: Optional dash/gap pair
        style: Style the outline was resolved from
        from_polygon: True when the path came from an offset clip polygon
    """

    path: Path
    width: float
    color: str
    dash_pattern: DashPattern | None = None
    style: OutlineStyle = OutlineStyle.SOLID
    from_polygon: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Serialize to SVG-ready attributes."""
        return {
            "d": self.path.to_svg(),
            "stroke-width": self.width,
            "stroke": self.color,
            "stroke-dasharray": self.dash_pattern.to_svg() if self.dash_pattern else None,
            "style": self.style.value,
        }
