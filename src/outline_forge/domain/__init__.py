"""Domain models for outline-forge.

This module contains the value types that flow through the outline
pipelines. All models are:

- Immutable where possible (using frozen dataclasses)
- Free of rendering or image-loading concerns
- Constructed fresh for every computation

Key classes:
- Point, Rect, CornerRadius, CornerRadii, Polygon: Plain geometry
- RasterMask: Binary foreground grid derived from an alpha channel
- Path and its commands: Drawable output
- OutlineSpec, OutlineStyle, DashPattern: How an outline is stroked
- ElementGeometry, ResolvedOutline: Resolver input and output
- ComputedStyle, OutlineOverrides: Materialized style records
"""

from outline_forge.domain.geometry import (
    CornerRadii,
    CornerRadius,
    Point,
    Polygon,
    Rect,
    WindingDirection,
)
from outline_forge.domain.mask import RasterMask
from outline_forge.domain.outline import (
    DashPattern,
    ElementGeometry,
    OutlineSpec,
    OutlineStyle,
    ResolvedOutline,
)
from outline_forge.domain.path import (
    ArcTo,
    ClosePath,
    HorizontalLineTo,
    LineTo,
    MoveTo,
    Path,
    PathCommand,
    VerticalLineTo,
    format_number,
)
from outline_forge.domain.style import ComputedStyle, OutlineOverrides

__all__: list[str] = [
    # Enums
    "WindingDirection",
    "OutlineStyle",
    # Geometry
    "Point",
    "Rect",
    "CornerRadius",
    "CornerRadii",
    "Polygon",
    "RasterMask",
    # Paths
    "Path",
    "PathCommand",
    "MoveTo",
    "LineTo",
    "HorizontalLineTo",
    "VerticalLineTo",
    "ArcTo",
    "ClosePath",
    "format_number",
    # Outlines
    "DashPattern",
    "OutlineSpec",
    "ElementGeometry",
    "ResolvedOutline",
    # Style records
    "ComputedStyle",
    "OutlineOverrides",
]
