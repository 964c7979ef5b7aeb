"""Spotlight mask paths for guided tours.

A tour dims the whole viewport except a "stage" around the highlighted
element. The mask is drawn as two subpaths filled with the even-odd rule:
the viewport rectangle and the stage hole.
"""

import math

from outline_forge.config import GeometryConfig, StageConfig
from outline_forge.core.path_builder import build_polygon_path, build_rounded_rect_path
from outline_forge.core.resolver import resolve_element_geometry, resolve_outline_path
from outline_forge.core.style import uses_element_geometry
from outline_forge.domain import (
    ComputedStyle,
    CornerRadii,
    OutlineSpec,
    OutlineStyle,
    Path,
    Point,
    Rect,
)


def resolve_viewport_path(width: float, height: float) -> Path:
    """Rectangle covering the viewport, starting at the top-right corner."""
    width = width if math.isfinite(width) and width >= 0 else 0.0
    height = height if math.isfinite(height) and height >= 0 else 0.0
    return build_polygon_path(
        [Point(width, 0), Point(0, 0), Point(0, height), Point(width, height), Point(width, 0)]
    )


def build_stage_path(rect: Rect, padding: float, radius: float) -> Path:
    """Padded rounded box around an element.

    The radius is floored to whole pixels and capped at half the padded
    box size.
    """
    stage = rect.inflated(padding)
    stage_radius = math.floor(max(min(radius, stage.width / 2, stage.height / 2), 0))
    return build_rounded_rect_path(stage, CornerRadii.uniform(stage_radius))


def resolve_stage_hole_path(
    rect: Rect,
    style: ComputedStyle,
    stage: StageConfig | None = None,
    geometry: GeometryConfig | None = None,
) -> Path:
    """Hole cut out of the spotlight mask around an element.

    Elements with a clip path or rounded corners get a hole following
    their own shape, grown by the stage padding. Plain boxes get the
    padded rounded stage.
    """
    stage = stage or StageConfig()
    if uses_element_geometry(style):
        marker = OutlineSpec(
            width=0, offset=stage.padding, color="transparent", style=OutlineStyle.SOLID
        )
        return resolve_outline_path(resolve_element_geometry(rect, style), marker, geometry)
    return build_stage_path(rect, stage.padding, stage.radius)


def resolve_spotlight_mask_path(
    rect: Rect,
    style: ComputedStyle,
    viewport_width: float,
    viewport_height: float,
    stage: StageConfig | None = None,
    geometry: GeometryConfig | None = None,
) -> str:
    """Full spotlight mask: viewport path and hole path on separate lines."""
    viewport = resolve_viewport_path(viewport_width, viewport_height)
    hole = resolve_stage_hole_path(rect, style, stage, geometry)
    return f"{viewport.to_svg()}\n{hole.to_svg()}"
