"""Outline path resolution.

This is the geometry entry point used by overlay renderers. Given the
element geometry and an outline spec it inflates the shape by
offset + width / 2 so the stroke centerline sits outside the element,
then builds the path:

- Clip polygon present: offset the polygon and join its vertices
- Otherwise: inflate box and corner radii, resolve overlaps, build a
  rounded rectangle
"""

import logging

from outline_forge.config import GeometryConfig
from outline_forge.core.offset import offset_polygon
from outline_forge.core.parsing import parse_clip_polygon, parse_corner_radius
from outline_forge.core.path_builder import build_polygon_path, build_rounded_rect_path
from outline_forge.core.radii import resolve_corner_radii
from outline_forge.domain import (
    ComputedStyle,
    CornerRadii,
    CornerRadius,
    ElementGeometry,
    OutlineSpec,
    Path,
    Polygon,
    Rect,
    ResolvedOutline,
)

logger = logging.getLogger(__name__)


def resolve_element_geometry(rect: Rect, style: ComputedStyle) -> ElementGeometry:
    """Combine an element box with the shape hints of its computed style.

    Unparseable radii count as square corners and an unparseable clip path
    is ignored, leaving the plain rectangle.
    """
    corners = [
        parse_corner_radius(text, rect.width, rect.height) or CornerRadius()
        for text in style.border_radii()
    ]
    clip_polygon = None
    clip_text = style.effective_clip_path
    if clip_text is not None:
        points = parse_clip_polygon(clip_text, rect)
        if points is None:
            logger.debug("Ignoring unsupported clip path %r", clip_text)
        else:
            clip_polygon = Polygon(tuple(points))
    return ElementGeometry(rect=rect, radii=CornerRadii(*corners), clip_polygon=clip_polygon)


def resolve_outline_path(
    geometry: ElementGeometry,
    outline: OutlineSpec,
    config: GeometryConfig | None = None,
) -> Path:
    """Build the outline path around an element.

    Args:
        geometry: Element box, corner radii and optional clip polygon
        outline: Outline width and offset
        config: Offsetting tolerances

    Returns:
        Closed outline path in screen coordinates
    """
    config = config or GeometryConfig()
    inflate = outline.inflate

    if geometry.has_clip_polygon():
        points = offset_polygon(
            geometry.clip_polygon.points,
            inflate,
            parallel_epsilon=config.parallel_epsilon,
            min_offset=config.min_offset,
        )
        return build_polygon_path(points)

    outer = geometry.rect.inflated(inflate)
    radii = resolve_corner_radii(outer, geometry.radii.inflated(inflate))
    return build_rounded_rect_path(outer, radii)


class OutlinePathResolver:
    """Resolves drawable outlines for elements.

    Callers filter out outline specs without a positive width before
    asking for a path.

    Example:
        resolver = OutlinePathResolver()
        resolved = resolver.resolve(geometry, OutlineSpec(width=2, offset=4))
        svg_path = resolved.path.to_svg()
    """

    def __init__(self, config: GeometryConfig | None = None) -> None:
        self.config = config or GeometryConfig()

    def resolve(self, geometry: ElementGeometry, outline: OutlineSpec) -> ResolvedOutline:
        """Resolve path and stroke metadata for one element.

        Args:
            geometry: Element geometry
            outline: Outline spec with width > 0

        Returns:
            ResolvedOutline with the path, stroke width, color and dash pattern
        """
        path = resolve_outline_path(geometry, outline, self.config)
        return ResolvedOutline(
            path=path,
            width=outline.width,
            color=outline.color,
            dash_pattern=outline.dash_pattern,
            style=outline.style,
            from_polygon=geometry.has_clip_polygon(),
        )

    def resolve_styled(
        self, rect: Rect, style: ComputedStyle, outline: OutlineSpec
    ) -> ResolvedOutline:
        """Resolve an outline from an element box and its computed style."""
        return self.resolve(resolve_element_geometry(rect, style), outline)
