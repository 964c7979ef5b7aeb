"""Configured facade over the outline pipelines.

OutlineEngine is what an overlay tracker holds on to. It resolves
outline styles, filters outlines too thin to draw, builds outline paths,
extracts clip polygons from masks and draws spotlight masks, logging each
outcome and keeping run statistics.
"""

import structlog

from outline_forge.config import OutlineForgeSettings
from outline_forge.core.extractor import ClipPathExtractor
from outline_forge.core.resolver import OutlinePathResolver, resolve_element_geometry
from outline_forge.core.stage import resolve_spotlight_mask_path
from outline_forge.core.style import resolve_outline_style
from outline_forge.domain import (
    ComputedStyle,
    OutlineOverrides,
    OutlineSpec,
    RasterMask,
    Rect,
    ResolvedOutline,
)
from outline_forge.utils import EngineStats, OutlineLogger


class OutlineEngine:
    """Resolves outlines and masks for highlighted elements.

    Example:
        engine = OutlineEngine()
        resolved = engine.resolve(
            Rect(20, 40, 120, 80),
            ComputedStyle(outline_style="solid", outline_width="4px"),
        )
        if resolved is not None:
            draw(resolved.path.to_svg(), resolved.width, resolved.color)
    """

    def __init__(
        self,
        settings: OutlineForgeSettings | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize the engine.

        Args:
            settings: Engine settings (defaults when None)
            logger: Structured logger; a module logger when None
        """
        self.settings = settings or OutlineForgeSettings()
        self.logger = logger or structlog.get_logger("outline_forge")
        self.outline_logger = OutlineLogger(self.logger)
        self.resolver = OutlinePathResolver(self.settings.geometry)
        self.extractor = ClipPathExtractor(self.settings.tracer)

    @property
    def stats(self) -> EngineStats:
        return self.outline_logger.stats

    def resolve_spec(
        self, style: ComputedStyle, overrides: OutlineOverrides | None = None
    ) -> OutlineSpec | None:
        """Resolve the outline spec of an element, dropping unusable ones.

        Returns:
            OutlineSpec, or None when the element has no outline or its
            width is below `min_outline_width`
        """
        spec = resolve_outline_style(style, overrides, self.settings.outline)
        if spec is None:
            self.outline_logger.log_outline_skipped("no outline")
            return None
        min_width = self.settings.outline.min_outline_width
        if spec.width <= 0 or spec.width < min_width:
            self.outline_logger.log_outline_skipped("too thin", width=spec.width)
            return None
        return spec

    def resolve(
        self,
        rect: Rect,
        style: ComputedStyle,
        overrides: OutlineOverrides | None = None,
    ) -> ResolvedOutline | None:
        """Resolve the drawable outline of an element.

        Args:
            rect: Element box in screen coordinates
            style: Computed style of the element
            overrides: Optional per-element outline attributes

        Returns:
            ResolvedOutline, or None when nothing should be drawn
        """
        spec = self.resolve_spec(style, overrides)
        if spec is None:
            return None

        resolved = self.resolver.resolve(resolve_element_geometry(rect, style), spec)
        self.outline_logger.log_outline_resolved(
            path_commands=len(resolved.path),
            from_polygon=resolved.from_polygon,
            style=resolved.style.value,
        )
        return resolved

    def extract_clip_path(self, mask: RasterMask) -> str | None:
        """Extract a percentage clip polygon from a mask.

        Returns:
            `polygon(...)` description, or None when the mask has no
            usable boundary
        """
        result = self.extractor.run(mask)
        if result.clip_path is None:
            self.outline_logger.log_extraction_failed(
                mask.width, mask.height, len(result.boundary)
            )
            return None
        self.outline_logger.log_extraction(
            mask.width, mask.height, len(result.boundary), len(result.simplified)
        )
        return result.clip_path

    def spotlight_mask(
        self,
        rect: Rect,
        style: ComputedStyle,
        viewport_width: float,
        viewport_height: float,
    ) -> str:
        """Spotlight mask path dimming everything but the element's stage."""
        return resolve_spotlight_mask_path(
            rect,
            style,
            viewport_width,
            viewport_height,
            stage=self.settings.stage,
            geometry=self.settings.geometry,
        )
