"""Clip polygon extraction from raster masks.

This module runs the raster pipeline end to end:
- Trace the first boundary of the mask
- Close the ring and drop consecutive duplicates
- Simplify with Douglas-Peucker
- Normalize to a percentage `polygon(...)` description

The result can be used directly as a clip region and parses back through
`parse_clip_polygon`.
"""

import logging
from dataclasses import dataclass

from outline_forge.config import TracerConfig
from outline_forge.core.geometry import remove_sequential_duplicates
from outline_forge.core.normalizer import to_clip_polygon
from outline_forge.core.simplify import simplify_polyline
from outline_forge.core.tracer import trace_boundary
from outline_forge.domain import Point, RasterMask

logger = logging.getLogger(__name__)


@dataclass
class ExtractionResult:
    """Outcome of a clip polygon extraction.

    Attributes:
        boundary: Raw traced boundary (lattice points)
        simplified: Simplified ring without a repeated closing point
        clip_path: Percentage polygon description, None on failure
    """

    boundary: list[Point]
    simplified: list[Point]
    clip_path: str | None

    @property
    def succeeded(self) -> bool:
        return self.clip_path is not None


class ClipPathExtractor:
    """Extracts a clip polygon from the alpha channel of an image.

    Example:
        extractor = ClipPathExtractor()
        mask = extractor.mask_from_alpha(width, height, alpha)
        clip = extractor.extract(mask)
    """

    def __init__(self, config: TracerConfig | None = None) -> None:
        self.config = config or TracerConfig()

    def mask_from_alpha(self, width: int, height: int, alpha: bytes | list[int]) -> RasterMask:
        """Threshold an alpha channel with the configured threshold."""
        return RasterMask.from_alpha(width, height, alpha, self.config.alpha_threshold)

    def mask_from_rgba(self, width: int, height: int, rgba: bytes | list[int]) -> RasterMask:
        """Threshold the alpha of an RGBA buffer with the configured threshold."""
        return RasterMask.from_rgba(width, height, rgba, self.config.alpha_threshold)

    def run(self, mask: RasterMask) -> ExtractionResult:
        """Run the pipeline and keep the intermediate stages.

        Args:
            mask: Mask to extract from

        Returns:
            ExtractionResult; `clip_path` is None when the boundary or the
            simplified ring has fewer than 3 points
        """
        boundary = trace_boundary(
            mask,
            max_iterations=self.config.max_iterations(mask.width, mask.height),
        )
        if len(boundary) < 3:
            logger.debug("No usable boundary: %d traced points", len(boundary))
            return ExtractionResult(boundary=boundary, simplified=[], clip_path=None)

        ring = remove_sequential_duplicates([*boundary, boundary[0]])
        simplified = simplify_polyline(ring, self.config.simplify_tolerance)
        if len(simplified) > 1 and simplified[-1] == simplified[0]:
            simplified = simplified[:-1]

        if len(simplified) < 3:
            logger.debug("Simplified ring collapsed to %d points", len(simplified))
            return ExtractionResult(boundary=boundary, simplified=simplified, clip_path=None)

        clip_path = to_clip_polygon(simplified, mask.width, mask.height)
        return ExtractionResult(boundary=boundary, simplified=simplified, clip_path=clip_path)

    def extract(self, mask: RasterMask) -> str | None:
        """Extract a percentage clip polygon, or None on failure."""
        return self.run(mask).clip_path
