"""Tests for clip polygon extraction and percentage normalization."""

import pytest

from outline_forge.config import TracerConfig
from outline_forge.core.extractor import ClipPathExtractor
from outline_forge.core.normalizer import to_clip_polygon
from outline_forge.domain import Point, RasterMask


def filled_mask(width: int, height: int) -> RasterMask:
    return RasterMask(width, height, (True,) * (width * height))


def square_in_mask(size: int, start: int, end: int) -> RasterMask:
    """Mask of `size` x `size` with an opaque square from start to end inclusive."""
    cells = tuple(
        start <= x <= end and start <= y <= end for y in range(size) for x in range(size)
    )
    return RasterMask(size, size, cells)


@pytest.fixture
def extractor() -> ClipPathExtractor:
    return ClipPathExtractor()


class TestNormalizer:
    """Tests for percentage polygon formatting."""

    def test_pixel_centers(self):
        """Points are sampled at pixel centers."""
        clip = to_clip_polygon([Point(0, 0), Point(3, 0), Point(3, 3)], 4, 4)
        assert clip == "polygon(12.50% 12.50%, 87.50% 12.50%, 87.50% 87.50%)"

    def test_non_square_mask(self):
        """Horizontal and vertical percentages use their own dimension."""
        clip = to_clip_polygon([Point(1, 0), Point(3, 1), Point(0, 1)], 4, 2)
        assert clip == "polygon(37.50% 25.00%, 87.50% 75.00%, 12.50% 75.00%)"

    @pytest.mark.parametrize(("width", "height"), [(0, 10), (10, 0), (-1, 5)])
    def test_empty_size(self, width, height):
        """A mask without area has no polygon."""
        assert to_clip_polygon([Point(0, 0)], width, height) is None


class TestClipPathExtractor:
    """Tests for the end-to-end raster pipeline."""

    def test_filled_square(self, extractor):
        """A fully opaque square reduces to its four corners."""
        result = extractor.run(filled_mask(20, 20))

        assert result.succeeded
        assert len(result.boundary) == 76
        assert result.simplified == [Point(0, 0), Point(19, 0), Point(19, 19), Point(0, 19)]
        assert result.clip_path == (
            "polygon(2.50% 2.50%, 97.50% 2.50%, 97.50% 97.50%, 2.50% 97.50%)"
        )

    def test_square_with_margin(self, extractor):
        """Transparent margins show up in the percentages."""
        clip = extractor.extract(square_in_mask(30, 5, 24))
        assert clip == "polygon(18.33% 18.33%, 81.67% 18.33%, 81.67% 81.67%, 18.33% 81.67%)"

    def test_empty_mask(self, extractor):
        """A zero-size mask yields nothing."""
        assert extractor.extract(RasterMask(0, 0, ())) is None

    def test_transparent_mask(self, extractor):
        """A mask without foreground yields nothing."""
        result = extractor.run(RasterMask.from_rows(["....", "...."]))
        assert not result.succeeded
        assert result.boundary == []

    def test_single_pixel(self, extractor):
        """One opaque pixel is not enough for a polygon."""
        assert extractor.extract(RasterMask.from_rows(["...", ".#.", "..."])) is None

    def test_small_region_collapses(self, extractor):
        """A 2x2 region simplifies below three vertices at the default tolerance."""
        result = extractor.run(RasterMask.from_rows(["##", "##"]))
        assert len(result.boundary) == 4
        assert result.simplified == [Point(0, 0), Point(1, 1)]
        assert result.clip_path is None

    def test_small_region_with_fine_tolerance(self):
        """A finer tolerance keeps every corner of a small region."""
        extractor = ClipPathExtractor(TracerConfig(simplify_tolerance=0.5))
        clip = extractor.extract(RasterMask.from_rows(["##", "##"]))
        assert clip == "polygon(25.00% 25.00%, 75.00% 25.00%, 75.00% 75.00%, 25.00% 75.00%)"

    def test_no_closing_duplicate(self, extractor):
        """The simplified ring does not repeat its first point."""
        result = extractor.run(square_in_mask(12, 2, 9))
        assert result.simplified[0] != result.simplified[-1]

    def test_mask_from_alpha_uses_threshold(self):
        """The configured alpha threshold decides foreground."""
        extractor = ClipPathExtractor(TracerConfig(alpha_threshold=128))
        mask = extractor.mask_from_alpha(3, 1, [127, 128, 255])
        assert mask.cells == (False, True, True)

    def test_mask_from_rgba(self, extractor):
        """RGBA buffers are thresholded on their alpha channel."""
        rgba = bytes([255, 0, 0, 0]) * 2 + bytes([0, 0, 0, 8])
        mask = extractor.mask_from_rgba(3, 1, rgba)
        assert mask.cells == (False, False, True)

    def test_rgba_pipeline(self, extractor):
        """An opaque RGBA image extracts the same polygon as a boolean mask."""
        rgba = bytes([10, 20, 30, 255]) * (20 * 20)
        mask = extractor.mask_from_rgba(20, 20, rgba)
        assert extractor.extract(mask) == extractor.extract(filled_mask(20, 20))
