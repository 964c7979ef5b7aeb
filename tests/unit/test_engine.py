"""Tests for the engine facade, its logging and statistics."""

from unittest.mock import MagicMock

import pytest

from outline_forge.config import OutlineConfig, OutlineForgeSettings, StageConfig, TracerConfig
from outline_forge.core.engine import OutlineEngine
from outline_forge.domain import ComputedStyle, OutlineOverrides, RasterMask, Rect
from outline_forge.utils import EngineStats


@pytest.fixture
def mock_logger() -> MagicMock:
    return MagicMock()


@pytest.fixture
def engine(mock_logger) -> OutlineEngine:
    return OutlineEngine(logger=mock_logger)


def solid(width: str = "2px", **kwargs) -> ComputedStyle:
    return ComputedStyle(outline_style="solid", outline_width=width, **kwargs)


class TestResolve:
    """Tests for outline resolution through the engine."""

    def test_rect_outline(self, engine, mock_logger):
        """A styled element resolves and is counted."""
        resolved = engine.resolve(Rect(0, 0, 10, 10), solid("2px", outline_color="red"))

        assert resolved is not None
        assert resolved.path.to_svg() == (
            "M 0.00 -1.00 H 10.00 A 1.00 1.00 0 0 1 11.00 0.00 "
            "V 10.00 A 1.00 1.00 0 0 1 10.00 11.00 "
            "H 0.00 A 1.00 1.00 0 0 1 -1.00 10.00 "
            "V 0.00 A 1.00 1.00 0 0 1 0.00 -1.00 Z"
        )
        assert resolved.color == "red"
        assert engine.stats.resolved_count == 1
        assert engine.stats.rect_count == 1
        mock_logger.debug.assert_called_once_with(
            "Outline resolved", commands=10, source="rect", style="solid"
        )

    def test_polygon_outline(self, engine):
        """Clip polygons are counted separately."""
        style = solid(clip_path="polygon(50% 0%, 100% 100%, 0% 100%)")
        resolved = engine.resolve(Rect(50, 75, 80, 80), style)

        assert resolved.from_polygon
        assert engine.stats.polygon_count == 1
        assert engine.stats.polygon_ratio == 1.0

    def test_no_outline(self, engine, mock_logger):
        """Unstyled elements are skipped."""
        assert engine.resolve(Rect(0, 0, 10, 10), ComputedStyle()) is None
        assert engine.stats.skipped_count == 1
        mock_logger.debug.assert_called_once_with(
            "Outline skipped", reason="no outline", width=None
        )

    def test_too_thin(self, engine, mock_logger):
        """Outlines below the minimum width are skipped."""
        assert engine.resolve(Rect(0, 0, 10, 10), solid("0.4px")) is None
        mock_logger.debug.assert_called_once_with("Outline skipped", reason="too thin", width=0.4)

    def test_minimum_width_configurable(self, mock_logger):
        """The minimum width comes from the outline settings."""
        settings = OutlineForgeSettings(outline=OutlineConfig(min_outline_width=0.1))
        engine = OutlineEngine(settings, logger=mock_logger)
        assert engine.resolve(Rect(0, 0, 10, 10), solid("0.4px")) is not None

    def test_overrides(self, engine):
        """Overrides are passed through to style resolution."""
        resolved = engine.resolve(
            Rect(0, 0, 10, 10), ComputedStyle(), OutlineOverrides(width="4px", style="dashed")
        )
        assert resolved.width == 4.0
        assert resolved.dash_pattern.to_svg() == "8 5"

    def test_resolve_spec(self, engine):
        """Specs can be resolved without building a path."""
        spec = engine.resolve_spec(solid("thin", outline_offset="2px"))
        assert spec.width == 1.0
        assert spec.inflate == 2.5
        assert engine.stats.resolved_count == 0


class TestExtractClipPath:
    """Tests for mask extraction through the engine."""

    def test_success(self, engine, mock_logger):
        """Extracted polygons are logged and counted."""
        mask = RasterMask(20, 20, (True,) * 400)
        clip = engine.extract_clip_path(mask)

        assert clip == "polygon(2.50% 2.50%, 97.50% 2.50%, 97.50% 97.50%, 2.50% 97.50%)"
        assert engine.stats.extracted_count == 1
        mock_logger.info.assert_called_once_with(
            "Clip polygon extracted", mask="20x20", boundary_points=76, vertices=4
        )

    def test_failure(self, engine, mock_logger):
        """Unusable masks log a warning."""
        mask = RasterMask.from_rows(["...", ".#.", "..."])
        assert engine.extract_clip_path(mask) is None
        assert engine.stats.extraction_failures == 1
        mock_logger.warning.assert_called_once_with(
            "Clip polygon extraction failed", mask="3x3", boundary_points=1
        )

    def test_tracer_settings(self, mock_logger):
        """The tracer settings reach the extractor."""
        settings = OutlineForgeSettings(tracer=TracerConfig(simplify_tolerance=0.5))
        engine = OutlineEngine(settings, logger=mock_logger)
        assert engine.extract_clip_path(RasterMask.from_rows(["##", "##"])) is not None


class TestSpotlightMask:
    """Tests for spotlight masks through the engine."""

    def test_stage_settings(self, mock_logger):
        """Stage padding and radius come from the settings."""
        settings = OutlineForgeSettings(stage=StageConfig(padding=0, radius=0))
        engine = OutlineEngine(settings, logger=mock_logger)

        mask = engine.spotlight_mask(Rect(100, 100, 50, 20), ComputedStyle(), 800, 600)

        assert mask.splitlines()[1] == "M 100.00 100.00 H 150.00 V 120.00 H 100.00 V 100.00 Z"


class TestEngineStats:
    """Tests for the statistics record."""

    def test_empty_ratio(self):
        """No resolved outlines give a zero ratio."""
        assert EngineStats().polygon_ratio == 0.0

    def test_ratio(self):
        """The ratio is polygons over resolved outlines."""
        stats = EngineStats(resolved_count=4, polygon_count=1, rect_count=3)
        assert stats.polygon_ratio == 0.25
