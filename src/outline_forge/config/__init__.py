"""Configuration management for outline-forge.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- TracerConfig: Raster tracing and simplification settings
- GeometryConfig: Numeric tolerances for polygon offsetting
- OutlineConfig: Outline style resolution settings
- StageConfig: Spotlight stage settings
- LoggingConfig: Logging settings
- OutlineForgeSettings: Main application settings
"""

from outline_forge.config.settings import (
    GeometryConfig,
    LoggingConfig,
    OutlineConfig,
    OutlineForgeSettings,
    StageConfig,
    TracerConfig,
    get_default_settings,
)

__all__ = [
    "GeometryConfig",
    "LoggingConfig",
    "OutlineConfig",
    "OutlineForgeSettings",
    "StageConfig",
    "TracerConfig",
    "get_default_settings",
]
