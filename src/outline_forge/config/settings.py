"""Configuration settings for Outline Forge."""

from pathlib import Path

from pydantic import BaseModel, Field


class TracerConfig(BaseModel):
    """Configuration for extracting a clip polygon from an alpha mask."""

    alpha_threshold: int = Field(
        default=8,
        ge=1,
        le=255,
        description="Minimum alpha value for a pixel to count as foreground",
    )
    simplify_tolerance: float = Field(
        default=1.2,
        ge=0.0,
        le=50.0,
        description="Douglas-Peucker tolerance in mask pixels",
    )
    iteration_factor: int = Field(
        default=4,
        ge=1,
        le=16,
        description="Boundary walk is capped at iteration_factor * width * height steps",
    )

    def max_iterations(self, width: int, height: int) -> int:
        """Get the boundary walk cap for a mask of the given size."""
        return self.iteration_factor * width * height


class GeometryConfig(BaseModel):
    """Numeric tolerances for polygon offsetting.

    Both values are in screen pixels.
    """

    parallel_epsilon: float = Field(
        default=1e-5,
        gt=0.0,
        le=0.1,
        description="Determinant magnitude below which adjacent edges are treated as parallel",
    )
    min_offset: float = Field(
        default=1e-3,
        ge=0.0,
        le=1.0,
        description="Offsets smaller than this leave a polygon unchanged",
    )


class OutlineConfig(BaseModel):
    """Configuration for resolving outline styles."""

    min_outline_width: float = Field(
        default=0.5,
        ge=0.0,
        description="Minimum outline width (px) before an outline is drawn",
    )
    fallback_color: str = Field(
        default="rgba(99, 102, 241, 0.9)",
        description="Color used when the style record carries none",
    )


class StageConfig(BaseModel):
    """Configuration for the spotlight stage cut around a highlighted element."""

    padding: float = Field(
        default=10.0,
        ge=0.0,
        le=200.0,
        description="Padding (px) between the element and the stage edge",
    )
    radius: float = Field(
        default=5.0,
        ge=0.0,
        le=200.0,
        description="Corner radius (px) of the plain rounded stage",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class OutlineForgeSettings(BaseModel):
    """Main application settings."""

    tracer: TracerConfig = Field(default_factory=TracerConfig)
    geometry: GeometryConfig = Field(default_factory=GeometryConfig)
    outline: OutlineConfig = Field(default_factory=OutlineConfig)
    stage: StageConfig = Field(default_factory=StageConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> OutlineForgeSettings:
    """Get default application settings."""
    return OutlineForgeSettings()
