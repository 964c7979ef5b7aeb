"""Logging utilities for Outline Forge."""

import logging
from dataclasses import dataclass
from pathlib import Path

import structlog

_installed_handlers: list[logging.Handler] = []


@dataclass
class EngineStats:
    """Counters collected by an OutlineEngine."""

    resolved_count: int = 0
    skipped_count: int = 0
    polygon_count: int = 0
    rect_count: int = 0
    extracted_count: int = 0
    extraction_failures: int = 0

    @property
    def polygon_ratio(self) -> float:
        """Share of resolved outlines that followed a clip polygon."""
        if self.resolved_count:
            return self.polygon_count / self.resolved_count
        return 0.0


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "INFO",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Reconfiguring replaces the handlers installed by a previous call.
    while _installed_handlers:
        handler = _installed_handlers.pop()
        root_logger.removeHandler(handler)
        handler.close()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)
        _installed_handlers.append(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)
    _installed_handlers.append(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("outline_forge")
    logger.debug(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=console_level,
    )

    return logger


class OutlineLogger:
    """Logger for tracking outline resolution and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = EngineStats()

    def log_outline_resolved(self, path_commands: int, from_polygon: bool, style: str) -> None:
        """Log a resolved outline."""
        self._logger.debug(
            "Outline resolved",
            commands=path_commands,
            source="polygon" if from_polygon else "rect",
            style=style,
        )
        self._stats.resolved_count += 1
        if from_polygon:
            self._stats.polygon_count += 1
        else:
            self._stats.rect_count += 1

    def log_outline_skipped(self, reason: str, width: float | None = None) -> None:
        """Log an element that gets no outline."""
        self._logger.debug("Outline skipped", reason=reason, width=width)
        self._stats.skipped_count += 1

    def log_extraction(self, width: int, height: int, boundary: int, vertices: int) -> None:
        """Log a successful clip polygon extraction."""
        self._logger.info(
            "Clip polygon extracted",
            mask=f"{width}x{height}",
            boundary_points=boundary,
            vertices=vertices,
        )
        self._stats.extracted_count += 1

    def log_extraction_failed(self, width: int, height: int, boundary: int) -> None:
        """Log a mask that yielded no usable polygon."""
        self._logger.warning(
            "Clip polygon extraction failed",
            mask=f"{width}x{height}",
            boundary_points=boundary,
        )
        self._stats.extraction_failures += 1

    @property
    def stats(self) -> EngineStats:
        """Get current statistics."""
        return self._stats
