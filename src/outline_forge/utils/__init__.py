"""Utility functions for outline-forge.

This module provides utility functions including:

- Logging setup and configuration
- Structured logging of outline resolution and mask extraction
"""

from outline_forge.utils.logging import (
    EngineStats,
    OutlineLogger,
    configure_logging,
)

__all__ = [
    "EngineStats",
    "OutlineLogger",
    "configure_logging",
]
