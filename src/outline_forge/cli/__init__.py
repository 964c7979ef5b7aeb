"""Command-line interface for outline-forge.

This module provides the CLI using Typer with rich output for
developer inspection of outline geometry.

Key features:
- Outline paths for a box with radii or a clip polygon
- Spotlight mask paths for tour overlays
- Clip polygon tracing of text masks
"""

from outline_forge.cli.app import app, cli, main

__all__ = ["app", "cli", "main"]
