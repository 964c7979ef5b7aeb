"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from outline_forge.domain import RasterMask, ResolvedOutline

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Outline Forge[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_path(path_data: str) -> None:
    """Print SVG path data without markup interpretation."""
    console.print(Text(path_data), soft_wrap=True)


def print_outline(resolved: ResolvedOutline) -> None:
    """Print a resolved outline with its stroke metadata.

    Args:
        resolved: Outline to describe
    """
    source = "clip polygon" if resolved.from_polygon else "rounded rect"
    console.print(
        f"  {resolved.style.value} {SYM_DOT} {resolved.width:g}px {SYM_DOT} {source}"
    )

    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_row("stroke", Text(resolved.color))
    table.add_row("stroke-width", f"{resolved.width:g}")
    dash = resolved.dash_pattern.to_svg() if resolved.dash_pattern else "none"
    table.add_row("stroke-dasharray", dash)
    table.add_row("commands", str(len(resolved.path)))
    console.print(table)


def print_mask_info(mask: RasterMask) -> None:
    """Print mask size and coverage.

    Args:
        mask: Mask loaded from file
    """
    total = mask.width * mask.height
    coverage = mask.foreground_count() / total * 100 if total else 0.0
    console.print(f"  {mask.width}x{mask.height} cells {SYM_DOT} {coverage:.1f}% foreground")


def print_success(message: str) -> None:
    """Print a success line."""
    console.print(f"\n[bold green]{SYM_OK}[/bold green] {message}")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
