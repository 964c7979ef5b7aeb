"""CLI application entry point for outline-forge.

This module provides a developer command line over the engine using Typer.
"""

import json
import re
from pathlib import Path
from typing import Annotated

import typer

from outline_forge import __version__
from outline_forge.cli.output import (
    console,
    print_error,
    print_header,
    print_mask_info,
    print_outline,
    print_path,
    print_step,
    print_success,
)
from outline_forge.config import (
    LoggingConfig,
    OutlineForgeSettings,
    StageConfig,
    TracerConfig,
)
from outline_forge.core import OutlineEngine
from outline_forge.domain import ComputedStyle, RasterMask, Rect
from outline_forge.exceptions import (
    GeometryParseError,
    MaskError,
    MaskFileError,
    OutlineForgeError,
)
from outline_forge.utils import configure_logging

RECT_RE = re.compile(r"^\s*(-?[\d.]+)\s*,\s*(-?[\d.]+)\s*,\s*([\d.]+)\s*,\s*([\d.]+)\s*$")
SIZE_RE = re.compile(r"^\s*([\d.]+)\s*[xX]\s*([\d.]+)\s*$")

# Create the Typer app
app = typer.Typer(
    name="outline-forge",
    help="Compute outline ring paths, spotlight masks and traced clip polygons.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Outline Forge[/bold blue] v{__version__}")
        raise typer.Exit()


def parse_rect(value: str) -> Rect:
    """Parse `x,y,width,height` into a Rect.

    Raises:
        GeometryParseError: If the value is not four comma-separated numbers
    """
    match = RECT_RE.match(value)
    if not match:
        raise GeometryParseError(value, "x,y,width,height")
    try:
        x, y, width, height = (float(part) for part in match.groups())
    except ValueError as e:
        raise GeometryParseError(value, "x,y,width,height") from e
    return Rect(x, y, width, height)


def parse_size(value: str) -> tuple[float, float]:
    """Parse `WIDTHxHEIGHT`.

    Raises:
        GeometryParseError: If the value is not two numbers separated by x
    """
    match = SIZE_RE.match(value)
    if not match:
        raise GeometryParseError(value, "WIDTHxHEIGHT")
    try:
        return float(match.group(1)), float(match.group(2))
    except ValueError as e:
        raise GeometryParseError(value, "WIDTHxHEIGHT") from e


def load_mask_file(path: Path, foreground: str) -> RasterMask:
    """Load a text mask, one row per line, `foreground` characters set.

    Raises:
        MaskFileError: If the file cannot be read or holds no cells
    """
    try:
        rows = path.read_text(encoding="utf-8").splitlines()
    except (OSError, UnicodeDecodeError) as e:
        raise MaskFileError(str(path), str(e)) from e
    mask = RasterMask.from_rows(rows, foreground=foreground)
    if mask.is_empty():
        raise MaskFileError(str(path), "mask has no cells")
    return mask


def _style_for(
    radius: str | None,
    clip_path: str | None,
    outline_style: str = "none",
    width: str | None = None,
    offset: str | None = None,
    color: str | None = None,
) -> ComputedStyle:
    return ComputedStyle(
        outline_style=outline_style,
        outline_width=width,
        outline_offset=offset,
        outline_color=color,
        clip_path=clip_path,
        border_top_left_radius=radius,
        border_top_right_radius=radius,
        border_bottom_right_radius=radius,
        border_bottom_left_radius=radius,
    )


@app.callback()
def main_callback(
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Outline ring geometry for inspection and tour overlays."""
    logging_config = LoggingConfig(log_file=log_file, log_level=log_level)
    configure_logging(
        log_file=logging_config.log_file,
        console_level=logging_config.log_level,
        file_level=logging_config.file_log_level,
    )


@app.command()
def outline(
    rect: Annotated[
        str,
        typer.Argument(help="Element box as x,y,width,height", show_default=False),
    ],
    width: Annotated[
        str,
        typer.Option("--width", "-w", help="Outline width (e.g. 2px, thin, medium)"),
    ] = "2px",
    offset: Annotated[
        str,
        typer.Option("--offset", "-o", help="Outline offset, negative for inward"),
    ] = "0",
    style: Annotated[
        str,
        typer.Option("--style", "-s", help="Outline style (solid|dotted|dashed|double|...)"),
    ] = "solid",
    color: Annotated[
        str | None,
        typer.Option("--color", "-c", help="Outline color"),
    ] = None,
    radius: Annotated[
        str | None,
        typer.Option("--radius", "-r", help="Corner radius for all corners (e.g. 12px, '10% 20%')"),
    ] = None,
    clip_path: Annotated[
        str | None,
        typer.Option("--clip-path", help="Clip region, e.g. 'polygon(50% 0%, 100% 100%, 0% 100%)'"),
    ] = None,
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print SVG attributes as JSON"),
    ] = False,
) -> None:
    """Compute the outline path around an element box.

    Example:
        outline-forge outline 20,40,120,80 --radius 30px --width 4px --offset 6px
    """
    try:
        element = parse_rect(rect)
        engine = OutlineEngine(OutlineForgeSettings())
        resolved = engine.resolve(
            element,
            _style_for(radius, clip_path, style, width, offset, color),
        )
    except OutlineForgeError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    if resolved is None:
        print_error(
            "No outline to draw",
            details="The style is 'none' or the width is below the minimum outline width.",
        )
        raise typer.Exit(code=1)

    if as_json:
        console.print_json(json.dumps(resolved.to_dict()))
        return

    print_header(__version__)
    print_step("Outline")
    print_outline(resolved)
    print_step("Path")
    print_path(resolved.path.to_svg())


@app.command()
def spotlight(
    rect: Annotated[
        str,
        typer.Argument(help="Element box as x,y,width,height", show_default=False),
    ],
    viewport: Annotated[
        str,
        typer.Option("--viewport", help="Viewport size as WIDTHxHEIGHT"),
    ] = "1280x720",
    padding: Annotated[
        float,
        typer.Option("--padding", "-p", help="Stage padding around the element", min=0.0),
    ] = 10.0,
    stage_radius: Annotated[
        float,
        typer.Option("--stage-radius", help="Corner radius of the plain stage", min=0.0),
    ] = 5.0,
    radius: Annotated[
        str | None,
        typer.Option("--radius", "-r", help="Element corner radius"),
    ] = None,
    clip_path: Annotated[
        str | None,
        typer.Option("--clip-path", help="Element clip region"),
    ] = None,
) -> None:
    """Compute the spotlight mask path (viewport plus stage hole)."""
    try:
        element = parse_rect(rect)
        viewport_width, viewport_height = parse_size(viewport)
        settings = OutlineForgeSettings(
            stage=StageConfig(padding=padding, radius=stage_radius),
        )
        engine = OutlineEngine(settings)
        mask_path = engine.spotlight_mask(
            element, _style_for(radius, clip_path), viewport_width, viewport_height
        )
    except OutlineForgeError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    for line in mask_path.splitlines():
        print_path(line)


@app.command()
def trace(
    mask_file: Annotated[
        Path,
        typer.Argument(help="Text mask file, one row per line", show_default=False),
    ],
    tolerance: Annotated[
        float,
        typer.Option("--tolerance", "-t", help="Simplification tolerance in cells", min=0.0),
    ] = 1.2,
    foreground: Annotated[
        str,
        typer.Option("--foreground", help="Characters marking foreground cells"),
    ] = "#",
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Print only the polygon"),
    ] = False,
) -> None:
    """Trace a text mask and print its clip polygon."""
    if not mask_file.is_file():
        print_error(
            f"Mask file not found: {mask_file}",
            details=f"The file '{mask_file}' does not exist or is not a file.",
        )
        raise typer.Exit(code=1)

    try:
        mask = load_mask_file(mask_file, foreground)
        settings = OutlineForgeSettings(tracer=TracerConfig(simplify_tolerance=tolerance))
        engine = OutlineEngine(settings)
        clip_path = engine.extract_clip_path(mask)
    except MaskError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    if clip_path is None:
        print_error(
            "No usable boundary found",
            details="The mask is empty or its boundary collapsed to fewer than 3 vertices.",
        )
        raise typer.Exit(code=1)

    if quiet:
        print_path(clip_path)
        return

    print_header(__version__)
    print_step("Mask")
    print_mask_info(mask)
    print_step("Clip polygon")
    print_path(clip_path)
    print_success("Traced")


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
