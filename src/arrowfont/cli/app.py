"""CLI application entry point for arrowfont.

This module provides the main CLI interface using Typer.
"""

import json
from pathlib import Path
from typing import Annotated

import typer

from arrowfont import __version__
from arrowfont.cli.output import (
    console,
    print_error,
    print_glyphs,
    print_header,
    print_outline,
    print_step,
    print_stroke_info,
    print_success,
)
from arrowfont.config import ArrowFontSettings, GlyphConfig, LoggingConfig, StrokeSpec
from arrowfont.core import StrokeOutliner, make_glyphs
from arrowfont.exceptions import ArrowFontError, StrokeSpecError
from arrowfont.utils import OutlineLogger, configure_logging

# Create the Typer app
app = typer.Typer(
    name="arrowfont",
    help="Compute stroke outlines for arrow and chevron glyphs.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Arrowfont[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
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
    """Compute stroke outlines for arrow and chevron glyphs."""


SizeOption = Annotated[
    float,
    typer.Option("--size", "-s", help="Baseline distance from back edge to tip"),
]
AngleOption = Annotated[
    float,
    typer.Option("--angle", "-a", help="Leg angle relative to the baseline (0-90, exclusive)"),
]
WidthOption = Annotated[
    float,
    typer.Option("--width", "-w", help="Stroke width in font units"),
]
LogFileOption = Annotated[
    Path | None,
    typer.Option("--log-file", help="Write detailed logs to file"),
]
LogLevelOption = Annotated[
    str,
    typer.Option("--log-level", help="Logging level (DEBUG|INFO|WARNING|ERROR)"),
]


def _build_spec(size: float, angle: float, width: float) -> StrokeSpec:
    try:
        return StrokeSpec.checked(triangle_size=size, angle_deg=angle, stroke_width=width)
    except StrokeSpecError as e:
        print_error(str(e), details="Size and width must be positive; angle must be between 0 and 90.")
        raise typer.Exit(code=1) from e


@app.command()
def outline(
    size: SizeOption = 300.0,
    angle: AngleOption = 45.0,
    width: WidthOption = 75.0,
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print the outline as JSON"),
    ] = False,
    log_file: LogFileOption = None,
    log_level: LogLevelOption = "WARNING",
) -> None:
    """Print the six-point outline of a stroked chevron.

    Example:
        arrowfont outline --size 300 --angle 45 --width 75
    """
    spec = _build_spec(size, angle, width)
    settings = ArrowFontSettings(
        logging=LoggingConfig(log_file=log_file, log_level=log_level),
    )
    logger = OutlineLogger(
        configure_logging(
            log_file=settings.logging.log_file,
            console_level=settings.logging.log_level,
            file_level=settings.logging.file_log_level,
            quiet=as_json,
        )
    )

    try:
        result = StrokeOutliner(settings.geometry).outline(spec)
    except ArrowFontError as e:
        logger.log_error("outline", e)
        print_error(str(e))
        raise typer.Exit(code=1) from e

    logger.log_outline(spec.triangle_size, spec.angle_deg, spec.stroke_width, result)

    if as_json:
        typer.echo(json.dumps(result.to_dict(), indent=2))
        return

    print_header(__version__)
    print_step("Chevron outline")
    print_stroke_info(spec.triangle_size, spec.angle_deg, spec.stroke_width)
    console.print()
    print_outline(result)


@app.command()
def glyphs(
    size: SizeOption = 300.0,
    angle: AngleOption = 45.0,
    width: WidthOption = 75.0,
    dash_length: Annotated[
        float,
        typer.Option("--dash-length", help="Length of the dash body", min=1.0),
    ] = 420.0,
    gap: Annotated[
        float,
        typer.Option("--gap", help="Spacing after the dash and chevron", min=0.0),
    ] = 80.0,
    log_file: LogFileOption = None,
    log_level: LogLevelOption = "WARNING",
) -> None:
    """Build the .notdef, dash and chevron glyph outlines and summarize them."""
    spec = _build_spec(size, angle, width)
    settings = ArrowFontSettings(
        glyphs=GlyphConfig(dash_length=dash_length, gap_after_dash=gap, stroke=spec),
        logging=LoggingConfig(log_file=log_file, log_level=log_level),
    )
    logger = OutlineLogger(
        configure_logging(
            log_file=settings.logging.log_file,
            console_level=settings.logging.log_level,
            file_level=settings.logging.file_log_level,
        )
    )

    print_header(__version__)
    print_step("Building glyphs")

    try:
        built = make_glyphs(settings)
    except ArrowFontError as e:
        logger.log_error("glyphs", e)
        print_error(str(e))
        raise typer.Exit(code=1) from e

    for glyph in built:
        logger.log_glyph_built(glyph.name, glyph.point_count)

    console.print()
    print_glyphs(built)
    print_success(f"{logger.stats.glyphs_built} glyphs built")


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
