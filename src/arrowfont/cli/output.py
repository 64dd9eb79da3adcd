"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from rich.console import Console
from rich.table import Table

from arrowfont.core.geometry import signed_area
from arrowfont.domain import POINT_NAMES, GlyphOutline, OutlinePolygon

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
    console.print(f"\n[bold]Arrowfont[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_stroke_info(triangle_size: float, angle_deg: float, stroke_width: float) -> None:
    """Print the stroke parameters.

    Args:
        triangle_size: Baseline distance from back edge to tip
        angle_deg: Leg angle in degrees
        stroke_width: Stroke thickness
    """
    console.print(
        f"  size {triangle_size:g} {SYM_DOT} angle {angle_deg:g}° {SYM_DOT} width {stroke_width:g}"
    )


def print_outline(outline: OutlinePolygon) -> None:
    """Print the outline points as a table.

    Args:
        outline: Computed chevron outline
    """
    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("#", justify="right")
    table.add_column("point")
    table.add_column("x", justify="right")
    table.add_column("y", justify="right")

    for idx, (name, point) in enumerate(zip(POINT_NAMES, outline.points)):
        table.add_row(str(idx), name, f"{point.x:.3f}", f"{point.y:.3f}")

    console.print(table)

    area = signed_area(outline.points)
    winding = "clockwise" if area < 0 else "counter-clockwise"
    console.print(f"\n  area {abs(area):.1f} {SYM_DOT} {winding}")


def print_glyphs(glyphs: list[GlyphOutline]) -> None:
    """Print a summary table of built glyphs.

    Args:
        glyphs: Glyph outlines in font order
    """
    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("glyph")
    table.add_column("code point")
    table.add_column("advance", justify="right")
    table.add_column("points", justify="right")
    table.add_column("bounds", justify="right")

    for glyph in glyphs:
        code = f"U+{glyph.unicode:04X}" if glyph.unicode is not None else "-"
        min_x, min_y, max_x, max_y = glyph.bounding_box()
        table.add_row(
            glyph.name,
            code,
            f"{glyph.advance_width:g}",
            str(glyph.point_count),
            f"{min_x:.0f},{min_y:.0f} {max_x:.0f},{max_y:.0f}",
        )

    console.print(table)


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
