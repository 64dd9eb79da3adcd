"""Command-line interface for arrowfont.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Outline inspection as a table or JSON
- Glyph summary for the arrow glyph set
- Detailed error reporting for out-of-range stroke parameters
"""

from arrowfont.cli.app import app, cli, main

__all__ = ["app", "cli", "main"]
