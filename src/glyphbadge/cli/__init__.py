"""Command-line interface for glyphbadge.

This module provides the CLI using Typer with Rich output for
user-friendly feedback on stderr, leaving stdout for the SVG document.
"""

from glyphbadge.cli.app import cli, main

__all__ = ["cli", "main"]
