"""CLI application entry point for glyphbadge.

This module provides the main CLI interface using Typer.
"""

import io
import sys
from pathlib import Path
from typing import Annotated

import typer

from glyphbadge import __version__
from glyphbadge.cli.output import (
    print_cache_stats,
    print_error,
    print_font_info,
    print_success,
)
from glyphbadge.config import BadgeSettings, FontConfig, LayoutConfig, LoggingConfig
from glyphbadge.core.text import MissingGlyphPolicy
from glyphbadge.domain import Color, Style
from glyphbadge.exceptions import (
    FontError,
    FontLoadError,
    GlyphBadgeError,
    UnrecognizedColorError,
    UnrecognizedStyleError,
)
from glyphbadge.fonts import CachedFont
from glyphbadge.renderer import BadgeRenderer
from glyphbadge.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="glyphbadge",
    help="Render SVG status badges with text drawn from font outlines.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"glyphbadge v{__version__}")
        raise typer.Exit()


@app.command()
def render(
    status: Annotated[
        str,
        typer.Argument(
            help="Status text (right side of the badge)",
            show_default=False,
        ),
    ],
    label: Annotated[
        str | None,
        typer.Option(
            "--label",
            "-l",
            help="Label text (left side of the badge)",
        ),
    ] = None,
    style: Annotated[
        str,
        typer.Option(
            "--style",
            "-s",
            help="Badge style (classic|flat)",
        ),
    ] = "classic",
    color: Annotated[
        str | None,
        typer.Option(
            "--color",
            "-c",
            help="Status background: a color name or RGB/RRGGBB hex",
        ),
    ] = None,
    label_color: Annotated[
        str | None,
        typer.Option(
            "--label-color",
            help="Label background: a color name or RGB/RRGGBB hex",
        ),
    ] = None,
    text_color: Annotated[
        str | None,
        typer.Option(
            "--text-color",
            help="Text color: a color name or RGB/RRGGBB hex",
        ),
    ] = None,
    font: Annotated[
        Path | None,
        typer.Option(
            "--font",
            "-f",
            help="TTF/OTF font file (default: search system fonts)",
        ),
    ] = None,
    precision: Annotated[
        int,
        typer.Option(
            "--precision",
            "-p",
            help="Path coordinate precision (0 = integers only)",
            min=0,
            max=4,
        ),
    ] = 0,
    letter_spacing: Annotated[
        float,
        typer.Option(
            "--letter-spacing",
            help="Extra space between glyphs in font units",
            min=0.0,
        ),
    ] = 0.0,
    missing_glyphs: Annotated[
        MissingGlyphPolicy,
        typer.Option(
            "--missing-glyphs",
            help="How characters missing from the font are laid out",
        ),
    ] = MissingGlyphPolicy.SKIP,
    approximate: Annotated[
        bool,
        typer.Option(
            "--approximate",
            help="Use a Verdana width table and <text> elements instead of outlines",
        ),
    ] = False,
    escape: Annotated[
        bool,
        typer.Option(
            "--escape",
            help="Escape '&' and '<' in text instead of rejecting them",
        ),
    ] = False,
    pretty: Annotated[
        bool,
        typer.Option(
            "--pretty",
            help="Indent the SVG output",
        ),
    ] = False,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output path (default: stdout)",
        ),
    ] = None,
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
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbose console output",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
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
    """Render a badge and write the SVG document to stdout or a file.

    Example:
        glyphbadge passing --label build --style flat -o build.svg
    """
    # Validate mutually exclusive options
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    if approximate and font is not None:
        print_error(
            "Cannot use --font with --approximate",
            details="Approximate badges use a built-in width table and draw no outlines.",
        )
        raise typer.Exit(code=1)

    if font is not None and not font.is_file():
        print_error(
            f"Font file not found: {font}",
            details="Please provide a path to a TTF or OTF font file.",
        )
        raise typer.Exit(code=1)

    try:
        badge_style = Style.from_name(style, approximate=approximate).with_overrides(
            background=_parse_color(color),
            label_background=_parse_color(label_color),
            text_color=_parse_color(text_color),
        )
    except UnrecognizedStyleError as e:
        print_error(str(e), details="Valid values: classic, flat")
        raise typer.Exit(code=1)
    except UnrecognizedColorError as e:
        print_error(
            str(e),
            details="Use a color name (green, blue, red, ...) or RGB/RRGGBB hex",
        )
        raise typer.Exit(code=1)

    settings = BadgeSettings(
        font=FontConfig(
            path=font,
            precision=precision,
            approximate=approximate,
        ),
        layout=LayoutConfig(
            letter_spacing=letter_spacing,
            missing_glyphs=missing_glyphs,
            escape_text=escape,
            pretty=pretty,
        ),
        logging=LoggingConfig(
            log_file=log_file,
            log_level=log_level if not verbose else "INFO",
        ),
    )

    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )

    try:
        renderer = BadgeRenderer(settings, logger=logger)
        if verbose:
            print_font_info(
                font_source=str(font) if font else "default font",
                precision=precision,
                approximate=approximate,
            )

        buffer = io.StringIO()
        layout = renderer.write(buffer, badge_style, status, label)
        document = buffer.getvalue()

        if output is None:
            sys.stdout.write(document)
            sys.stdout.flush()
        else:
            output.write_text(document, encoding="utf-8")

        if output is not None and not quiet:
            print_success(
                output_path=str(output),
                width=layout.image_size.x,
                height=layout.image_size.y,
                duration_ms=renderer.stats.total_time_ms,
            )
        if verbose and isinstance(renderer.font, CachedFont):
            print_cache_stats(renderer.font.stats.hits, renderer.font.stats.misses)

    except FontLoadError as e:
        print_error(f"Could not load font: {e.reason}")
        raise typer.Exit(code=1)
    except FontError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except GlyphBadgeError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except OSError as e:
        print_error(f"Could not write output: {e}")
        raise typer.Exit(code=1)


def _parse_color(value: str | None) -> Color | None:
    if value is None:
        return None
    return Color.parse(value)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
