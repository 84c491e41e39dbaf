"""Rich console output helpers for the CLI.

Badge documents go to stdout, so every human-facing message here is written
to stderr.
"""

from rich.console import Console
from rich.text import Text

console = Console(stderr=True)

# Unicode symbols for consistent visual language
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_success(
    output_path: str,
    width: int,
    height: int,
    duration_ms: float,
) -> None:
    """Print success message with badge summary.

    Args:
        output_path: Path the badge was written to
        width: Image width in pixels
        height: Image height in pixels
        duration_ms: Render time in milliseconds
    """
    line = Text(f"{SYM_OK} ", style="bold green")
    line.append(output_path, style="bold")
    console.print(line)
    console.print(f"  {width}×{height}px {SYM_DOT} {duration_ms:.1f}ms")


def print_font_info(font_source: str, precision: int, approximate: bool) -> None:
    """Print which font backend is in use.

    Args:
        font_source: Font file path or backend description
        precision: Path coordinate precision
        approximate: Whether the width-table backend is used
    """
    line = Text("  ")
    line.append(font_source)
    if approximate:
        line.append(" (width table)")
    else:
        line.append(f" (precision {precision})")
    console.print(line)


def print_cache_stats(hits: int, misses: int) -> None:
    """Print glyph cache counters.

    Args:
        hits: Cache hits
        misses: Cache misses
    """
    console.print(f"  glyph cache {SYM_DOT} {hits} hits {SYM_DOT} {misses} misses")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
