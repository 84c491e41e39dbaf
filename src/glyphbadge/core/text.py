"""Text run layout.

render_text_path walks the characters of a text run, places each glyph at
the running cursor and appends one contiguous path for the whole run to a
caller-owned buffer. The return value is the run width in output units.
"""

import html
from enum import Enum

from glyphbadge.domain.geometry import Point
from glyphbadge.exceptions import InvalidCharacterError
from glyphbadge.fonts.base import Font
from glyphbadge.fonts.pen import PathSink

MARKUP_UNSAFE_CHARACTERS = frozenset("&<")


class MissingGlyphPolicy(str, Enum):
    """How characters without a glyph take part in layout.

    SKIP drops the character entirely: no advance and no letter spacing.
    ZERO_ADVANCE keeps its slot with a zero advance, so letter spacing
    still applies around it.
    """

    SKIP = "skip"
    ZERO_ADVANCE = "zero_advance"


def validate_text(text: str) -> None:
    """Reject text that would break markup well-formedness.

    Raises:
        InvalidCharacterError: If text contains '&' or '<'
    """
    for character in text:
        if character in MARKUP_UNSAFE_CHARACTERS:
            raise InvalidCharacterError(text, character)


def escape_text(text: str) -> str:
    """Escape text for embedding as markup character data."""
    return html.escape(text, quote=True)


def render_text_path(
    font: Font,
    origin: Point[int],
    text: str,
    buffer: list[str],
    letter_spacing: float = 0.0,
    missing_glyphs: MissingGlyphPolicy = MissingGlyphPolicy.SKIP,
) -> int:
    """Render a text run as path data.

    Each visible glyph starts with an absolute move to its origin followed
    by the glyph's relative path, so cached glyph paths stay position
    independent.

    Args:
        font: Font capability used to render glyphs
        origin: Baseline origin of the run in output units
        text: Text to render
        buffer: Buffer the path fragments are appended to
        letter_spacing: Extra space between glyphs in font design units
        missing_glyphs: Layout policy for characters the font lacks

    Returns:
        Horizontal advance consumed by the run, truncated to whole units
    """
    sink = PathSink(font.scale, font.precision, buffer)
    spacing = letter_spacing * font.scale

    cursor_x = float(origin.x)
    cursor_y = float(origin.y)
    placed = 0

    for character in text:
        glyph = font.render_glyph(character)
        if glyph is None and missing_glyphs is MissingGlyphPolicy.SKIP:
            continue

        if placed:
            cursor_x += spacing
        placed += 1

        if glyph is None:
            continue
        if not glyph.is_empty():
            sink.set_last(0.0, 0.0)
            sink.move_to_abs(Point(cursor_x, cursor_y))
            sink.write(glyph.path)
        cursor_x += glyph.horizontal_advance

    return int(cursor_x) - origin.x
