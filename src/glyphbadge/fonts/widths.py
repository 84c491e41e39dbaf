"""Approximate fixed-width-table font.

WidthTableFont estimates text width from a precomputed table of Verdana
advance widths instead of parsing a font. It produces no outlines, so the
composer draws its text with <text> elements and leaves glyph shaping to
the viewer.
"""

from glyphbadge.constants import LINE_HEIGHT
from glyphbadge.domain.glyph import Glyph
from glyphbadge.fonts.base import Font

VERDANA_UNITS_PER_EM = 2048
VERDANA_DESCENDER = -423

# Verdana advance widths in design units for code points 32 (space) to 126 (~)
_VERDANA_ADVANCES = (
    720, 821, 942, 1675, 1303, 2198, 1495, 550, 924, 924, 1303, 1675, 745, 924, 745, 924,
    1303, 1303, 1303, 1303, 1303, 1303, 1303, 1303, 1303, 1303, 924, 924, 1675, 1675, 1675, 1122,
    2048, 1401, 1405, 1430, 1577, 1294, 1178, 1587, 1540, 862, 924, 1407, 1141, 1727, 1532, 1612,
    1235, 1612, 1423, 1403, 1255, 1499, 1401, 2028, 1403, 1255, 1403, 924, 924, 924, 1675, 1303,
    1303, 1229, 1260, 1079, 1260, 1194, 721, 1260, 1290, 562, 681, 1186, 562, 1981, 1290, 1208,
    1260, 1260, 842, 1034, 807, 1290, 1186, 1636, 1186, 1186, 1044, 1303, 924, 1303, 1675,
)

TABLE_FONT_SIZE = 110


def _build_table(font_size: int) -> tuple[int, ...]:
    scaled = (
        int(advance * font_size / VERDANA_UNITS_PER_EM + 0.5)
        for advance in _VERDANA_ADVANCES
    )
    return (0,) * 32 + tuple(scaled) + (0,)


#: Widths of code points 0-127 for Verdana at font size 110
VERDANA_110_WIDTHS: tuple[int, ...] = _build_table(TABLE_FONT_SIZE)


class WidthTableFont(Font):
    """Font backend that knows only per-character widths.

    Characters past the end of the table use the width of "@". Control
    characters have no glyph.
    """

    has_outlines = False

    def __init__(
        self,
        font_size: float = LINE_HEIGHT,
        table: tuple[int, ...] = VERDANA_110_WIDTHS,
        fallback: str = "@",
    ) -> None:
        self._table = table
        self._fallback = table[ord(fallback)]
        self._font_size = font_size
        self._scale = font_size / TABLE_FONT_SIZE
        self._height = int(
            font_size + VERDANA_DESCENDER * font_size / VERDANA_UNITS_PER_EM
        )

    @property
    def height(self) -> int:
        return self._height

    @property
    def scale(self) -> float:
        return self._scale

    @property
    def precision(self) -> int:
        return 0

    @property
    def font_size(self) -> float:
        return self._font_size

    def char_width(self, character: str) -> int:
        """Width of one character in table units."""
        code_point = ord(character)
        if code_point < len(self._table):
            return self._table[code_point]
        return self._fallback

    def text_width(self, text: str) -> int:
        """Width of a text run in table units."""
        return sum(self.char_width(c) for c in text)

    def render_glyph(self, character: str) -> Glyph | None:
        if ord(character) < 32 or character == "\x7f":
            return None
        return Glyph(path=None, horizontal_advance=self.char_width(character) * self._scale)
