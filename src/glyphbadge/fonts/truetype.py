"""TrueType/OpenType font adapter.

This module provides TrueTypeFont, which renders characters from a parsed
fontTools TTFont through a PathSink, and helpers to load font files.
"""

import functools
import logging
from pathlib import Path

from fontTools.ttLib import TTFont

from glyphbadge.constants import LINE_HEIGHT
from glyphbadge.domain.glyph import Glyph
from glyphbadge.exceptions import FontFormatError, FontLoadError
from glyphbadge.fonts.base import Font
from glyphbadge.fonts.cache import DEFAULT_CAPACITY, CachedFont
from glyphbadge.fonts.pen import PathSink

logger = logging.getLogger(__name__)

REQUIRED_TABLES = ("head", "hhea", "hmtx", "cmap")

# Searched in order when no font path is configured
DEFAULT_FONT_CANDIDATES = (
    Path("/usr/share/fonts/truetype/noto/NotoSans-Regular.ttf"),
    Path("/usr/share/fonts/noto/NotoSans-Regular.ttf"),
    Path("/usr/share/fonts/google-noto/NotoSans-Regular.ttf"),
    Path("/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf"),
    Path("/usr/share/fonts/dejavu/DejaVuSans.ttf"),
    Path("/usr/share/fonts/TTF/DejaVuSans.ttf"),
    Path("/usr/share/fonts/truetype/liberation/LiberationSans-Regular.ttf"),
    Path("/Library/Fonts/Arial.ttf"),
    Path("/System/Library/Fonts/Supplemental/Verdana.ttf"),
    Path("C:/Windows/Fonts/verdana.ttf"),
)


def _font_source(font: TTFont) -> str:
    reader = getattr(font, "reader", None)
    name = getattr(getattr(reader, "file", None), "name", None)
    return str(name) if name else "<memory>"


def check_tables(font: TTFont) -> None:
    """Ensure a font has the tables badge rendering needs.

    Raises:
        FontFormatError: If a required table is missing
    """
    missing = [tag for tag in REQUIRED_TABLES if tag not in font]
    if missing:
        raise FontFormatError(
            _font_source(font), f"missing required tables: {', '.join(missing)}"
        )


class TrueTypeFont(Font):
    """A parsed font with a target font height and path precision.

    The TTFont is only read, so one parsed font can back many adapters.
    Each adapter owns a scratch buffer that is reused on every call.

    Example:
        adapter = TrueTypeFont(TTFont("NotoSans-Regular.ttf"), font_height=1100)
        glyph = adapter.render_glyph("A")
    """

    def __init__(self, font: TTFont, font_height: float, precision: int = 0) -> None:
        """Initialize the adapter.

        Args:
            font: Parsed font
            font_height: Em size in output units
            precision: Path coordinate precision (0 = integers only)

        Raises:
            FontFormatError: If the font lacks required tables
        """
        check_tables(font)
        units_per_em = font["head"].unitsPerEm  # type: ignore[attr-defined]
        descender = font["hhea"].descent  # type: ignore[attr-defined]

        self._font = font
        self._scale = font_height / units_per_em
        self._height = int(font_height + descender * self._scale)
        self._precision = precision
        self._glyph_set = font.getGlyphSet()
        self._cmap = font.getBestCmap() or {}
        self._metrics = font["hmtx"].metrics  # type: ignore[attr-defined]
        self._path_buffer: list[str] = []

    @property
    def height(self) -> int:
        return self._height

    @property
    def scale(self) -> float:
        return self._scale

    @property
    def precision(self) -> int:
        return self._precision

    def render_glyph(self, character: str) -> Glyph | None:
        glyph_name = self._cmap.get(ord(character))
        if glyph_name is None:
            return None

        advance, _lsb = self._metrics[glyph_name]
        self._path_buffer.clear()
        sink = PathSink(self._scale, self._precision, self._path_buffer, self._glyph_set)
        self._glyph_set[glyph_name].draw(sink)

        path = "".join(self._path_buffer) if sink.has_outline else None
        return Glyph(path=path, horizontal_advance=advance * self._scale)


def load_font(font_path: Path) -> TTFont:
    """Load and parse a font file.

    Args:
        font_path: Path to a TTF or OTF file

    Returns:
        Parsed font with the tables used for rendering decompiled

    Raises:
        FontLoadError: If the file does not exist or cannot be parsed
        FontFormatError: If required tables are missing
    """
    if not font_path.exists():
        raise FontLoadError(str(font_path), "file not found")

    try:
        font = TTFont(str(font_path))
    except Exception as e:
        raise FontLoadError(str(font_path), str(e)) from e

    check_tables(font)
    # Expand tables and outlines now: lazy expansion mutates the font, which
    # must stay read-only once it is shared between renderers
    try:
        for tag in REQUIRED_TABLES:
            _ = font[tag]
        if "glyf" in font:
            font["glyf"].ensureDecompiled()
        if "CFF " in font:
            _decompile_charstrings(font)
    except Exception as e:
        raise FontLoadError(str(font_path), f"could not decompile font: {e}") from e
    font.getGlyphSet()

    logger.debug("Loaded font %s (%d glyphs)", font_path, len(font.getGlyphOrder()))
    return font


def _decompile_charstrings(font: TTFont) -> None:
    cff = font["CFF "].cff  # type: ignore[attr-defined]
    charstrings = cff[cff.fontNames[0]].CharStrings
    for name in charstrings.keys():
        charstrings[name].decompile()


def find_default_font_path() -> Path:
    """Return the first available default font.

    Raises:
        FontLoadError: If none of the candidate locations exist
    """
    for candidate in DEFAULT_FONT_CANDIDATES:
        if candidate.is_file():
            return candidate
    raise FontLoadError(
        "<default>",
        "no default font found; pass a font path explicitly",
    )


@functools.lru_cache(maxsize=None)
def _shared_font(font_path: Path) -> TTFont:
    return load_font(font_path)


def default_font(
    font_path: Path | None = None,
    precision: int = 0,
    cache_size: int = DEFAULT_CAPACITY,
) -> CachedFont:
    """Build a cached font adapter over a process-wide parsed font.

    The parsed font is loaded once per path and shared read-only. Every call
    returns a new CachedFont, which the caller owns.

    Args:
        font_path: Font file, None to search the default locations
        precision: Path coordinate precision
        cache_size: Glyph cache capacity

    Returns:
        Caching font adapter sized for badge text
    """
    resolved = font_path if font_path is not None else find_default_font_path()
    parsed = _shared_font(resolved.resolve())
    return CachedFont(TrueTypeFont(parsed, LINE_HEIGHT, precision), capacity=cache_size)
