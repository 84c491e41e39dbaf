"""Shared fixtures: a small synthetic TrueType font built in memory."""

import io
import re
import string
from pathlib import Path

import pytest
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.t2CharStringPen import T2CharStringPen
from fontTools.pens.ttGlyphPen import TTGlyphPen
from fontTools.ttLib import TTFont

from glyphbadge.constants import LINE_HEIGHT
from glyphbadge.fonts import TrueTypeFont

# LINE_HEIGHT / UNITS_PER_EM == 0.5, so scaled metrics are exact
UNITS_PER_EM = 2200
ASCENT = 1760
DESCENT = -440
ADVANCE = 1200
SPACE_ADVANCE = 500
RECT_CHARACTERS = string.ascii_letters.replace("o", "") + string.digits


def glyph_name(character: str) -> str:
    return f"uni{ord(character):04X}"


def _empty_glyph():
    return TTGlyphPen(None).glyph()


def _rect_glyph():
    pen = TTGlyphPen(None)
    pen.moveTo((100, 0))
    pen.lineTo((100, 1400))
    pen.lineTo((1100, 1400))
    pen.lineTo((1100, 0))
    pen.closePath()
    return pen.glyph()


def _round_glyph():
    pen = TTGlyphPen(None)
    pen.moveTo((100, 700))
    pen.qCurveTo((100, 1400), (600, 1400))
    pen.qCurveTo((1100, 1400), (1100, 700))
    pen.qCurveTo((1100, 0), (600, 0))
    pen.qCurveTo((100, 0), (100, 700))
    pen.closePath()
    return pen.glyph()


def build_test_font() -> TTFont:
    """Build a font with rectangles for ASCII letters and digits.

    "o" is drawn with quadratic curves, space has no outline, and
    punctuation has no glyph at all.
    """
    glyph_order = [".notdef", "space", glyph_name("o")]
    glyphs = {".notdef": _empty_glyph(), "space": _empty_glyph(), glyph_name("o"): _round_glyph()}
    metrics = {".notdef": (ADVANCE, 0), "space": (SPACE_ADVANCE, 0), glyph_name("o"): (ADVANCE, 100)}
    cmap = {ord(" "): "space", ord("o"): glyph_name("o")}

    for character in RECT_CHARACTERS:
        name = glyph_name(character)
        glyph_order.append(name)
        glyphs[name] = _rect_glyph()
        metrics[name] = (ADVANCE, 100)
        cmap[ord(character)] = name

    builder = FontBuilder(UNITS_PER_EM, isTTF=True)
    builder.setupGlyphOrder(glyph_order)
    builder.setupCharacterMap(cmap)
    builder.setupGlyf(glyphs)
    builder.setupHorizontalMetrics(metrics)
    builder.setupHorizontalHeader(ascent=ASCENT, descent=DESCENT)
    builder.setupNameTable({"familyName": "Badge Test", "styleName": "Regular"})
    builder.setupOS2(
        sTypoAscender=ASCENT,
        sTypoDescender=DESCENT,
        usWinAscent=ASCENT,
        usWinDescent=-DESCENT,
    )
    builder.setupPost()
    builder.setupMaxp()
    return builder.font


def build_cff_test_font() -> TTFont:
    """Build a CFF font whose "O" is a square with a square counter.

    CFF contours end without a line back to their start point.
    """
    outer_pen = T2CharStringPen(1000, None)
    outer_pen.moveTo((0, 0))
    outer_pen.lineTo((1000, 0))
    outer_pen.lineTo((1000, 1000))
    outer_pen.lineTo((0, 1000))
    outer_pen.closePath()
    outer_pen.moveTo((300, 300))
    outer_pen.lineTo((300, 700))
    outer_pen.lineTo((700, 700))
    outer_pen.lineTo((700, 300))
    outer_pen.closePath()
    notdef_pen = T2CharStringPen(500, None)

    builder = FontBuilder(1000, isTTF=False)
    builder.setupGlyphOrder([".notdef", "O"])
    builder.setupCharacterMap({ord("O"): "O"})
    builder.setupCFF(
        "BadgeTestCFF-Regular",
        {"FullName": "Badge Test CFF"},
        {".notdef": notdef_pen.getCharString(), "O": outer_pen.getCharString()},
        {},
    )
    builder.setupHorizontalMetrics({".notdef": (500, 0), "O": (1000, 0)})
    builder.setupHorizontalHeader(ascent=800, descent=-200)
    builder.setupNameTable({"familyName": "Badge Test CFF", "styleName": "Regular"})
    builder.setupOS2(sTypoAscender=800, sTypoDescender=-200, usWinAscent=800, usWinDescent=200)
    builder.setupPost()
    builder.setupMaxp()
    return builder.font


@pytest.fixture(scope="session")
def test_ttfont() -> TTFont:
    """Parsed synthetic font, shared read-only across tests."""
    buffer = io.BytesIO()
    build_test_font().save(buffer)
    buffer.seek(0)
    return TTFont(buffer)


@pytest.fixture(scope="session")
def test_font_path(tmp_path_factory: pytest.TempPathFactory) -> Path:
    """The synthetic font saved to disk."""
    path = tmp_path_factory.mktemp("fonts") / "BadgeTest-Regular.ttf"
    build_test_font().save(str(path))
    return path


@pytest.fixture(scope="session")
def cff_font_path(tmp_path_factory: pytest.TempPathFactory) -> Path:
    """A CFF-flavoured OpenType font saved to disk."""
    path = tmp_path_factory.mktemp("fonts") / "BadgeTestCFF-Regular.otf"
    build_cff_test_font().save(str(path))
    return path


@pytest.fixture
def outline_font(test_ttfont: TTFont) -> TrueTypeFont:
    """Uncached outline adapter at badge line height."""
    return TrueTypeFont(test_ttfont, LINE_HEIGHT, precision=0)


_PATH_TOKEN = re.compile(r"[mlqcZ]|-?\d+(?:\.\d+)?")
_OPERAND_PAIRS = {"m": 1, "l": 1, "q": 2, "c": 3}


def reconstruct(path: str) -> list[tuple[float, float]]:
    """Turn relative glyph path data back into absolute endpoints (screen axes)."""
    tokens = _PATH_TOKEN.findall(path)
    points: list[tuple[float, float]] = []
    x = y = 0.0
    start = (x, y)
    index = 0
    while index < len(tokens):
        command = tokens[index]
        index += 1
        if command == "Z":
            # Closing a subpath returns the current point to its start
            x, y = start
            continue
        count = _OPERAND_PAIRS[command]
        operands = [float(token) for token in tokens[index : index + 2 * count]]
        index += 2 * count
        x, y = x + operands[-2], y + operands[-1]
        if command == "m":
            start = (x, y)
        points.append((x, y))
    return points


@pytest.fixture
def path_points():
    """Helper that reconstructs absolute endpoints from path data."""
    return reconstruct
