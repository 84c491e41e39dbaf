"""End-to-end badge rendering tests.

These tests render complete documents from a real (synthetic) font file
and check the document structure against the computed layout.
"""

import io
import re
from pathlib import Path
from unittest.mock import MagicMock
from xml.etree import ElementTree

import pytest

from glyphbadge import BadgeRenderer, Style, badge, default_font
from glyphbadge.config import BadgeSettings, FontConfig, LayoutConfig
from glyphbadge.core.composer import layout_badge
from glyphbadge.exceptions import InvalidCharacterError, OutputSinkError
from glyphbadge.fonts import CachedFont, WidthTableFont

RECT_PATH = re.compile(r'<path d="M(\d+) 0h(\d+)v2000H\d+z" fill="([^"]+)"/>')
DECLARED_SIZE = re.compile(r'<svg width="(\d+)" height="(\d+)" viewBox="0 0 (\d+) (\d+)"')


@pytest.fixture
def font(test_font_path: Path) -> CachedFont:
    return default_font(test_font_path)


def background_rects(svg: str) -> list[tuple[int, int, str]]:
    return [
        (int(x), int(width), fill)
        for x, width, fill in RECT_PATH.findall(svg)
        if not fill.startswith("url(")
    ]


def test_flat_badge_with_label(font: CachedFont) -> None:
    """Test flat badge dimensions and structure."""
    svg = badge("flat", "build", label="passing", font=font)
    layout = layout_badge(font, Style.flat(), "build", "passing", [])

    width, height, viewbox_width, viewbox_height = map(int, DECLARED_SIZE.match(svg).groups())
    assert width == int((layout.label_rect_width + layout.status_rect_width) / layout.viewbox_scale)
    assert height == 20
    assert (viewbox_width, viewbox_height) == (9300, 2000)

    assert background_rects(svg) == [
        (0, layout.label_rect_width, "#555"),
        (layout.label_rect_width, layout.status_rect_width, "#08C"),
    ]
    assert "<mask" not in svg
    assert "<linearGradient" not in svg
    assert 'fill="url(#g)"' not in svg


def test_classic_badge_without_label(font: CachedFont) -> None:
    """Test classic badge has one background, a mask and a gradient overlay."""
    svg = badge("classic", "42", font=font)
    layout = layout_badge(font, Style.classic(), "42", None, [])

    assert background_rects(svg) == [(0, layout.status_width + 2 * 500, "#08C")]
    assert re.search(r'<mask id="m"><rect [^>]*rx="300"/></mask>', svg)
    assert '<linearGradient id="g"' in svg
    assert svg.count('fill="url(#g)"') == 1
    assert DECLARED_SIZE.match(svg).groups() == ("22", "20", "2200", "2000")


def test_document_is_well_formed(font: CachedFont) -> None:
    """Test the output parses as XML."""
    root = ElementTree.fromstring(badge("classic", "passing", label="build", font=font))
    assert root.tag == "{http://www.w3.org/2000/svg}svg"
    assert root.attrib["viewBox"] == "0 0 9300 2000"


def test_text_paths_are_renderable(font: CachedFont) -> None:
    """Test text path data only uses the compact command set."""
    layout = layout_badge(font, Style.flat(), "Hello world", "go", [])
    for path in (layout.label_path, layout.status_path):
        assert re.fullmatch(r"(M\d+ \d+(?:[mlqcZ](?:-?\d+(?: ?-?\d+)*)?)+)+", path)


def test_approximate_badge() -> None:
    """Test badges without a font file."""
    svg = badge("classic", "passing", label="build", font=WidthTableFont())
    assert "<text" in svg
    assert 'opacity=".3"' in svg
    assert "<defs>" not in svg


class TestBadgeRenderer:
    """Tests for the settings-driven renderer."""

    def test_render(self, test_font_path: Path) -> None:
        settings = BadgeSettings(font=FontConfig(path=test_font_path))
        renderer = BadgeRenderer(settings)

        svg = renderer.render("flat", "passing", "build")

        assert svg == badge("flat", "passing", label="build", font=default_font(test_font_path))
        assert renderer.stats.rendered_count == 1
        assert renderer.stats.cache_misses > 0

    def test_reuses_font_between_renders(self, test_font_path: Path) -> None:
        renderer = BadgeRenderer(BadgeSettings(font=FontConfig(path=test_font_path)))
        renderer.render("flat", "aaa")
        renderer.render("flat", "aaa")

        assert renderer.stats.rendered_count == 2
        assert renderer.stats.cache_misses == 1
        assert renderer.stats.cache_hits == 5

    def test_approximate_settings(self) -> None:
        renderer = BadgeRenderer(BadgeSettings(font=FontConfig(approximate=True)))
        assert isinstance(renderer.font, WidthTableFont)
        assert renderer.resolve_style("flat") == Style.flat(approximate=True)
        assert "<text" in renderer.render("flat", "ok")

    def test_layout_settings_applied(self, font: CachedFont) -> None:
        settings = BadgeSettings(layout=LayoutConfig(escape_text=True, pretty=True))
        renderer = BadgeRenderer(settings, font=font)
        svg = renderer.render("flat", "a&b")
        assert svg.endswith("</svg>\n")

    def test_error_recorded(self, font: CachedFont) -> None:
        logger = MagicMock()
        renderer = BadgeRenderer(font=font, logger=logger)

        with pytest.raises(InvalidCharacterError):
            renderer.render("flat", "a<b")

        assert renderer.stats.error_count == 1
        assert renderer.stats.errors[0][0] == "a<b"
        logger.error.assert_called_once()

    def test_sink_failure(self, font: CachedFont) -> None:
        out = MagicMock()
        out.write.side_effect = OSError("broken pipe")
        renderer = BadgeRenderer(font=font, logger=MagicMock())

        with pytest.raises(OutputSinkError):
            renderer.write(out, "flat", "ok")

    def test_write_returns_layout(self, font: CachedFont) -> None:
        renderer = BadgeRenderer(font=font, logger=MagicMock())
        layout = renderer.write(io.StringIO(), Style.classic(), "42")
        assert layout.image_size.x == 22
