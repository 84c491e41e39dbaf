"""Badge composition.

This module turns a status text, an optional label and a Style into a
complete SVG document:

    +-------+--------+
    | LABEL | STATUS |
    +-------+--------+

Layout is computed first (layout_badge), then the document is streamed to
the output sink (write_badge_with_font). Text is drawn as outline paths
defined once and referenced twice (shadow and fill), or as <text> elements
when the font has no outlines.
"""

import io
import logging
from dataclasses import dataclass

from fontTools.ttLib import TTFont

from glyphbadge.constants import (
    GRADIENT_ID,
    LABEL_PATH_ID,
    LINE_HEIGHT,
    MASK_ID,
    MIDDLE_MARGIN,
    SIDE_MARGIN,
    STATUS_PATH_ID,
    SVG_NAMESPACE,
    VIEWBOX_HEIGHT,
)
from glyphbadge.core.svg import SvgWriter, TextSink
from glyphbadge.core.text import (
    MissingGlyphPolicy,
    escape_text,
    render_text_path,
    validate_text,
)
from glyphbadge.domain.color import Color, Gradient, Opacity
from glyphbadge.domain.geometry import ORIGIN, Point
from glyphbadge.domain.style import Style
from glyphbadge.fonts.base import Font
from glyphbadge.fonts.cache import DEFAULT_CAPACITY, CachedFont
from glyphbadge.fonts.truetype import TrueTypeFont, default_font

logger = logging.getLogger(__name__)

TEXT_FONT_FAMILY = "Verdana,Geneva,DejaVu Sans,sans-serif"


@dataclass(frozen=True, slots=True)
class BadgeLayout:
    """Computed badge geometry, in viewBox units unless noted.

    Attributes:
        viewbox_scale: ViewBox units per image pixel
        label_width: Width of the rendered label text (0 without a label)
        status_width: Width of the rendered status text
        label_rect_width: Width of the label rectangle (0 without a label)
        status_rect_width: Width of the status rectangle
        viewbox_size: Size of the viewBox
        image_size: Size of the image in whole pixels
        label_origin: Baseline origin of the label text, None without a label
        status_origin: Baseline origin of the status text
        label_path: Path data for the label text, None without a label
        status_path: Path data for the status text
    """

    viewbox_scale: float
    label_width: int
    status_width: int
    label_rect_width: int
    status_rect_width: int
    viewbox_size: Point[int]
    image_size: Point[int]
    label_origin: Point[int] | None
    status_origin: Point[int]
    label_path: str | None
    status_path: str

    @property
    def has_label(self) -> bool:
        return self.label_origin is not None


def badge_font(
    font: TTFont,
    precision: int = 0,
    cache_size: int = DEFAULT_CAPACITY,
) -> CachedFont:
    """Wrap a parsed font in a cached adapter sized for badge text."""
    return CachedFont(TrueTypeFont(font, LINE_HEIGHT, precision), capacity=cache_size)


def layout_badge(
    font: Font,
    style: Style,
    status: str,
    label: str | None,
    scratch: list[str],
    letter_spacing: float = 0.0,
    missing_glyphs: MissingGlyphPolicy = MissingGlyphPolicy.SKIP,
) -> BadgeLayout:
    """Render the text runs and compute badge geometry.

    The scratch buffer is cleared, then receives the label path followed
    by the status path.

    Args:
        font: Font capability used for both text runs
        style: Badge style
        status: Status text
        label: Optional label text
        scratch: Reusable path buffer owned by the caller
        letter_spacing: Extra space between glyphs in font design units
        missing_glyphs: Layout policy for characters the font lacks

    Returns:
        Badge layout
    """
    scratch.clear()

    viewbox_scale = VIEWBOX_HEIGHT / style.height
    line_margin = (VIEWBOX_HEIGHT - font.height) // 2
    text_origin = Point(SIDE_MARGIN, VIEWBOX_HEIGHT - line_margin)

    label_origin: Point[int] | None = None
    label_width = 0
    status_path_offset = 0
    if label is not None:
        label_origin = text_origin
        label_width = render_text_path(
            font, label_origin, label, scratch, letter_spacing, missing_glyphs
        )
        status_path_offset = len(scratch)
        text_origin = Point(text_origin.x + label_width + MIDDLE_MARGIN, text_origin.y)

    status_width = render_text_path(
        font, text_origin, status, scratch, letter_spacing, missing_glyphs
    )
    label_path = None
    if label_origin is not None:
        label_path = "".join(scratch[:status_path_offset])
    status_path = "".join(scratch[status_path_offset:])

    if label_origin is not None:
        rect_margin = SIDE_MARGIN + MIDDLE_MARGIN // 2
        label_rect_width = label_width + rect_margin
        status_rect_width = status_width + rect_margin
    else:
        label_rect_width = 0
        status_rect_width = status_width + SIDE_MARGIN * 2

    viewbox_size = Point(label_rect_width + status_rect_width, VIEWBOX_HEIGHT)
    image_size = Point(
        int(viewbox_size.x / viewbox_scale),
        int(viewbox_size.y / viewbox_scale),
    )

    return BadgeLayout(
        viewbox_scale=viewbox_scale,
        label_width=label_width,
        status_width=status_width,
        label_rect_width=label_rect_width,
        status_rect_width=status_rect_width,
        viewbox_size=viewbox_size,
        image_size=image_size,
        label_origin=label_origin,
        status_origin=text_origin,
        label_path=label_path,
        status_path=status_path,
    )


def write_badge_with_font(
    out: TextSink,
    style: Style,
    status: str,
    label: str | None,
    font: Font,
    scratch: list[str],
    letter_spacing: float = 0.0,
    missing_glyphs: MissingGlyphPolicy = MissingGlyphPolicy.SKIP,
    escape: bool = False,
    pretty: bool = False,
) -> BadgeLayout:
    """Write a badge document using the given font and scratch buffer.

    Args:
        out: Output sink the document is streamed to
        style: Badge style
        status: Status text
        label: Optional label text
        font: Font capability, reused across calls to amortize glyph cost
        scratch: Reusable path buffer, cleared before use
        letter_spacing: Extra space between glyphs in font design units
        missing_glyphs: Layout policy for characters the font lacks
        escape: Escape markup-unsafe text instead of rejecting it
        pretty: Indent the output

    Returns:
        The layout the document was written with

    Raises:
        InvalidCharacterError: If text contains '&' or '<' and escape is off
        OutputSinkError: If the sink fails; partial output is unusable
    """
    if not escape:
        validate_text(status)
        if label is not None:
            validate_text(label)

    layout = layout_badge(
        font, style, status, label, scratch, letter_spacing, missing_glyphs
    )

    svg = SvgWriter.start(out, pretty=pretty)
    svg.attr("width", layout.image_size.x).attr("height", layout.image_size.y).attr(
        "viewBox", f"0 0 {layout.viewbox_size.x} {layout.viewbox_size.y}"
    ).attr("xmlns", SVG_NAMESPACE)

    if font.has_outlines:
        _write_text_path_defs(svg, layout)

    if style.gradient is not None:
        _write_gradient(svg, style.gradient)

    if style.requires_mask:
        _write_mask(svg, style, layout)

    if layout.has_label:
        _write_rect_path(
            svg,
            ORIGIN,
            Point(layout.label_rect_width, VIEWBOX_HEIGHT),
            style.label_background,
        )

    _write_rect_path(
        svg,
        Point(layout.label_rect_width, 0),
        Point(layout.status_rect_width, VIEWBOX_HEIGHT),
        style.background,
    )

    if style.gradient is not None:
        _write_rect_path(svg, ORIGIN, layout.viewbox_size, f"url(#{GRADIENT_ID})")

    if style.requires_mask:
        svg.close("g")

    shadow_offset = int(style.text_shadow_offset * layout.viewbox_scale)
    if font.has_outlines:
        if layout.has_label:
            _write_text_path_ref(
                svg, LABEL_PATH_ID, _label_text_color(style), style, shadow_offset
            )
        _write_text_path_ref(svg, STATUS_PATH_ID, style.text_color, style, shadow_offset)
    else:
        _write_text_elements(svg, style, layout, status, label, escape, shadow_offset)

    svg.finish()
    logger.debug(
        "Wrote badge %sx%s (label=%r, status=%r)",
        layout.image_size.x,
        layout.image_size.y,
        label,
        status,
    )
    return layout


def write_badge(
    out: TextSink,
    style: Style | str,
    status: str,
    label: str | None = None,
    font: Font | None = None,
    letter_spacing: float = 0.0,
    missing_glyphs: MissingGlyphPolicy = MissingGlyphPolicy.SKIP,
    escape: bool = False,
    pretty: bool = False,
) -> BadgeLayout:
    """Write a badge, using the default font when none is given.

    Style presets may be passed by name ("classic" or "flat").
    """
    if font is None:
        font = default_font()
    if isinstance(style, str):
        style = Style.from_name(style, approximate=not font.has_outlines)
    return write_badge_with_font(
        out,
        style,
        status,
        label,
        font,
        [],
        letter_spacing=letter_spacing,
        missing_glyphs=missing_glyphs,
        escape=escape,
        pretty=pretty,
    )


def badge(
    style: Style | str,
    status: str,
    label: str | None = None,
    font: Font | None = None,
    letter_spacing: float = 0.0,
    missing_glyphs: MissingGlyphPolicy = MissingGlyphPolicy.SKIP,
    escape: bool = False,
    pretty: bool = False,
) -> str:
    """Render a badge document to a string.

    Example:
        svg = badge("flat", "passing", label="build")
    """
    out = io.StringIO()
    write_badge(
        out,
        style,
        status,
        label,
        font,
        letter_spacing=letter_spacing,
        missing_glyphs=missing_glyphs,
        escape=escape,
        pretty=pretty,
    )
    return out.getvalue()


def _label_text_color(style: Style) -> Color:
    if style.label_text_color is not None:
        return style.label_text_color
    return style.text_color


def _write_text_path_defs(svg: SvgWriter, layout: BadgeLayout) -> None:
    svg.open("defs")
    if layout.label_path is not None:
        svg.open("path").attr("id", LABEL_PATH_ID).attr("d", layout.label_path)
        svg.close_inline()
    svg.open("path").attr("id", STATUS_PATH_ID).attr("d", layout.status_path)
    svg.close_inline()
    svg.close("defs")


def _write_gradient(svg: SvgWriter, gradient: Gradient) -> None:
    svg.open("linearGradient").attr("id", GRADIENT_ID).attr("x2", "0").attr("y2", "100%")
    svg.open("stop").attr("offset", "0").attr("stop-opacity", gradient.opacity).attr(
        "stop-color", gradient.start
    )
    svg.close_inline()
    svg.open("stop").attr("offset", "1").attr("stop-opacity", gradient.opacity)
    if gradient.end is not None:
        svg.attr("stop-color", gradient.end)
    svg.close_inline()
    svg.close("linearGradient")


def _write_mask(svg: SvgWriter, style: Style, layout: BadgeLayout) -> None:
    svg.open("mask").attr("id", MASK_ID)
    svg.open("rect").attr("width", layout.viewbox_size.x).attr(
        "height", layout.viewbox_size.y
    ).attr("fill", "#fff")
    if style.border_radius > 0:
        svg.attr("rx", int(style.border_radius * layout.viewbox_scale))
    svg.close_inline()
    svg.close("mask")
    svg.open("g").attr("mask", f"url(#{MASK_ID})")


def _write_rect_path(
    svg: SvgWriter,
    origin: Point[int],
    size: Point[int],
    fill: object | None,
) -> None:
    svg.open("path").attr(
        "d",
        f"M{origin.x} {origin.y}h{size.x}v{size.y}H{origin.x}z",
    )
    if fill is not None:
        svg.attr("fill", fill)
    svg.close_inline()


def _write_text_path_ref(
    svg: SvgWriter,
    path_id: str,
    text_color: Color,
    style: Style,
    shadow_offset: int,
) -> None:
    svg.open("use").attr("href", f"#{path_id}").attr(
        "fill", style.text_shadow_color
    ).attr("opacity", style.text_shadow_opacity).attr(
        "transform", f"translate({shadow_offset},{shadow_offset})"
    )
    svg.close_inline()
    svg.open("use").attr("href", f"#{path_id}").attr("fill", text_color)
    svg.close_inline()


def _write_text_elements(
    svg: SvgWriter,
    style: Style,
    layout: BadgeLayout,
    status: str,
    label: str | None,
    escape: bool,
    shadow_offset: int,
) -> None:
    svg.open("g").attr("font-family", TEXT_FONT_FAMILY).attr("font-size", LINE_HEIGHT)
    if label is not None and layout.label_origin is not None:
        _write_text_run(
            svg,
            label,
            layout.label_origin,
            layout.label_width,
            _label_text_color(style),
            style.text_shadow_color,
            style.text_shadow_opacity,
            escape,
            shadow_offset,
        )
    _write_text_run(
        svg,
        status,
        layout.status_origin,
        layout.status_width,
        style.text_color,
        style.text_shadow_color,
        style.text_shadow_opacity,
        escape,
        shadow_offset,
    )
    svg.close("g")


def _write_text_run(
    svg: SvgWriter,
    text: str,
    origin: Point[int],
    width: int,
    text_color: Color,
    shadow_color: Color,
    shadow_opacity: Opacity,
    escape: bool,
    shadow_offset: int,
) -> None:
    content = escape_text(text) if escape else text

    svg.open("text").attr("x", origin.x).attr("y", origin.y).attr(
        "fill", shadow_color
    ).attr("opacity", shadow_opacity).attr(
        "transform", f"translate({shadow_offset},{shadow_offset})"
    ).attr("textLength", width)
    svg.text(content).close("text")

    svg.open("text").attr("x", origin.x).attr("y", origin.y).attr(
        "fill", text_color
    ).attr("textLength", width)
    svg.text(content).close("text")
