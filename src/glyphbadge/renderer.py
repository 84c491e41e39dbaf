"""Settings-driven badge rendering.

BadgeRenderer owns a font, its glyph cache and a scratch path buffer, and
renders any number of badges with them. Give each thread or process its
own renderer; the parsed font underneath is shared read-only.
"""

import io
import time

import structlog

from glyphbadge.config import BadgeSettings, FontConfig, get_default_settings
from glyphbadge.core.composer import BadgeLayout, write_badge_with_font
from glyphbadge.core.svg import TextSink
from glyphbadge.domain.style import Style
from glyphbadge.fonts.base import Font
from glyphbadge.fonts.cache import CachedFont
from glyphbadge.fonts.truetype import default_font
from glyphbadge.fonts.widths import WidthTableFont
from glyphbadge.utils import RenderLogger, RenderStats, get_logger


def build_font(config: FontConfig) -> Font:
    """Create the font backend described by a font configuration.

    Raises:
        FontLoadError: If no outline font can be loaded
    """
    if config.approximate:
        return WidthTableFont()
    return default_font(config.path, config.precision, config.cache_size)


class BadgeRenderer:
    """Renders badges with settings and a reusable font.

    Example:
        renderer = BadgeRenderer()
        svg = renderer.render(Style.flat(), "passing", label="build")
    """

    def __init__(
        self,
        settings: BadgeSettings | None = None,
        font: Font | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        self.settings = settings or get_default_settings()
        self.font = font if font is not None else build_font(self.settings.font)
        self.render_logger = RenderLogger(logger or get_logger())
        self._scratch: list[str] = []

    def resolve_style(self, style: Style | str) -> Style:
        """Resolve a style preset name for this renderer's font backend."""
        if isinstance(style, Style):
            return style
        return Style.from_name(style, approximate=not self.font.has_outlines)

    def write(
        self,
        out: TextSink,
        style: Style | str,
        status: str,
        label: str | None = None,
    ) -> BadgeLayout:
        """Stream a badge document to a sink.

        Raises:
            GlyphBadgeError: If the text is invalid or the sink fails
        """
        layout_config = self.settings.layout
        resolved = self.resolve_style(style)

        self.render_logger.log_render_start(status, label)
        start = time.perf_counter()
        try:
            layout = write_badge_with_font(
                out,
                resolved,
                status,
                label,
                self.font,
                self._scratch,
                letter_spacing=layout_config.letter_spacing,
                missing_glyphs=layout_config.missing_glyphs,
                escape=layout_config.escape_text,
                pretty=layout_config.pretty,
            )
        except Exception as e:
            self.render_logger.log_render_error(status, e)
            raise

        self.render_logger.log_render_complete(
            status,
            width=layout.image_size.x,
            height=layout.image_size.y,
            duration_ms=(time.perf_counter() - start) * 1000,
        )
        if isinstance(self.font, CachedFont):
            cache_stats = self.font.stats
            self.render_logger.log_cache_stats(cache_stats.hits, cache_stats.misses)
        return layout

    def render(self, style: Style | str, status: str, label: str | None = None) -> str:
        """Render a badge document to a string."""
        out = io.StringIO()
        self.write(out, style, status, label)
        return out.getvalue()

    @property
    def stats(self) -> RenderStats:
        return self.render_logger.stats
