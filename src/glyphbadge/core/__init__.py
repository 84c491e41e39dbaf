"""Core badge rendering for glyphbadge.

This module contains the rendering pipeline above the font layer:

- Text layout (walking glyphs along a baseline into one path per run)
- Markup writing (streaming SVG tags and attributes)
- Badge composition (rectangles, margins, mask, gradient and viewBox)

Key functions:
- render_text_path: Render a text run into path data
- layout_badge: Compute badge geometry
- write_badge_with_font: Stream a badge document with a caller-owned font
- write_badge / badge: Convenience entry points using the default font

Key classes:
- SvgWriter: Minimal streaming markup writer
- BadgeLayout: Computed badge geometry
- MissingGlyphPolicy: Layout policy for characters without glyphs
"""

from glyphbadge.core.composer import (
    BadgeLayout,
    badge,
    badge_font,
    layout_badge,
    write_badge,
    write_badge_with_font,
)
from glyphbadge.core.svg import SvgWriter
from glyphbadge.core.text import (
    MissingGlyphPolicy,
    escape_text,
    render_text_path,
    validate_text,
)

__all__ = [
    "BadgeLayout",
    "MissingGlyphPolicy",
    "SvgWriter",
    "badge",
    "badge_font",
    "escape_text",
    "layout_badge",
    "render_text_path",
    "validate_text",
    "write_badge",
    "write_badge_with_font",
]
