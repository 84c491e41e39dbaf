"""glyphbadge - Render compact SVG status badges from font outlines.

glyphbadge draws label/status pill badges whose text is converted to SVG
path data from real glyph outlines, so badges look identical everywhere
without depending on the viewer's installed fonts.

Example:
    >>> from glyphbadge import badge
    >>> svg = badge("flat", "passing", label="build")

Or from the command line:
    $ glyphbadge passing --label build --style flat > build.svg
"""

__version__ = "0.1.0"

from glyphbadge.core import (
    BadgeLayout,
    MissingGlyphPolicy,
    badge,
    badge_font,
    write_badge,
    write_badge_with_font,
)
from glyphbadge.domain import Color, Gradient, Opacity, Point, Style
from glyphbadge.fonts import CachedFont, Font, TrueTypeFont, WidthTableFont, default_font
from glyphbadge.renderer import BadgeRenderer

__all__ = [
    "BadgeLayout",
    "BadgeRenderer",
    "CachedFont",
    "Color",
    "Font",
    "Gradient",
    "MissingGlyphPolicy",
    "Opacity",
    "Point",
    "Style",
    "TrueTypeFont",
    "WidthTableFont",
    "__version__",
    "badge",
    "badge_font",
    "default_font",
    "write_badge",
    "write_badge_with_font",
]
