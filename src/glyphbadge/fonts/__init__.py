"""Font layer for glyphbadge.

This module handles turning characters into rendered glyphs. It provides a
small Font capability with interchangeable backends:

- TrueTypeFont: outline-backed adapter over a fontTools TTFont
- CachedFont: LRU decorator that caches rendered glyphs
- WidthTableFont: approximate backend using a Verdana width table

Key helpers:
- PathSink: fontTools pen writing compact path data
- load_font / default_font: font file loading
"""

from glyphbadge.fonts.base import Font
from glyphbadge.fonts.cache import CachedFont, CacheStats
from glyphbadge.fonts.pen import PathSink, format_number
from glyphbadge.fonts.truetype import TrueTypeFont, default_font, load_font
from glyphbadge.fonts.widths import VERDANA_110_WIDTHS, WidthTableFont

__all__ = [
    "CacheStats",
    "CachedFont",
    "Font",
    "PathSink",
    "TrueTypeFont",
    "VERDANA_110_WIDTHS",
    "WidthTableFont",
    "default_font",
    "format_number",
    "load_font",
]
