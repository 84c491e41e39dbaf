"""Domain models for glyphbadge.

This module contains the value types that describe a badge. All models are:

- Immutable (frozen dataclasses), except the cache's own glyph copies
- Validated on construction from text
- Independent of fontTools implementation details

Key classes:
- Point: A 2D coordinate
- Color, Opacity, Gradient: Color values and their text grammars
- Style: Badge styling with the "classic" and "flat" presets
- Glyph: A rendered character path and advance
"""

from glyphbadge.domain.color import (
    Color,
    Gradient,
    NamedColor,
    Opacity,
    is_valid_hex_color,
)
from glyphbadge.domain.geometry import ORIGIN, Point
from glyphbadge.domain.glyph import CachedGlyph, Glyph
from glyphbadge.domain.style import Style

__all__: list[str] = [
    # Enums
    "NamedColor",
    # Value types
    "Color",
    "Gradient",
    "Opacity",
    "Point",
    "ORIGIN",
    "Style",
    # Glyphs
    "CachedGlyph",
    "Glyph",
    # Helpers
    "is_valid_hex_color",
]
