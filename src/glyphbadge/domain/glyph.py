"""Rendered glyph representation.

A Glyph is the result of rendering one character: an optional path fragment
in the compact path mini-language, relative to the glyph origin, and the
horizontal advance in output units.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Glyph:
    """A rendered character glyph.

    Attributes:
        path: Path data relative to the glyph origin, None for glyphs
            without a visible outline (e.g. space)
        horizontal_advance: Distance the cursor moves after this glyph
    """

    path: str | None
    horizontal_advance: float

    def is_empty(self) -> bool:
        """Check if the glyph draws nothing."""
        return not self.path


@dataclass(slots=True)
class CachedGlyph:
    """An owned copy of a rendered glyph held by the glyph cache.

    Attributes:
        character: The character this glyph was rendered for
        path: Copied path data
        horizontal_advance: Horizontal advance in output units
    """

    character: str
    path: str | None
    horizontal_advance: float

    @classmethod
    def from_glyph(cls, character: str, glyph: Glyph) -> "CachedGlyph":
        return cls(
            character=character,
            path=glyph.path,
            horizontal_advance=glyph.horizontal_advance,
        )

    def to_glyph(self) -> Glyph:
        return Glyph(path=self.path, horizontal_advance=self.horizontal_advance)
