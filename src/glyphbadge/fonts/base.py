"""Font capability used by badge layout.

A Font renders single characters into Glyphs. Implementations include the
outline-backed TrueTypeFont, the CachedFont decorator and the approximate
WidthTableFont.
"""

from abc import ABC, abstractmethod

from glyphbadge.domain.glyph import Glyph


class Font(ABC):
    """A font specific to badge generation.

    Implementations may reuse an internal scratch buffer between calls, so
    a returned Glyph must be consumed before the next render_glyph call.
    """

    #: False for backends that only know advances and never produce paths
    has_outlines: bool = True

    @property
    @abstractmethod
    def height(self) -> int:
        """Visible text height relative to the badge viewBox."""

    @property
    def scale(self) -> float:
        """Scale from font design units to output units."""
        return 1.0

    @property
    def precision(self) -> int:
        """Path coordinate precision (0 = integers only)."""
        return 1

    @abstractmethod
    def render_glyph(self, character: str) -> Glyph | None:
        """Render a character.

        Args:
            character: A single character

        Returns:
            The rendered glyph, or None if the font has no glyph for it
        """
