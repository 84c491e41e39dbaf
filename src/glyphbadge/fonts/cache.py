"""Least-recently-used glyph cache.

CachedFont wraps any Font and keeps owned copies of up to ``capacity``
rendered glyphs, keyed by character. Badge texts are short and repetitive,
so most lookups skip outline extraction entirely.

Thread Safety: not thread-safe. Every lookup reorders the cache in place;
give each worker its own CachedFont.
"""

import logging
from collections import OrderedDict
from dataclasses import dataclass

from glyphbadge.domain.glyph import CachedGlyph, Glyph
from glyphbadge.fonts.base import Font

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 256


@dataclass
class CacheStats:
    """Glyph cache counters."""

    hits: int = 0
    misses: int = 0
    evictions: int = 0

    @property
    def hit_rate(self) -> float:
        total = self.hits + self.misses
        if total == 0:
            return 0.0
        return self.hits / total


class CachedFont(Font):
    """A Font decorator that caches a finite number of rendered glyphs.

    Characters the wrapped font cannot render are not cached, so repeated
    lookups of a missing glyph query the wrapped font again.

    Example:
        font = CachedFont(TrueTypeFont(ttfont, font_height=1100))
        glyph = font.render_glyph("a")  # renders and caches
        glyph = font.render_glyph("a")  # served from the cache
    """

    def __init__(self, font: Font, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError(f"Cache capacity must be positive, got {capacity}")
        self._font = font
        self._capacity = capacity
        self._entries: OrderedDict[str, CachedGlyph] = OrderedDict()
        self._stats = CacheStats()

    @property
    def wrapped(self) -> Font:
        return self._font

    @property
    def has_outlines(self) -> bool:  # type: ignore[override]
        return self._font.has_outlines

    @property
    def height(self) -> int:
        return self._font.height

    @property
    def scale(self) -> float:
        return self._font.scale

    @property
    def precision(self) -> int:
        return self._font.precision

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def stats(self) -> CacheStats:
        return self._stats

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, character: object) -> bool:
        return character in self._entries

    def render_glyph(self, character: str) -> Glyph | None:
        entry = self._entries.get(character)
        if entry is not None:
            self._entries.move_to_end(character)
            self._stats.hits += 1
            return entry.to_glyph()

        self._stats.misses += 1
        glyph = self._font.render_glyph(character)
        if glyph is None:
            return None

        if len(self._entries) >= self._capacity:
            evicted, _ = self._entries.popitem(last=False)
            self._stats.evictions += 1
            logger.debug("Evicted glyph %r from cache", evicted)
        self._entries[character] = CachedGlyph.from_glyph(character, glyph)
        return glyph

    def clear(self) -> None:
        """Drop all cached glyphs."""
        self._entries.clear()
