"""Configuration settings for glyphbadge."""

from pathlib import Path

from pydantic import BaseModel, Field

from glyphbadge.core.text import MissingGlyphPolicy
from glyphbadge.fonts.cache import DEFAULT_CAPACITY


class FontConfig(BaseModel):
    """Configuration for the font backend."""

    path: Path | None = Field(
        default=None,
        description="Font file (None = search default locations)",
    )
    precision: int = Field(
        default=0,
        ge=0,
        le=4,
        description="Path coordinate precision (0 = integers only)",
    )
    cache_size: int = Field(
        default=DEFAULT_CAPACITY,
        ge=1,
        le=4096,
        description="Number of rendered glyphs kept in the LRU cache",
    )
    approximate: bool = Field(
        default=False,
        description="Use the Verdana width table instead of font outlines",
    )


class LayoutConfig(BaseModel):
    """Configuration for text layout and markup output."""

    letter_spacing: float = Field(
        default=0.0,
        ge=0.0,
        description="Extra space between glyphs in font design units",
    )
    missing_glyphs: MissingGlyphPolicy = Field(
        default=MissingGlyphPolicy.SKIP,
        description="How characters without a glyph take part in layout",
    )
    escape_text: bool = Field(
        default=False,
        description="Escape '&' and '<' instead of rejecting them",
    )
    pretty: bool = Field(
        default=False,
        description="Indent the SVG output",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class BadgeSettings(BaseModel):
    """Main application settings."""

    font: FontConfig = Field(default_factory=FontConfig)
    layout: LayoutConfig = Field(default_factory=LayoutConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> BadgeSettings:
    """Get default application settings."""
    return BadgeSettings()
