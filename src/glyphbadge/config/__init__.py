"""Configuration management for glyphbadge.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- FontConfig: Font backend settings
- LayoutConfig: Text layout and markup settings
- LoggingConfig: Logging settings
- BadgeSettings: Main application settings
"""

from glyphbadge.config.settings import (
    BadgeSettings,
    FontConfig,
    LayoutConfig,
    LoggingConfig,
    get_default_settings,
)

__all__ = [
    "BadgeSettings",
    "FontConfig",
    "LayoutConfig",
    "LoggingConfig",
    "get_default_settings",
]
