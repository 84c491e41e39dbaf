"""Utility functions for glyphbadge.

This module provides logging setup and render statistics.
"""

from glyphbadge.utils.logging import (
    RenderLogger,
    RenderStats,
    configure_logging,
    get_logger,
)

__all__ = [
    "RenderLogger",
    "RenderStats",
    "configure_logging",
    "get_logger",
]
