"""Utility functions for arrowfont.

This module provides utility functions including:

- Logging setup and configuration
- Outline statistics tracking
"""

from arrowfont.utils.logging import (
    OutlineLogger,
    OutlineStats,
    configure_logging,
)

__all__ = [
    "OutlineLogger",
    "OutlineStats",
    "configure_logging",
]
