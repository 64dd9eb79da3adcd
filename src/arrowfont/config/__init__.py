"""Configuration management for arrowfont.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- GeometryConfig: Numeric tolerances for outline geometry
- StrokeSpec: Chevron stroke parameters (validated at the boundary)
- GlyphConfig: Font metrics and glyph geometry
- LoggingConfig: Logging settings
- ArrowFontSettings: Main application settings
"""

from arrowfont.config.settings import (
    ArrowFontSettings,
    GeometryConfig,
    GlyphConfig,
    LoggingConfig,
    StrokeSpec,
    get_default_settings,
)

__all__ = [
    "ArrowFontSettings",
    "GeometryConfig",
    "GlyphConfig",
    "LoggingConfig",
    "StrokeSpec",
    "get_default_settings",
]
