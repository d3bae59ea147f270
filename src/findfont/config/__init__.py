"""Configuration management for findfont.

Configuration uses Pydantic models and is built from CLI arguments or
defaults.

Key classes:
- SearchConfig: Suffixes and search directories
- LoggingConfig: Logging settings
- FindFontSettings: Main application settings
"""

from findfont.config.settings import (
    FindFontSettings,
    LoggingConfig,
    SearchConfig,
    get_default_settings,
)

__all__ = [
    "FindFontSettings",
    "LoggingConfig",
    "SearchConfig",
    "get_default_settings",
]
