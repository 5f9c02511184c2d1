"""Configuration management using pydantic-settings.

Provides environment-based configuration with type safety and validation.
"""

from .settings import (
    RFC3339,
    RFC3339_MICRO,
    LoggingSettings,
    NetSettings,
    SplitPolicy,
    SvckitSettings,
    TimeSettings,
    clear_settings_cache,
    get_settings,
)

__all__ = [
    "RFC3339",
    "RFC3339_MICRO",
    "LoggingSettings",
    "NetSettings",
    "SplitPolicy",
    "SvckitSettings",
    "TimeSettings",
    "clear_settings_cache",
    "get_settings",
]
