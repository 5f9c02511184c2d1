"""Foundation - Shared building blocks for svckit.

Contains: error handling and config.
"""

from __future__ import annotations

__all__ = [
    # Errors
    "ErrorCode", "KitError", "KitException", "classify_exception",
    "AddressError", "NetError", "ValidationFailed",
    # Config
    "SvckitSettings", "get_settings", "clear_settings_cache",
    "NetSettings", "LoggingSettings", "TimeSettings", "SplitPolicy",
]


def __getattr__(name: str):
    """Lazy imports to avoid circular dependencies."""
    if name in ("ErrorCode", "KitError", "KitException", "classify_exception",
                "AddressError", "NetError", "ValidationFailed"):
        from . import errors
        return getattr(errors, name)

    if name in ("SvckitSettings", "get_settings", "clear_settings_cache",
                "NetSettings", "LoggingSettings", "TimeSettings", "SplitPolicy"):
        from . import config
        return getattr(config, name)

    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
