"""Environment-based configuration using pydantic-settings.

Provides type-safe, validated configuration from environment variables
with sensible defaults. Supports .env files and nested configuration.

Example:
    >>> from svckit.foundation.config import get_settings
    >>> settings = get_settings()
    >>> settings.net.split_policy
    <SplitPolicy.LENIENT: 'lenient'>
    >>> settings.logging.level
    'INFO'

    # Or with environment variables:
    # SVCKIT_NET_SPLIT_POLICY=strict
    # SVCKIT_LOG_LEVEL=DEBUG
    # SVCKIT_TIME_TIMEZONE=Asia/Shanghai
"""

from __future__ import annotations

from enum import StrEnum
from functools import lru_cache
from typing import Literal
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Clock.format_time renders %z with a colon, as RFC 3339 requires.
RFC3339 = "%Y-%m-%dT%H:%M:%S%z"
RFC3339_MICRO = "%Y-%m-%dT%H:%M:%S.%f%z"


class SplitPolicy(StrEnum):
    """How host:port strings are split."""
    LENIENT = "lenient"
    STRICT = "strict"


class NetSettings(BaseSettings):
    """Network helper configuration."""

    model_config = SettingsConfigDict(
        env_prefix="SVCKIT_NET_",
        extra="ignore",
    )

    split_policy: SplitPolicy = Field(
        default=SplitPolicy.LENIENT,
        description="Default policy used by split_host_port",
    )

    @field_validator("split_policy", mode="before")
    @classmethod
    def _normalize_policy(cls, v: str) -> str:
        return v.strip().lower() if isinstance(v, str) else v


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="SVCKIT_LOG_",
        extra="ignore",
    )

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: Literal["console", "json", "none"] = "console"
    colors: bool | None = None

    @field_validator("level", mode="before")
    @classmethod
    def _upper_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v


class TimeSettings(BaseSettings):
    """Defaults for the timex clock."""

    model_config = SettingsConfigDict(
        env_prefix="SVCKIT_TIME_",
        extra="ignore",
    )

    timezone: str = Field(default="UTC", description="IANA zone name for the default clock")
    format: str = Field(default=RFC3339_MICRO, description="strftime format for format_time")
    formats: tuple[str, ...] = Field(
        default=(RFC3339_MICRO, RFC3339, "%Y-%m-%d %H:%M:%S", "%Y-%m-%d"),
        description="strptime formats tried in order by parse_time",
    )

    @field_validator("timezone")
    @classmethod
    def _known_zone(cls, v: str) -> str:
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"unknown timezone: {v!r}") from e
        return v

    @field_validator("formats")
    @classmethod
    def _non_empty(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        if not v:
            raise ValueError("at least one time format is required")
        return v

    @property
    def tzinfo(self) -> ZoneInfo:
        return ZoneInfo(self.timezone)


class SvckitSettings(BaseSettings):
    """Root settings for svckit.

    Loads configuration from environment variables with SVCKIT_ prefix.
    Supports nested configuration and .env files.

    Example environment variables:
        SVCKIT_DEBUG=true
        SVCKIT_NET_SPLIT_POLICY=strict
        SVCKIT_LOG_FORMAT=json
        SVCKIT_TIME_TIMEZONE=Europe/Berlin
    """

    model_config = SettingsConfigDict(
        env_prefix="SVCKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    debug: bool = Field(default=False, description="Enable debug mode")
    environment: Literal["development", "staging", "production"] = "development"

    # Nested settings (also loaded with SVCKIT_NET_, SVCKIT_LOG_, SVCKIT_TIME_)
    net: NetSettings = Field(default_factory=NetSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    time: TimeSettings = Field(default_factory=TimeSettings)

    @field_validator("environment", mode="before")
    @classmethod
    def _normalize_env(cls, v: str) -> str:
        return v.lower() if isinstance(v, str) else v

    @computed_field
    @property
    def is_production(self) -> bool:
        return self.environment == "production"


@lru_cache(maxsize=1)
def get_settings() -> SvckitSettings:
    """Get the global settings instance (cached).

    Example:
        >>> settings = get_settings()
        >>> settings.debug
        False
    """
    return SvckitSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing).

    After calling this, the next get_settings() call will
    reload configuration from environment.
    """
    get_settings.cache_clear()
