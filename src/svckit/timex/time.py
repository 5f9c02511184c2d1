"""Day-boundary helpers around an injectable clock.

Example:
    >>> from datetime import datetime
    >>> from zoneinfo import ZoneInfo
    >>> fixed = Clock(now_fn=lambda tz: datetime(2025, 1, 1, 15, 30, tzinfo=tz), tz=ZoneInfo("UTC"))
    >>> fixed.today()
    datetime.datetime(2025, 1, 1, 0, 0, tzinfo=zoneinfo.ZoneInfo(key='UTC'))
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta, tzinfo
from functools import lru_cache
from typing import Callable

from svckit.foundation.config import get_settings
from svckit.foundation.errors import ErrorCode, KitException

DAY = timedelta(days=1)
WEEK = DAY * 7

NowFn = Callable[[tzinfo], datetime]


def to_today(value: datetime) -> datetime:
    """Midnight at the start of ``value``'s day, keeping its tzinfo."""
    return value.replace(hour=0, minute=0, second=0, microsecond=0)


def _settings_tz() -> tzinfo:
    return get_settings().time.tzinfo


def _settings_format() -> str:
    return get_settings().time.format


def _settings_formats() -> tuple[str, ...]:
    return get_settings().time.formats


def _utc_offset(value: datetime) -> str:
    """RFC 3339 numeric offset, ``+HH:MM``."""
    offset = value.strftime("%z")
    return f"{offset[:3]}:{offset[3:]}" if offset else ""


@dataclass(frozen=True, slots=True)
class Clock:
    """Source of "now" plus the zone and formats used around it.

    Attributes:
        now_fn: Called with ``tz``; must return an aware datetime
        tz: Zone results are expressed in
        format: strftime format for format_time; ``%z`` renders as ``+HH:MM``
        formats: strptime formats tried in order by parse_time
    """

    now_fn: NowFn = datetime.now
    tz: tzinfo = field(default_factory=_settings_tz)
    format: str = field(default_factory=_settings_format)
    formats: tuple[str, ...] = field(default_factory=_settings_formats)

    def now(self) -> datetime:
        return self.now_fn(self.tz).astimezone(self.tz)

    def today(self) -> datetime:
        return to_today(self.now())

    def unix(self, seconds: int, nanoseconds: int = 0) -> datetime:
        """Datetime for a Unix timestamp; sub-microsecond precision is dropped."""
        return datetime.fromtimestamp(seconds, tz=self.tz) + timedelta(microseconds=nanoseconds // 1000)

    def format_time(self, value: datetime) -> str:
        if value.tzinfo is None:
            value = value.replace(tzinfo=self.tz)
        return value.strftime(self.format.replace("%z", _utc_offset(value)))

    def parse_time(self, text: str) -> datetime:
        """Parse ``text`` with the first matching format; naive results get ``tz``.

        Raises:
            KitException: PARSE_ERROR if no format matches
        """
        for fmt in self.formats:
            try:
                parsed = datetime.strptime(text, fmt)
            except ValueError:
                continue
            return parsed if parsed.tzinfo is not None else parsed.replace(tzinfo=self.tz)
        raise KitException.create(
            f"time {text!r} matches none of {list(self.formats)}",
            ErrorCode.PARSE_ERROR,
            component="timex",
        )


@lru_cache(maxsize=1)
def get_clock() -> Clock:
    """Default clock built from SVCKIT_TIME_* settings (cached)."""
    return Clock()


def reset_clock() -> None:
    get_clock.cache_clear()


def now() -> datetime:
    return get_clock().now()


def today() -> datetime:
    return get_clock().today()


def unix(seconds: int, nanoseconds: int = 0) -> datetime:
    return get_clock().unix(seconds, nanoseconds)
