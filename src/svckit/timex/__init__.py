"""Time helpers: day constants, a pluggable clock and midnight truncation."""

from .time import DAY, WEEK, Clock, NowFn, get_clock, now, reset_clock, to_today, today, unix

__all__ = ["DAY", "WEEK", "Clock", "NowFn", "get_clock", "reset_clock", "now", "today", "to_today", "unix"]
