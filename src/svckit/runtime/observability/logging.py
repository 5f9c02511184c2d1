"""Structured logging for svckit helpers.

Loggers carry bound key/values and hand each entry to a renderer: readable
console lines for development, JSON Lines (orjson) for aggregation, or
nothing at all. Until ``configure_logging`` is called, the renderer and level
come from the ``SVCKIT_LOG_*`` settings.

Quick Start:
    >>> from svckit.runtime.observability import configure_logging, get_logger
    >>> configure_logging(format="json", level="DEBUG")
    >>> log = get_logger("netx.addr")
    >>> log.debug("address rejected", value="abc")
"""

from __future__ import annotations

import logging
import sys
import time
import traceback
from contextvars import ContextVar
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Protocol, TextIO, runtime_checkable

import orjson

from svckit.foundation.config import get_settings
from svckit.foundation.errors import JsonDict, JsonValue


# ─────────────────────────────────────────────────────────────────────────────
# Core Logger
# ─────────────────────────────────────────────────────────────────────────────


@dataclass(slots=True)
class BoundLogger:
    """Logger with bound context; ``bind``/``unbind`` return new loggers.

    ``_level`` pins a threshold for this logger only; None follows the global
    level.
    """

    context: JsonDict = field(default_factory=dict)
    _renderer: LogRenderer | None = None
    _level: int | None = None

    def bind(self, **kw: JsonValue) -> BoundLogger:
        return BoundLogger({**self.context, **kw}, self._renderer, self._level)

    def unbind(self, *keys: str) -> BoundLogger:
        kept = {k: v for k, v in self.context.items() if k not in keys}
        return BoundLogger(kept, self._renderer, self._level)

    def is_enabled_for(self, level: int) -> bool:
        return level >= (self._level if self._level is not None else _effective_level())

    def _log(self, level: int, event: str, kw: JsonDict) -> None:
        if not self.is_enabled_for(level):
            return
        entry = LogEntry(
            timestamp=time.time(),
            level=logging.getLevelName(level).lower(),
            event=event,
            context={**self.context, **kw},
        )
        (self._renderer or _get_renderer()).render(entry)

    def debug(self, event: str, **kw: JsonValue) -> None:
        self._log(logging.DEBUG, event, kw)

    def info(self, event: str, **kw: JsonValue) -> None:
        self._log(logging.INFO, event, kw)

    def warning(self, event: str, **kw: JsonValue) -> None:
        self._log(logging.WARNING, event, kw)

    def error(self, event: str, **kw: JsonValue) -> None:
        self._log(logging.ERROR, event, kw)

    def exception(self, event: str, **kw: JsonValue) -> None:
        """Log at error level with the active traceback under ``exc_info``."""
        self._log(logging.ERROR, event, {**kw, "exc_info": traceback.format_exc()})


@dataclass(slots=True)
class LogEntry:
    timestamp: float
    level: str
    event: str
    context: JsonDict

    @property
    def when(self) -> datetime:
        return datetime.fromtimestamp(self.timestamp, tz=UTC)


# ─────────────────────────────────────────────────────────────────────────────
# Renderers
# ─────────────────────────────────────────────────────────────────────────────


@runtime_checkable
class LogRenderer(Protocol):
    def render(self, entry: LogEntry) -> None: ...


_RESET = "\033[0m"
_DIM = "\033[2m"
_CYAN = "\033[36m"
_LEVEL_COLORS = {"debug": _DIM, "info": "\033[32m", "warning": "\033[33m", "error": "\033[31m"}


@dataclass(slots=True)
class ConsoleRenderer:
    """One line per entry: ``HH:MM:SS.mmm [level] event key=value ...``.

    Strings are quoted and booleans lowercased. Colors default to on when the
    output is a terminal.
    """

    output: TextIO = field(default_factory=lambda: sys.stderr)
    colors: bool | None = None

    def __post_init__(self) -> None:
        if self.colors is None:
            self.colors = bool(getattr(self.output, "isatty", lambda: False)())

    def _paint(self, color: str, text: str) -> str:
        return f"{color}{text}{_RESET}" if self.colors else text

    def render(self, entry: LogEntry) -> None:
        parts = [
            self._paint(_DIM, entry.when.strftime("%H:%M:%S.%f")[:-3]),
            self._paint(_LEVEL_COLORS.get(entry.level, _DIM), f"[{entry.level}]"),
            entry.event,
        ]
        trace = entry.context.get("exc_info")
        for key, value in sorted(entry.context.items()):
            if key != "exc_info":
                parts.append(f"{self._paint(_CYAN, key)}={_console_value(value)}")
        print(" ".join(parts), file=self.output)
        if trace:
            print(self._paint(_LEVEL_COLORS["error"], str(trace)), file=self.output)


def _console_value(value: object) -> str:
    if isinstance(value, str):
        return f'"{value}"'
    if isinstance(value, bool):
        return str(value).lower()
    return str(value)


@dataclass(slots=True)
class JsonRenderer:
    """JSON Lines encoded with orjson; values orjson can't encode are str()'d."""

    output: TextIO = field(default_factory=lambda: sys.stdout)

    def render(self, entry: LogEntry) -> None:
        data = {"timestamp": entry.when.isoformat(), "level": entry.level, "event": entry.event, **entry.context}
        print(orjson.dumps(data, default=str, option=orjson.OPT_NON_STR_KEYS).decode(), file=self.output)


@dataclass(slots=True)
class NoOpRenderer:
    def render(self, entry: LogEntry) -> None:
        pass


# ─────────────────────────────────────────────────────────────────────────────
# Global Configuration
# ─────────────────────────────────────────────────────────────────────────────


_renderer: ContextVar[LogRenderer | None] = ContextVar("log_renderer", default=None)
_default_level: ContextVar[int | None] = ContextVar("log_level", default=None)


def configure_logging(
    format: str = "console",  # noqa: A002 - matches SVCKIT_LOG_FORMAT
    level: str = "INFO",
    *,
    output: TextIO | None = None,
    colors: bool | None = None,
) -> LogRenderer:
    """Set the renderer and level for every logger that has none of its own.

    Args:
        format: "console", "json" or "none"
        level: Minimum level name, e.g. DEBUG or WARNING
        output: Stream to write to (default: stderr for console, stdout for json)
        colors: Force console colors on/off (None = auto-detect)

    Raises:
        ValueError: Unknown format
    """
    renderer = _make_renderer(format, output=output, colors=colors)
    _default_level.set(getattr(logging, level.upper(), logging.INFO))
    _renderer.set(renderer)
    return renderer


def reset_logging() -> None:
    """Drop explicit configuration so settings apply again."""
    _renderer.set(None)
    _default_level.set(None)


def get_logger(name: str | None = None, **initial_context: JsonValue) -> BoundLogger:
    """Logger with ``name`` bound as ``logger`` plus any initial context."""
    ctx = dict(initial_context)
    if name:
        ctx["logger"] = name
    return BoundLogger(context=ctx)


def _make_renderer(format: str, *, output: TextIO | None = None, colors: bool | None = None) -> LogRenderer:  # noqa: A002
    if format == "console":
        return ConsoleRenderer(output=output or sys.stderr, colors=colors)
    if format == "json":
        return JsonRenderer(output=output or sys.stdout)
    if format == "none":
        return NoOpRenderer()
    raise ValueError(f"Unknown format: {format}. Use 'console', 'json', or 'none'")


def _effective_level() -> int:
    level = _default_level.get()
    if level is None:
        level = getattr(logging, get_settings().logging.level, logging.INFO)
    return level


def _get_renderer() -> LogRenderer:
    renderer = _renderer.get()
    if renderer is None:
        cfg = get_settings().logging
        renderer = _make_renderer(cfg.format, colors=cfg.colors)
        _renderer.set(renderer)
    return renderer
