"""Runtime helpers: call-stack capture and structured logging."""

from .observability import configure_logging, get_logger, reset_logging
from .stack import MAX_DEPTH, Frame, caller, stacks, trim_pkg_file

__all__ = [
    # Stack
    "Frame", "caller", "stacks", "trim_pkg_file", "MAX_DEPTH",
    # Logging
    "configure_logging", "get_logger", "reset_logging",
]
