"""svckit - small, independent helpers for backend services.

Host:port splitting (the core), IP address and timeout helpers, call-stack
capture, day-boundary time helpers and pluggable validation, all sharing
pydantic error models, pydantic-settings configuration and structured logging.

Quick Start:
    >>> from svckit import split_host_port, SplitPolicy
    >>> split_host_port("[2001:db8::1]:443")
    HostPort(host='2001:db8::1', port='443')
    >>> split_host_port("localhost:8.0", SplitPolicy.STRICT)
    HostPort(host='localhost:8.0', port='')

Configuration (environment):
    SVCKIT_NET_SPLIT_POLICY=strict   # default policy for split_host_port
    SVCKIT_LOG_LEVEL=DEBUG           # logging threshold
    SVCKIT_LOG_FORMAT=json           # console | json | none
    SVCKIT_TIME_TIMEZONE=UTC         # zone of the default clock
"""

from __future__ import annotations

__version__ = "0.1.0"

# Errors
from .foundation.errors import (
    AddressError,
    ErrorCode,
    KitError,
    KitException,
    NetError,
    ValidationFailed,
    classify_exception,
)

# Config
from .foundation.config import SplitPolicy, SvckitSettings, clear_settings_cache, get_settings

# Network
from .netx import (
    HostPort,
    HostPortSplitter,
    addr_from_net_addr,
    get_splitter,
    ip_is_on,
    is_timeout,
    join_host_port,
    split_host_port,
    split_host_port_lenient,
    split_host_port_strict,
)

# Runtime
from .runtime import Frame, caller, configure_logging, get_logger, reset_logging, stacks, trim_pkg_file

# Time
from .timex import DAY, WEEK, Clock, get_clock, to_today

# Validation
from .validation import Validatable, Validator, default_validator, validate

__all__ = [
    "__version__",
    # Errors
    "ErrorCode", "KitError", "KitException", "classify_exception",
    "AddressError", "NetError", "ValidationFailed",
    # Config
    "SvckitSettings", "SplitPolicy", "get_settings", "clear_settings_cache",
    # Network
    "HostPort", "HostPortSplitter", "get_splitter", "split_host_port",
    "split_host_port_lenient", "split_host_port_strict", "join_host_port",
    "addr_from_net_addr", "ip_is_on", "is_timeout",
    # Runtime
    "Frame", "caller", "stacks", "trim_pkg_file",
    "configure_logging", "get_logger", "reset_logging",
    # Time
    "DAY", "WEEK", "Clock", "get_clock", "to_today",
    # Validation
    "Validatable", "Validator", "default_validator", "validate",
]
