"""Unified error handling for svckit.

- ErrorCode: Standard error codes for helper failures
- KitError/KitException: Structured errors and exceptions
- AddressError/NetError/ValidationFailed: Raised by the helpers
- JsonValue/JsonDict: Shared JSON type aliases
"""

from .errors import (
    AddressError,
    ErrorCode,
    KitError,
    KitException,
    NetError,
    ValidationFailed,
    classify_exception,
)
from .types import JsonDict, JsonPrimitive, JsonValue

__all__ = [
    "ErrorCode", "KitError", "KitException", "classify_exception",
    "AddressError", "NetError", "ValidationFailed",
    "JsonDict", "JsonPrimitive", "JsonValue",
]
