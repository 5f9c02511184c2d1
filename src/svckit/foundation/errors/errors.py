"""Standardized error handling for svckit helpers.

Provides error codes and structured error models for callers.
Uses Pydantic for validation and serialization.
"""

from __future__ import annotations

import traceback
from enum import StrEnum
from functools import lru_cache
from typing import Annotated, Self

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator


class ErrorCode(StrEnum):
    """Standard error codes for helper failures."""
    INVALID_ADDRESS = "INVALID_ADDRESS"
    NETWORK_ERROR = "NETWORK_ERROR"
    TIMEOUT = "TIMEOUT"
    INVALID_PARAMS = "INVALID_PARAMS"
    VALIDATION_FAILED = "VALIDATION_FAILED"
    PARSE_ERROR = "PARSE_ERROR"
    UNKNOWN = "UNKNOWN"


# Ordered: first match wins
_PATTERN_CODES: dict[str, ErrorCode] = {
    "timeout": ErrorCode.TIMEOUT,
    "timed out": ErrorCode.TIMEOUT,
    "address": ErrorCode.INVALID_ADDRESS,
    "connection": ErrorCode.NETWORK_ERROR,
    "network": ErrorCode.NETWORK_ERROR,
    "validation": ErrorCode.VALIDATION_FAILED,
    "parse": ErrorCode.PARSE_ERROR,
    "decode": ErrorCode.PARSE_ERROR,
    "format": ErrorCode.PARSE_ERROR,
    "value": ErrorCode.INVALID_PARAMS,
}
_PATTERN_KEYS = tuple(_PATTERN_CODES.keys())


@lru_cache(maxsize=256)
def _classify_cached(exc_key: str) -> ErrorCode:
    haystack = exc_key.lower()
    for pattern in _PATTERN_KEYS:
        if pattern in haystack:
            return _PATTERN_CODES[pattern]
    return ErrorCode.UNKNOWN


def classify_exception(exc: BaseException) -> ErrorCode:
    """Map exception to error code via pattern matching on name/message."""
    return _classify_cached(f"{type(exc).__name__} {exc}")


_RETRYABLE_CODES: frozenset[ErrorCode] = frozenset({
    ErrorCode.TIMEOUT,
    ErrorCode.NETWORK_ERROR,
})


class KitError(BaseModel):
    """Structured error for helper failures.

    Attributes:
        component: Helper that failed (e.g. "netx.addr")
        message: Human-readable error message
        code: Machine-readable error code
        recoverable: Whether the error might succeed on retry
        details: Optional detailed information (e.g., stack trace)
    """

    model_config = ConfigDict(
        frozen=True,
        str_strip_whitespace=True,
        validate_default=True,
        json_schema_extra={
            "title": "Kit Error",
            "examples": [{
                "component": "netx.addr",
                "message": "'abc' is not an IP address",
                "code": "INVALID_ADDRESS",
                "recoverable": False,
            }],
        },
    )

    component: Annotated[str, Field(min_length=1, description="Helper that produced the error")]
    message: Annotated[str, Field(min_length=1, description="Human-readable error message")]
    code: ErrorCode = Field(default=ErrorCode.UNKNOWN, description="Machine-readable error classification")
    recoverable: bool = Field(default=False, description="Whether retry might succeed")
    details: str | None = Field(default=None, description="Optional detailed error info")

    @field_validator("message", mode="before")
    @classmethod
    def _ensure_message(cls, v: str | Exception) -> str:
        """Accept Exception objects and extract message."""
        return str(v) if isinstance(v, Exception) else v

    @computed_field
    @property
    def is_retryable(self) -> bool:
        return self.code in _RETRYABLE_CODES

    @computed_field
    @property
    def severity(self) -> str:
        if self.code in _RETRYABLE_CODES:
            return "warning"
        return "error"

    @classmethod
    def create(
        cls,
        component: str,
        message: str,
        code: ErrorCode = ErrorCode.UNKNOWN,
        *,
        recoverable: bool = False,
        details: str | None = None,
    ) -> Self:
        return cls(component=component, message=message, code=code, recoverable=recoverable, details=details)

    @classmethod
    def from_exception(
        cls,
        component: str,
        exc: BaseException,
        context: str = "",
        *,
        include_trace: bool = False,
    ) -> Self:
        """Create from exception with auto-classification."""
        code = classify_exception(exc)
        return cls(
            component=component,
            message=f"{context}: {exc}" if context else (str(exc) or type(exc).__name__),
            code=code,
            recoverable=code in _RETRYABLE_CODES,
            details="".join(traceback.format_exception(exc)) if include_trace else None,
        )

    def render(self) -> str:
        parts = [f"[{self.code}] {self.component}: {self.message}"]
        if self.details:
            parts.append(f"\nDetails:\n{self.details}")
        return "".join(parts)

    __str__ = render


class KitException(Exception):
    """Exception wrapping a KitError for raising."""

    __slots__ = ("error",)

    component: str = "svckit"
    default_code: ErrorCode = ErrorCode.UNKNOWN

    def __init__(self, error: KitError) -> None:
        self.error = error
        super().__init__(error.message)

    @property
    def code(self) -> ErrorCode:
        return self.error.code

    @classmethod
    def create(cls, message: str, code: ErrorCode | None = None, *, component: str | None = None) -> Self:
        return cls(KitError.create(component or cls.component, message, code or cls.default_code))

    @classmethod
    def from_exc(cls, exc: BaseException, context: str = "", *, code: ErrorCode | None = None) -> Self:
        """Create from exception; the class default code wins over classification."""
        error = KitError.from_exception(cls.component, exc, context)
        if code or cls.default_code is not ErrorCode.UNKNOWN:
            error = error.model_copy(update={"code": code or cls.default_code})
        return cls(error)


class AddressError(KitException):
    """Raised when an address cannot be interpreted as an IP address."""

    component = "netx.addr"
    default_code = ErrorCode.INVALID_ADDRESS


class NetError(KitException):
    """Raised when querying local network state fails."""

    component = "netx.addr"
    default_code = ErrorCode.NETWORK_ERROR


class ValidationFailed(KitException):
    """Raised by validators when a value is rejected."""

    component = "validation"
    default_code = ErrorCode.VALIDATION_FAILED
