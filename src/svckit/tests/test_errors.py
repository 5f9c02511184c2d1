"""Tests for structured errors."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from svckit.foundation.errors import (
    AddressError,
    ErrorCode,
    KitError,
    KitException,
    NetError,
    ValidationFailed,
    classify_exception,
)


@pytest.mark.parametrize(
    ("exc", "code"),
    [
        (TimeoutError("timed out"), ErrorCode.TIMEOUT),
        (ValueError("'abc' does not appear to be an IPv4 or IPv6 address"), ErrorCode.INVALID_ADDRESS),
        (ConnectionRefusedError("refused"), ErrorCode.NETWORK_ERROR),
        (ValueError("time data 'x' does not match format '%Y'"), ErrorCode.PARSE_ERROR),
        (ValueError("bad"), ErrorCode.INVALID_PARAMS),
        (KeyError("missing"), ErrorCode.UNKNOWN),
    ],
)
def test_classify_exception(exc: Exception, code: ErrorCode) -> None:
    assert classify_exception(exc) is code


def test_kit_error_model() -> None:
    error = KitError.create("netx.addr", "  boom  ", ErrorCode.NETWORK_ERROR)
    assert error.message == "boom"
    assert error.is_retryable
    assert error.severity == "warning"
    assert str(error) == "[NETWORK_ERROR] netx.addr: boom"
    assert error.model_dump()["is_retryable"] is True


def test_kit_error_is_frozen_and_validated() -> None:
    error = KitError.create("x", "y")
    with pytest.raises(ValidationError):
        error.message = "z"  # type: ignore[misc]
    with pytest.raises(ValidationError):
        KitError(component="", message="y")


def test_kit_error_from_exception() -> None:
    try:
        raise TimeoutError("upstream timed out")
    except TimeoutError as e:
        error = KitError.from_exception("netx", e, "dial", include_trace=True)
    assert error.message == "dial: upstream timed out"
    assert error.code is ErrorCode.TIMEOUT
    assert error.recoverable
    assert error.details is not None and "TimeoutError" in error.details


def test_kit_error_from_message_less_exception() -> None:
    assert KitError.from_exception("x", KeyError()).message == "KeyError"


def test_exception_subclasses_carry_defaults() -> None:
    assert AddressError.create("bad").code is ErrorCode.INVALID_ADDRESS
    assert NetError.create("down").code is ErrorCode.NETWORK_ERROR
    assert ValidationFailed.create("no").error.component == "validation"
    assert isinstance(AddressError.create("bad"), KitException)


def test_from_exc_prefers_class_code() -> None:
    exc = AddressError.from_exc(TimeoutError("timed out"), "lookup")
    assert exc.code is ErrorCode.INVALID_ADDRESS
    assert str(exc) == "lookup: timed out"

    generic = KitException.from_exc(TimeoutError("timed out"))
    assert generic.code is ErrorCode.TIMEOUT
    assert KitException.from_exc(ValueError("x"), code=ErrorCode.PARSE_ERROR).code is ErrorCode.PARSE_ERROR
