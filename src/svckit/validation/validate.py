"""Pluggable value validation.

By default pydantic models are re-validated and objects implementing
``validate()`` validate themselves; everything else passes. Code that needs
a different policy builds a ``Validator`` and passes it explicitly.

Example:
    >>> def positive(value):
    ...     if value <= 0:
    ...         raise ValidationFailed.create(f"{value} is not positive")
    >>> validate(3, Validator(positive))
    >>> validate(-1, Validator(positive))
    Traceback (most recent call last):
    ...
    svckit.foundation.errors.errors.ValidationFailed: -1 is not positive
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Protocol, runtime_checkable

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from svckit.foundation.errors import ValidationFailed
from svckit.runtime.observability import get_logger

ValidateFn = Callable[[Any], None]

log = get_logger("validation")


@runtime_checkable
class Validatable(Protocol):
    """Objects that know how to check themselves; raise to reject."""

    def validate(self) -> None: ...


def default_validate(value: Any) -> None:
    """Re-validate pydantic models, delegate to ``validate()``, else accept.

    Raises:
        ValidationFailed: When a pydantic model no longer satisfies its schema
    """
    if isinstance(value, BaseModel):
        try:
            type(value).model_validate(value.model_dump(by_alias=True))
        except PydanticValidationError as e:
            log.debug("model rejected", model=type(value).__name__, errors=e.error_count())
            raise ValidationFailed.from_exc(e, type(value).__name__) from e
        return
    if isinstance(value, Validatable) and not isinstance(value, type):
        value.validate()


@dataclass(frozen=True, slots=True)
class Validator:
    """Validation strategy wrapping a single function."""

    func: ValidateFn

    def __post_init__(self) -> None:
        if self.func is None:
            raise ValueError("Validator: the validate function must not be None")
        if not callable(self.func):
            raise TypeError(f"Validator: {self.func!r} is not callable")

    def __call__(self, value: Any) -> None:
        self.func(value)


default_validator = Validator(default_validate)


def validate(value: Any, validator: Validator | ValidateFn | None = None) -> None:
    """Validate ``value`` with ``validator`` (default: ``default_validator``).

    Whatever the validator raises propagates unchanged.
    """
    (validator or default_validator)(value)
