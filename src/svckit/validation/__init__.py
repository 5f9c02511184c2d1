"""Value validation with an explicit, swappable strategy."""

from svckit.foundation.errors import ValidationFailed

from .validate import ValidateFn, Validatable, Validator, default_validate, default_validator, validate

__all__ = [
    "ValidateFn", "Validatable", "Validator", "ValidationFailed",
    "default_validate", "default_validator", "validate",
]
