"""Error Builders

Ergonomic constructors for ValidationError values. Each builder picks the
appropriate code and records the offending details as metadata.
"""
from typing import Any

from .types import ErrorCode, ValidationError


def validation_error(
    message: str,
    *,
    code: ErrorCode = ErrorCode.E2000_VALIDATION_GENERIC,
    field: str | None = None,
    value: Any = None,
    **metadata,
) -> ValidationError:
    """Create validation error."""
    meta = {"field": field, "value": value, **metadata}
    return ValidationError(
        code=code,
        message=message,
        metadata={k: v for k, v in meta.items() if v is not None},
    )


def required_field(field: str) -> ValidationError:
    return validation_error(
        f"Required field '{field}' is missing",
        code=ErrorCode.E2001_REQUIRED_FIELD_MISSING,
        field=field,
    )


def invalid_format(field: str, expected: str, got: str | None = None) -> ValidationError:
    msg = f"Invalid format for '{field}': expected {expected}"
    if got:
        msg += f", got '{got}'"
    return validation_error(
        msg,
        code=ErrorCode.E2002_INVALID_FORMAT,
        field=field,
        expected=expected,
    )


def out_of_range(
    field: str,
    value: int | float,
    min_val: int | float | None = None,
    max_val: int | float | None = None,
) -> ValidationError:
    if min_val is not None and max_val is not None:
        msg = f"'{field}' must be between {min_val} and {max_val}, got {value}"
    elif min_val is not None:
        msg = f"'{field}' must be at least {min_val}, got {value}"
    elif max_val is not None:
        msg = f"'{field}' must be at most {max_val}, got {value}"
    else:
        msg = f"'{field}' is out of range: {value}"
    return validation_error(
        msg,
        code=ErrorCode.E2003_OUT_OF_RANGE,
        field=field,
        value=value,
        min=min_val,
        max=max_val,
    )


def constraint_violation(constraint: str, message: str | None = None) -> ValidationError:
    return validation_error(
        message or f"Constraint '{constraint}' violated",
        code=ErrorCode.E2005_CONSTRAINT_VIOLATION,
        constraint=constraint,
    )


def from_exception(exc: Exception, message: str | None = None) -> ValidationError:
    """Convert a fault raised during evaluation into an error value."""
    return ValidationError(
        code=ErrorCode.E9001_UNEXPECTED_ERROR,
        message=message or str(exc) or type(exc).__name__,
        metadata={"exception_type": type(exc).__name__},
    )
