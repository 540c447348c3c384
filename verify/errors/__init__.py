"""Result and Error Types

Key components:
- Result[T, E]: two-variant outcome, Success or Failure
- ValidationError: default describable, comparable error value
- ErrorCode: error code taxonomy
- Builder functions: ergonomic error construction

Usage:
    from verify.errors import Failure, Success, required_field

    match validator.verify(user):
        case Success(user):
            save(user)
        case Failure(errors):
            for e in errors:
                print(e.error_description)
"""
from .types import (
    # Core types
    Result,
    Success,
    Failure,
    ValidationError,
    ErrorCode,
    Describable,
    # Constructors
    success,
    failure,
    try_result,
    # Combinators
    collect_errors,
)

from .builders import (
    validation_error,
    required_field,
    invalid_format,
    out_of_range,
    constraint_violation,
    from_exception,
)

__all__ = [
    # Core types
    "Result",
    "Success",
    "Failure",
    "ValidationError",
    "ErrorCode",
    "Describable",
    # Constructors
    "success",
    "failure",
    "try_result",
    # Combinators
    "collect_errors",
    # Builders
    "validation_error",
    "required_field",
    "invalid_format",
    "out_of_range",
    "constraint_violation",
    "from_exception",
]
