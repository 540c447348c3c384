"""Validator Combinators

Key Features:
- Base constructors: valid, error, property_, lift, not_null, empty
- Short-circuiting transformers: map, join
- Accumulating checks: check, check_field, all_
- Fault boundary: on_exception

Usage:
    from verify.validation import error, property_

    non_empty = property_(lambda s: bool(s), phone_empty_error)
    has_at = property_(lambda s: "@" in s, mail_format_error)

    user_validator = (
        error(base_error)
        .check_field(lambda u: u.phone, non_empty)
        .check_field(lambda u: u.mail, has_at)
    )
    user_validator.verify(user)  # Failure with up to 3 errors, in order
"""
from . import strings
from .validator import (
    Validator,
    Mapped,
    Joined,
    ExceptionCaught,
    Checked,
    FieldChecked,
)
from .constructors import (
    Valid,
    Fail,
    Property,
    Lift,
    FunctionValidator,
    valid,
    error,
    property_,
    lift,
    not_null,
    empty,
    from_function,
)
from .aggregators import AllOf, all_

__all__ = [
    # Base
    "Validator",
    # Transformers
    "Mapped",
    "Joined",
    "ExceptionCaught",
    # Accumulators
    "Checked",
    "FieldChecked",
    "AllOf",
    "all_",
    # Constructors
    "Valid",
    "Fail",
    "Property",
    "Lift",
    "FunctionValidator",
    "valid",
    "error",
    "property_",
    "lift",
    "not_null",
    "empty",
    "from_function",
    # String validators
    "strings",
]
