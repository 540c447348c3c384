"""verify: composable validators with ordered error accumulation.

    from verify import Verify, Failure, Success

    validator = (
        Verify.empty()
        .check(lambda u: u.phone != "", phone_empty)
        .check(lambda u: "@" in u.mail, mail_format)
    )
    validator.verify(user).fold(len, lambda _: 0)  # number of errors
"""
from verify.errors import (
    Result,
    Success,
    Failure,
    ValidationError,
    ErrorCode,
    Describable,
    success,
    failure,
    collect_errors,
    try_result,
)
from verify.validation import (
    Validator,
    valid,
    error,
    property_,
    lift,
    not_null,
    empty,
    from_function,
    all_,
    strings,
)


class Verify:
    """Namespace exposing the constructors under their canonical names."""

    valid = staticmethod(valid)
    error = staticmethod(error)
    property = staticmethod(property_)
    lift = staticmethod(lift)
    not_null = staticmethod(not_null)
    empty = staticmethod(empty)
    from_function = staticmethod(from_function)
    all = staticmethod(all_)


__all__ = [
    "Verify",
    # Results
    "Result",
    "Success",
    "Failure",
    "ValidationError",
    "ErrorCode",
    "Describable",
    "success",
    "failure",
    "collect_errors",
    "try_result",
    # Validators
    "Validator",
    "valid",
    "error",
    "property_",
    "lift",
    "not_null",
    "empty",
    "from_function",
    "all_",
    "strings",
]

__version__ = "0.1.0"
