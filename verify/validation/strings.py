"""String property validators.

Each validator passes the string through on success and fails with a single
error otherwise. Pass ``error=`` to substitute a domain error value.
"""
from __future__ import annotations

import re
from typing import Any

from verify.errors import ErrorCode, validation_error

from .constructors import Property, property_


def _error_or_default(error: Any, message: str, code: ErrorCode, constraint: str) -> Any:
    if error is not None:
        return error
    return validation_error(message, code=code, constraint=constraint)


def length(n: int, *, error: Any = None) -> Property:
    """Exact length."""
    return property_(
        lambda s: len(s) == n,
        _error_or_default(
            error, f"String length must be exactly {n}",
            ErrorCode.E2003_OUT_OF_RANGE, f"length[{n}]",
        ),
    )


def min_length(n: int, *, error: Any = None) -> Property:
    return property_(
        lambda s: len(s) >= n,
        _error_or_default(
            error, f"String length must be at least {n}",
            ErrorCode.E2003_OUT_OF_RANGE, f"min_length[{n}]",
        ),
    )


def max_length(n: int, *, error: Any = None) -> Property:
    return property_(
        lambda s: len(s) <= n,
        _error_or_default(
            error, f"String length must be at most {n}",
            ErrorCode.E2003_OUT_OF_RANGE, f"max_length[{n}]",
        ),
    )


def non_empty(*, strip_whitespace: bool = True, error: Any = None) -> Property:
    """Not empty, and by default not whitespace-only."""
    return property_(
        lambda s: bool(s.strip() if strip_whitespace else s),
        _error_or_default(
            error, "String cannot be empty",
            ErrorCode.E2001_REQUIRED_FIELD_MISSING, "non_empty",
        ),
    )


def contains(fragment: str, *, error: Any = None) -> Property:
    return property_(
        lambda s: fragment in s,
        _error_or_default(
            error, f"String must contain '{fragment}'",
            ErrorCode.E2002_INVALID_FORMAT, f"contains[{fragment}]",
        ),
    )


def matches(pattern: str, flags: int = 0, *, error: Any = None) -> Property:
    """Whole-string regex match."""
    compiled = re.compile(pattern, flags)
    return property_(
        lambda s: compiled.fullmatch(s) is not None,
        _error_or_default(
            error, f"Value does not match pattern: {pattern}",
            ErrorCode.E2002_INVALID_FORMAT, f"pattern[{pattern}]",
        ),
    )
