"""Base Validator Constructors

Building blocks from which composite validators are assembled:

    valid(value)                  always Success(value)
    error(err)                    always Failure((err,))
    property_(predicate, error)   Success(subject) if predicate holds
    lift(fn)                      Success(fn(subject))
    not_null(error)               Success(subject) unless subject is None
    empty()                       Success(subject)
    from_function(fn)             adapt a subject -> Result function

None of these catch exceptions. Wrap with ``.on_exception(...)`` when the
underlying function can raise.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, TypeVar

from verify.errors import Failure, Result, Success

from .validator import Validator, _require_callable

S = TypeVar("S")
O = TypeVar("O")


@dataclass(frozen=True, slots=True)
class Valid(Validator):
    """Ignores the subject and always succeeds with a fixed value."""
    value: Any

    def verify(self, subject: Any) -> Result[Any, Any]:
        return Success(self.value)


@dataclass(frozen=True, slots=True)
class Fail(Validator):
    """Ignores the subject and always fails with a fixed error."""
    error: Any

    def verify(self, subject: Any) -> Result[Any, Any]:
        return Failure((self.error,))


@dataclass(frozen=True, slots=True)
class Property(Validator):
    """Predicate check that passes the subject through on success."""
    predicate: Callable[[Any], bool]
    error: Any

    def verify(self, subject: Any) -> Result[Any, Any]:
        if self.predicate(subject):
            return Success(subject)
        return Failure((self.error,))


@dataclass(frozen=True, slots=True)
class Lift(Validator):
    """Total function lifted into a validator that never fails."""
    fn: Callable[[Any], Any]

    def verify(self, subject: Any) -> Result[Any, Any]:
        return Success(self.fn(subject))


@dataclass(frozen=True, slots=True)
class FunctionValidator(Validator):
    """Plain ``subject -> Result`` function adapted to the Validator interface.

    Usage:
        parse_int = from_function(lambda s: Success(int(s)))
        safe_parse_int = parse_int.on_exception(lambda _: not_an_int_error)
    """
    fn: Callable[[Any], Result[Any, Any]]

    def verify(self, subject: Any) -> Result[Any, Any]:
        return self.fn(subject)


def valid(value: O) -> Valid:
    return Valid(value)


def error(err: Any) -> Fail:
    return Fail(err)


def property_(predicate: Callable[[S], bool], error: Any) -> Property:
    _require_callable("predicate", predicate)
    return Property(predicate, error)


def lift(fn: Callable[[S], O]) -> Lift:
    _require_callable("lift function", fn)
    return Lift(fn)


def not_null(error: Any) -> Property:
    """Fails with ``error`` when the subject is None."""
    return Property(_is_not_none, error)


def empty() -> Lift:
    """Identity validator, the usual starting point for a ``check`` chain."""
    return Lift(_identity)


def from_function(fn: Callable[[S], Result[O, Any]]) -> FunctionValidator:
    _require_callable("validator function", fn)
    return FunctionValidator(fn)


def _is_not_none(value: Any) -> bool: return value is not None


def _identity(value: Any) -> Any: return value
