"""Compositional Validator Core

A Validator maps a subject to a Result. Validators are immutable; every
composition method returns a new validator wrapping its predecessor.

Failure semantics:
- map/join short-circuit: a failed predecessor is returned as is
- check/check_field accumulate: every constraint runs, errors concatenate
- on_exception is the only place evaluation faults become Failures
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

from verify.errors import Failure, Result, collect_errors, from_exception, try_result
from verify.logging import validation_logger

S = TypeVar("S")
O = TypeVar("O")
O2 = TypeVar("O2")
F = TypeVar("F")


def _require_callable(name: str, value: Any) -> None:
    if not callable(value):
        raise TypeError(f"{name} must be callable, got {type(value).__name__}")


class Validator(ABC, Generic[S, O]):
    """Base class for validators.

    Subclasses implement ``verify``. Calling a validator is the same as
    calling ``verify``, so a validator can be passed anywhere a
    ``subject -> Result`` function is expected (e.g. to ``join``).
    """

    @abstractmethod
    def verify(self, subject: S) -> Result[O, Any]:
        """Validate a subject. Returns Success or Failure."""

    def __call__(self, subject: S) -> Result[O, Any]: return self.verify(subject)

    def map(self, fn: Callable[[O], O2]) -> Mapped:
        """Transform the success value. Failures pass through untouched."""
        _require_callable("map function", fn)
        return Mapped(self, fn)

    def join(self, fn: Callable[[O], Result[O2, Any]]) -> Joined:
        """Feed the success value into a dependent step (sequential bind)."""
        _require_callable("join function", fn)
        return Joined(self, fn)

    def check(self, predicate: Callable[[S], bool], error: Any) -> Checked:
        """Add an independent predicate over the subject, accumulating errors."""
        _require_callable("check predicate", predicate)
        return Checked(self, predicate, error)

    def check_field(
        self,
        selector: Callable[[S], F],
        field_validator: Callable[[F], Result[Any, Any]],
    ) -> FieldChecked:
        """Validate a projected field of the subject, accumulating errors."""
        _require_callable("field selector", selector)
        _require_callable("field validator", field_validator)
        return FieldChecked(self, selector, field_validator)

    def on_exception(
        self, error_from_fault: Callable[[Exception], Any] | None = None
    ) -> ExceptionCaught:
        """Convert faults raised during evaluation into a single-error Failure."""
        if error_from_fault is not None:
            _require_callable("error_from_fault", error_from_fault)
        return ExceptionCaught(self, error_from_fault or from_exception)


# ============================================================================
# Transformers
# ============================================================================

@dataclass(frozen=True, slots=True)
class Mapped(Validator):
    """Output transformation: Success(v) becomes Success(fn(v))."""
    base: Validator
    fn: Callable[[Any], Any]

    def verify(self, subject: Any) -> Result[Any, Any]:
        return self.base.verify(subject).map(self.fn)


@dataclass(frozen=True, slots=True)
class Joined(Validator):
    """Sequential bind: the second step only runs if the first succeeded.

    The second step's Result replaces the first one verbatim. Errors from
    the two steps are never merged.
    """
    base: Validator
    fn: Callable[[Any], Result[Any, Any]]

    def verify(self, subject: Any) -> Result[Any, Any]:
        return self.base.verify(subject).flat_map(self.fn)


@dataclass(frozen=True, slots=True)
class ExceptionCaught(Validator):
    """Fault boundary around a validator whose evaluation may raise."""
    validator: Validator
    error_from_fault: Callable[[Exception], Any]

    def verify(self, subject: Any) -> Result[Any, Any]:
        return try_result(lambda: self.validator.verify(subject), self._capture)

    def _capture(self, exc: Exception) -> Any:
        validation_logger().debug(
            "evaluation_fault_captured",
            fault_type=type(exc).__name__,
            fault=str(exc),
        )
        return self.error_from_fault(exc)


# ============================================================================
# Accumulating checks
# ============================================================================

@dataclass(frozen=True, slots=True)
class Checked(Validator):
    """Base validator plus one predicate over the original subject."""
    base: Validator
    predicate: Callable[[Any], bool]
    error: Any

    def verify(self, subject: Any) -> Result[Any, Any]:
        base_result = self.base.verify(subject)
        if self.predicate(subject):
            return base_result
        return Failure(collect_errors((base_result,)) + (self.error,))


@dataclass(frozen=True, slots=True)
class FieldChecked(Validator):
    """Base validator plus a field validator applied to ``selector(subject)``."""
    base: Validator
    selector: Callable[[Any], Any]
    field_validator: Callable[[Any], Result[Any, Any]]

    def verify(self, subject: Any) -> Result[Any, Any]:
        base_result = self.base.verify(subject)
        field_result = self.field_validator(self.selector(subject))
        if field_result.is_success():
            return base_result
        return Failure(collect_errors((base_result, field_result)))
