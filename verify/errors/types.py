"""Result and Error Value Types

Implements the two-variant Result used by every validator. A Result is either
a Failure carrying an ordered, non-empty tuple of errors, or a Success
carrying exactly one value. Extraction goes through ``fold``, which forces
both variants to be handled.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import (
    Any, Callable, Generic, Iterable, Protocol, TypeVar, Union,
    final, runtime_checkable,
)

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")


class ErrorCode(Enum):
    """Error code taxonomy.

    E2xxx: Validation errors
    E9xxx: Internal/Unknown errors
    """
    # Validation (E2xxx)
    E2000_VALIDATION_GENERIC = 2000
    E2001_REQUIRED_FIELD_MISSING = 2001
    E2002_INVALID_FORMAT = 2002
    E2003_OUT_OF_RANGE = 2003
    E2004_INVALID_TYPE = 2004
    E2005_CONSTRAINT_VIOLATION = 2005

    # Internal (E9xxx)
    E9000_INTERNAL_GENERIC = 9000
    E9001_UNEXPECTED_ERROR = 9001

    @property
    def category(self) -> str:
        """Human-readable error category."""
        if 2000 <= self.value < 3000:
            return "validation"
        return "internal"


@runtime_checkable
class Describable(Protocol):
    """Anything that can be stored in a Failure and rendered for diagnostics."""

    @property
    def error_description(self) -> str: ...


@dataclass(frozen=True, slots=True)
class ValidationError:
    """Default error value for validators.

    Equality and hashing consider only the code and message, so two errors
    built from the same description compare equal regardless of the
    diagnostic metadata attached to them.
    """
    code: ErrorCode
    message: str
    metadata: dict = field(default_factory=dict, compare=False, hash=False)

    @property
    def error_description(self) -> str:
        return self.message

    def with_metadata(self, **kwargs) -> ValidationError:
        """Create new error with additional metadata."""
        return ValidationError(
            code=self.code,
            message=self.message,
            metadata={**self.metadata, **kwargs},
        )

    def to_dict(self) -> dict:
        """Serialize error for diagnostics."""
        return {
            "code": self.code.name,
            "code_num": self.code.value,
            "category": self.code.category,
            "message": self.message,
            "metadata": self.metadata,
        }

    def __str__(self) -> str:
        return f"[{self.code.name}] {self.message}"


@final
@dataclass(frozen=True, slots=True)
class Success(Generic[T]):
    """Success variant of Result. Wraps exactly one value."""
    value: T

    def is_success(self) -> bool:
        return True

    def is_failure(self) -> bool:
        return False

    def fold(
        self,
        on_failure: Callable[[tuple], U],
        on_success: Callable[[T], U],
    ) -> U:
        """Apply the handler matching this variant."""
        return on_success(self.value)

    def map(self, f: Callable[[T], U]) -> Result[U, Any]:
        """Transform the success value."""
        return Success(f(self.value))

    def flat_map(self, f: Callable[[T], Result[U, Any]]) -> Result[U, Any]:
        """Chain a step that may fail. Its Result replaces this one."""
        return f(self.value)


@final
@dataclass(frozen=True, slots=True)
class Failure(Generic[E]):
    """Failure variant of Result. Wraps an ordered, non-empty tuple of errors."""
    errors: tuple[E, ...]

    def __post_init__(self):
        if isinstance(self.errors, (str, bytes)):
            raise TypeError("Failure errors must be a sequence of errors, not a string")
        if not isinstance(self.errors, tuple):
            object.__setattr__(self, "errors", tuple(self.errors))
        if not self.errors:
            raise ValueError("Failure requires at least one error")

    def is_success(self) -> bool:
        return False

    def is_failure(self) -> bool:
        return True

    def fold(
        self,
        on_failure: Callable[[tuple[E, ...]], U],
        on_success: Callable[[Any], U],
    ) -> U:
        """Apply the handler matching this variant."""
        return on_failure(self.errors)

    def map(self, f: Callable[[Any], U]) -> Result[U, E]:
        """No-op for Failure variant. Returns this same instance."""
        return self  # type: ignore

    def flat_map(self, f: Callable[[Any], Result[U, E]]) -> Result[U, E]:
        """No-op for Failure variant. Returns this same instance."""
        return self  # type: ignore


# Type alias for the two-variant outcome
Result = Union[Success[T], Failure[E]]


def success(value: T) -> Success[T]:
    """Construct Success variant."""
    return Success(value)


def failure(*errors: E) -> Failure[E]:
    """Construct Failure variant from one or more errors."""
    return Failure(errors)


def collect_errors(results: Iterable[Result[Any, E]]) -> tuple[E, ...]:
    """Concatenate the errors of every Failure, preserving order.

    Successes contribute nothing. Duplicates are kept.
    """
    errors: list[E] = []

    for r in results:
        match r:
            case Failure(errs):
                errors.extend(errs)
            case Success(_):
                pass

    return tuple(errors)


def try_result(
    f: Callable[[], Result[T, E]],
    on_fault: Callable[[Exception], E],
) -> Result[T, E]:
    """Evaluate a Result-producing call, converting a raised fault to Failure."""
    try:
        return f()
    except Exception as e:
        return Failure((on_fault(e),))
