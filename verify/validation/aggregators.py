"""Batch aggregation of validators sharing a subject.

Every member runs, in order, regardless of earlier failures. Errors are
concatenated in member order and never deduplicated.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable

from verify.errors import Failure, Result, Success, collect_errors

from .validator import Validator, _require_callable


@dataclass(frozen=True, slots=True)
class AllOf(Validator):
    """All members are evaluated; success carries the original subject."""
    validators: tuple[Validator, ...]

    def __init__(self, *validators: Validator):
        object.__setattr__(self, "validators", tuple(validators))

    def verify(self, subject: Any) -> Result[Any, Any]:
        results = [v(subject) for v in self.validators]
        if errors := collect_errors(results):
            return Failure(errors)
        return Success(subject)


def all_(validators: Iterable[Validator]) -> AllOf:
    members = tuple(validators)
    for i, v in enumerate(members):
        _require_callable(f"validators[{i}]", v)
    return AllOf(*members)
