"""Refinement Combinators

Numeric and length bounds layered on an inner validator. The inner validator
always runs first and its rejection short-circuits the bound check. Bounds are
inclusive at both ends. Values the inner validator accepts but that cannot be
compared, or have no length, are rejected rather than raising.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TypeGuard

from .base import Validator, display


def _bounds(prefix: str, minimum: Any, maximum: Any) -> str:
    if minimum is not None and maximum is not None:
        return f"{prefix} >= {display(minimum)} && <= {display(maximum)}"
    if minimum is not None:
        return f"{prefix} >= {display(minimum)}"
    return f"{prefix} <= {display(maximum)}"


@dataclass(frozen=True, slots=True)
class Bounded(Validator[Any]):
    """Inner validator plus ``minimum <= value <= maximum``."""
    inner: Validator
    minimum: Any = None
    maximum: Any = None

    def test(self, value: Any) -> TypeGuard[Any]:
        if not self.inner.test(value):
            return False
        try:
            if self.minimum is not None and not value >= self.minimum:
                return False
            if self.maximum is not None and not value <= self.maximum:
                return False
        except Exception:
            return False
        return True

    def describe_failure(self, value: Any) -> str:
        expected = _bounds(self.inner.describe_failure(value), self.minimum, self.maximum)
        return f"Expected {expected}, got {display(value)}"


@dataclass(frozen=True, slots=True)
class LengthBounded(Validator[Any]):
    """Inner validator plus ``minimum <= len(value) <= maximum``."""
    inner: Validator
    minimum: int | None = None
    maximum: int | None = None

    def test(self, value: Any) -> TypeGuard[Any]:
        if not self.inner.test(value):
            return False
        try:
            size = len(value)
        except Exception:
            return False
        if self.minimum is not None and size < self.minimum:
            return False
        if self.maximum is not None and size > self.maximum:
            return False
        return True

    def describe_failure(self, value: Any) -> str:
        expected = _bounds(f"{self.inner.describe_failure(value)}.length", self.minimum, self.maximum)
        return f"Expected {expected}, got {display(value)}"


@dataclass(frozen=True, slots=True)
class ExactLength(Validator[Any]):
    inner: Validator
    size: int

    def test(self, value: Any) -> TypeGuard[Any]:
        if not self.inner.test(value):
            return False
        try:
            return len(value) == self.size
        except Exception:
            return False

    def describe_failure(self, value: Any) -> str:
        return f"Expected {self.inner.describe_failure(value)}.length === {self.size}, got {display(value)}"


def min_(validator: Validator, minimum: Any) -> Validator:
    return Bounded(validator, minimum=minimum)


def max_(validator: Validator, maximum: Any) -> Validator:
    return Bounded(validator, maximum=maximum)


def range_(validator: Validator, minimum: Any, maximum: Any) -> Validator:
    """Inclusive range: ``range_(number, 0, 10)`` accepts 0 and 10."""
    return Bounded(validator, minimum=minimum, maximum=maximum)


def length(validator: Validator, size: int) -> Validator:
    return ExactLength(validator, size)


def min_length(validator: Validator, minimum: int) -> Validator:
    return LengthBounded(validator, minimum=minimum)


def max_length(validator: Validator, maximum: int) -> Validator:
    return LengthBounded(validator, maximum=maximum)


def range_length(validator: Validator, minimum: int, maximum: int) -> Validator:
    return LengthBounded(validator, minimum=minimum, maximum=maximum)
