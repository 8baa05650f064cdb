"""Combinators

Build composite validators from simpler ones:
- Optionality: ``nullable``, ``undefinable``
- Value sets: ``literal``, ``one_of``, ``one_of_type``
- Structure: ``object_``, ``array``
- Logic: ``union`` (short-circuits on first acceptance),
  ``intersection`` (short-circuits on first rejection)

Children are held by reference and walked afresh on every call.
"""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, TypeGuard

from .base import UNDEFINED, Validator, display, kind_of, strict_equals


# ============================================================================
# Optionality
# ============================================================================

@dataclass(frozen=True, slots=True)
class Nullable(Validator[Any]):
    """Accept ``None`` or whatever ``inner`` accepts."""
    inner: Validator

    def test(self, value: Any) -> TypeGuard[Any]:
        return value is None or self.inner.test(value)

    def describe_failure(self, value: Any) -> str:
        return f"Expected null or {self.inner.describe_failure(value)}, got {kind_of(value)}"


@dataclass(frozen=True, slots=True)
class Undefinable(Validator[Any]):
    """Accept ``UNDEFINED`` or whatever ``inner`` accepts."""
    inner: Validator

    def test(self, value: Any) -> TypeGuard[Any]:
        return value is UNDEFINED or self.inner.test(value)

    def describe_failure(self, value: Any) -> str:
        return f"Expected undefined or {self.inner.describe_failure(value)}, got {kind_of(value)}"


# ============================================================================
# Value Sets
# ============================================================================

@dataclass(frozen=True, slots=True)
class Literal(Validator[Any]):
    expected: Any

    def test(self, value: Any) -> TypeGuard[Any]:
        return strict_equals(value, self.expected)

    def describe_failure(self, value: Any) -> str:
        return f"Expected {display(self.expected)}, got {display(value)}"


@dataclass(frozen=True, slots=True)
class OneOf(Validator[Any]):
    """Strict membership in ``options``.

    Equal-but-distinct containers never match; only scalars compare by value.
    """
    options: tuple[Any, ...]

    def test(self, value: Any) -> TypeGuard[Any]:
        return any(strict_equals(value, option) for option in self.options)

    def describe_failure(self, value: Any) -> str:
        return f"Expected one of {', '.join(display(o) for o in self.options)}, got {display(value)}"


@dataclass(frozen=True, slots=True)
class OneOfType(Validator[Any]):
    """Strict membership in ``options``, phrased through ``type_validator``.

    ``type_validator`` only formats the expected list; it never tests the value.
    """
    type_validator: Validator
    options: tuple[Any, ...]

    def test(self, value: Any) -> TypeGuard[Any]:
        return any(strict_equals(value, option) for option in self.options)

    def describe_failure(self, value: Any) -> str:
        expected = ", ".join(self.type_validator.describe_failure(o) for o in self.options)
        return f"Expected one of {expected}, got {display(value)}"


# ============================================================================
# Structure
# ============================================================================

def _field(value: Any, key: str) -> Any:
    # a lookup that raises counts as absent
    try:
        if isinstance(value, Mapping):
            return value.get(key, UNDEFINED)
        return getattr(value, key, UNDEFINED)
    except Exception:
        return UNDEFINED


@dataclass(frozen=True, slots=True)
class ObjectShape(Validator[Any]):
    """Width-permissive structural check.

    Every declared key must satisfy its validator; undeclared keys are never
    inspected. Mappings are read by key, other objects by attribute. The
    failure message does not name the failing key.
    """
    fields: tuple[tuple[str, Validator], ...]

    def test(self, value: Any) -> TypeGuard[Any]:
        if kind_of(value) != "object":
            return False
        return all(validator.test(_field(value, key)) for key, validator in self.fields)

    def describe_failure(self, value: Any) -> str:
        return f"Expected object, got {kind_of(value)}"


@dataclass(frozen=True, slots=True)
class ArrayOf(Validator[Any]):
    """Every element of a list or tuple satisfies ``item``."""
    item: Validator

    def test(self, value: Any) -> TypeGuard[Any]:
        return isinstance(value, (list, tuple)) and all(self.item.test(v) for v in value)

    def describe_failure(self, value: Any) -> str:
        return f"Expected array, got {kind_of(value)}"


# ============================================================================
# Logic
# ============================================================================

@dataclass(frozen=True, slots=True)
class Union(Validator[Any]):
    validators: tuple[Validator, ...]

    def test(self, value: Any) -> TypeGuard[Any]:
        return any(v.test(value) for v in self.validators)

    def describe_failure(self, value: Any) -> str:
        reasons = ", ".join(v.describe_failure(value) for v in self.validators)
        return f"Expected one of {reasons}, got {display(value)}"


@dataclass(frozen=True, slots=True)
class Intersection(Validator[Any]):
    validators: tuple[Validator, ...]

    def test(self, value: Any) -> TypeGuard[Any]:
        return all(v.test(value) for v in self.validators)

    def describe_failure(self, value: Any) -> str:
        reasons = ", ".join(v.describe_failure(value) for v in self.validators)
        return f"Expected intersection of {reasons}, got {display(value)}"


def nullable(validator: Validator) -> Validator:
    return Nullable(validator)


def undefinable(validator: Validator) -> Validator:
    return Undefinable(validator)


def literal(value: Any) -> Validator:
    return Literal(value)


def one_of(*values: Any) -> Validator:
    return OneOf(values)


def one_of_type(type_validator: Validator, *values: Any) -> Validator:
    return OneOfType(type_validator, values)


def object_(shape: Mapping[str, Validator]) -> Validator:
    """Validate an object against a ``{key: validator}`` shape.

    Usage:
        point = object_({"x": number, "y": number})
        point({"x": 1, "y": 2, "label": "origin"})  # True, extra keys ignored
    """
    return ObjectShape(tuple(shape.items()))


def array(validator: Validator) -> Validator:
    return ArrayOf(validator)


def union(*validators: Validator) -> Validator:
    return Union(validators)


def intersection(*validators: Validator) -> Validator:
    return Intersection(validators)
