"""Validator Core

A validator pairs a membership test with a failure-message generator. Every
primitive and combinator is a frozen dataclass implementing the two-method
``Validator`` interface, so validators are immutable values that can be shared
freely between threads.

Value kinds mirror a dynamic ``typeof``: ``None`` is ``"null"``, the
``UNDEFINED`` sentinel is ``"undefined"`` (what an object-shape check sees for
a missing key), and containers and instances are ``"object"``.
"""
from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Callable, Generic, TypeGuard, TypeVar, final

T = TypeVar("T")


@final
class _Undefined:
    """Singleton marking an absent value."""

    _instance: _Undefined | None = None

    def __new__(cls) -> _Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False


UNDEFINED: Any = _Undefined()


@final
class Symbol:
    """Unique identity token with an optional description.

    Two symbols are equal only if they are the same object, even when their
    descriptions match.
    """

    __slots__ = ("description",)

    def __init__(self, description: str | None = None):
        self.description = description

    def __repr__(self) -> str:
        return f"Symbol({self.description or ''})"

    __str__ = __repr__


def kind_of(value: Any) -> str:
    """Return the fundamental kind of *value*."""
    if value is UNDEFINED:
        return "undefined"
    if value is None:
        return "null"
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, Symbol):
        return "symbol"
    if callable(value):
        return "function"
    return "object"


_VALUE_KINDS = frozenset({"undefined", "null", "boolean", "number", "string"})


def strict_equals(left: Any, right: Any) -> bool:
    """Kind-aware equality: value comparison for scalars, identity otherwise."""
    kind = kind_of(left)
    if kind != kind_of(right):
        return False
    if kind in _VALUE_KINDS:
        return left == right
    return left is right


def display(value: Any) -> str:
    """Render *value* for failure messages."""
    if value is None:
        return "null"
    if value is UNDEFINED:
        return "undefined"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        # 5.0 renders as 5
        if value.is_integer() and abs(value) < 1e21:
            return str(int(value))
    return str(value)


class Validator(ABC, Generic[T]):
    """Base class for validators.

    Validators are immutable and composable via operators:
    - | (OR): union of both validators
    - & (AND): intersection of both validators

    ``test`` never raises for built-in validators; ``describe_failure`` assumes
    ``test`` returned False but may be called regardless.
    """

    __slots__ = ()

    @abstractmethod
    def test(self, value: Any) -> TypeGuard[T]:
        """Return True if *value* conforms to this validator."""

    @abstractmethod
    def describe_failure(self, value: Any) -> str:
        """Explain why *value* was rejected."""

    def __call__(self, value: Any) -> TypeGuard[T]: return self.test(value)

    def __or__(self, other: Validator) -> Validator:
        from .combinators import union
        return union(self, other)

    def __and__(self, other: Validator) -> Validator:
        from .combinators import intersection
        return intersection(self, other)


@dataclass(frozen=True, slots=True)
class Predicate(Validator[T]):
    """Validator built from a plain test function and message function."""
    test_fn: Callable[[Any], bool] = field(repr=False)
    failure_fn: Callable[[Any], str] = field(repr=False)

    def test(self, value: Any) -> TypeGuard[T]:
        return bool(self.test_fn(value))

    def describe_failure(self, value: Any) -> str:
        return self.failure_fn(value)


def create_validator(
    test: Callable[[Any], bool],
    describe_failure: Callable[[Any], str],
) -> Validator[Any]:
    """Create a validator from a predicate and a failure-message generator.

    The arguments are not checked; a test function that raises will raise
    from the validator too.

    Usage:
        even = create_validator(
            lambda v: isinstance(v, int) and v % 2 == 0,
            lambda v: f"Expected even number, got {v}",
        )
    """
    return Predicate(test, describe_failure)
