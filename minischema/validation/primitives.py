"""Primitive validators: exact kind checks with no coercion."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TypeGuard

from .base import Symbol, Validator, kind_of


@dataclass(frozen=True, slots=True)
class KindValidator(Validator[Any]):
    """Accept values whose kind is exactly ``kind``."""
    kind: str

    def test(self, value: Any) -> TypeGuard[Any]:
        return kind_of(value) == self.kind

    def describe_failure(self, value: Any) -> str:
        return f"Expected {self.kind}, got {kind_of(value)}"


@dataclass(frozen=True, slots=True)
class BigIntValidator(Validator[int]):
    """Accept arbitrary-precision integers (``int``, never ``bool``)."""

    def test(self, value: Any) -> TypeGuard[int]:
        return isinstance(value, int) and not isinstance(value, bool)

    def describe_failure(self, value: Any) -> str:
        return f"Expected bigint, got {kind_of(value)}"


string: Validator[str] = KindValidator("string")
number: Validator[int | float] = KindValidator("number")
boolean: Validator[bool] = KindValidator("boolean")
symbol: Validator[Symbol] = KindValidator("symbol")
bigint: Validator[int] = BigIntValidator()
