"""Parse entry points.

``parse`` and ``parse_unknown`` raise on rejection; ``try_parse`` returns a
Result so the accepted value's type travels in the return type instead.
None of them log, retry or recover.
"""
from __future__ import annotations

from typing import Any, TypeVar

from minischema.errors import AppError, Err, Ok, Result
from .base import Validator
from .errors import ValidationError

T = TypeVar("T")


def parse(validator: Validator[T], value: T) -> T:
    """Return *value* unchanged if *validator* accepts it.

    Raises:
        ValidationError: with ``validator.describe_failure(value)`` as message
    """
    if validator.test(value):
        return value
    raise ValidationError(validator.describe_failure(value))


def parse_unknown(validator: Validator[T], value: Any) -> T:
    """``parse`` for values of indeterminate static type."""
    return parse(validator, value)


def try_parse(validator: Validator[T], value: Any) -> Result[T, AppError]:
    """Parse without raising.

    Usage:
        match try_parse(person, payload):
            case Ok(p):
                greet(p["name"])
            case Err(error):
                reject(error.message)
    """
    try:
        return Ok(parse_unknown(validator, value))
    except ValidationError as e:
        return Err(e.to_app_error())
