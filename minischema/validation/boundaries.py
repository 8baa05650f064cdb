"""Validation at System Boundaries

Parse-don't-validate at the points where external data enters the program:
request payloads, configuration files, responses from other services. A
boundary is a named, stateless wrapper around a validator that returns a
Result and records rejections as structured log events.
"""
from __future__ import annotations

from functools import wraps
from typing import Any, Callable, Generic, TypeVar

from minischema.config import get_settings
from minischema.errors import AppError, Ok, Result, validation_error
from minischema.logging import validation_logger
from .base import Validator
from .errors import ValidationError

T = TypeVar("T")


class BoundaryValidator(Generic[T]):
    """Stateless boundary validator for a specific validator.

    Usage:
        person_boundary = BoundaryValidator(person, "person")
        result = person_boundary.parse(request_data)
    """

    __slots__ = ("validator", "name", "origin")

    def __init__(self, validator: Validator[T], name: str, origin: str = "ingress"):
        self.validator, self.name, self.origin = validator, name, origin

    def parse(self, value: Any) -> Result[T, AppError]:
        """Accept *value* as-is or return an Err describing the rejection."""
        if self.validator.test(value):
            return Ok(value)
        message = self.validator.describe_failure(value)
        if get_settings().LOG_REJECTIONS:
            validation_logger().info("validation.rejected", boundary=self.name, origin=self.origin, reason=message)
        return validation_error(message, origin=self.origin, boundary=self.name)

    def parse_or_raise(self, value: Any) -> T:
        """Raise ValidationError instead of returning Err."""
        result = self.parse(value)
        if result.is_err():
            raise ValidationError(result.unwrap_err().message)
        return result.unwrap()


def validates(validator: Validator, *, name: str | None = None, origin: str = "call") -> Callable:
    """Decorator validating a function's first positional argument.

    Usage:
        @validates(person)
        def register(p):
            ...

        register({"name": ""})  # raises ValidationError
    """
    def decorator(func: Callable) -> Callable:
        boundary = BoundaryValidator(validator, name or func.__qualname__, origin)

        @wraps(func)
        def wrapper(value, *args, **kwargs):
            return func(boundary.parse_or_raise(value), *args, **kwargs)

        return wrapper
    return decorator
