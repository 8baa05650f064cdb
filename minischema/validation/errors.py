"""Validation Error

A single message-carrying failure. The message is the rejecting validator's
``describe_failure`` output; there are no per-field details.
"""
from __future__ import annotations

from dataclasses import dataclass

from minischema.errors import AppError, ErrorCode, ErrorContext


@dataclass
class ValidationError(Exception):
    """Raised by ``parse`` when a value is rejected."""
    message: str

    def __post_init__(self):
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message

    def to_app_error(self, origin: str = "") -> AppError:
        """Convert to AppError for the Result-based error handling."""
        return AppError(code=ErrorCode.E2000_VALIDATION_GENERIC, message=self.message,
            context=ErrorContext(origin=origin), cause=self)
