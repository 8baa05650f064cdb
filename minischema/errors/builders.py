"""Validation Error Builders

Ergonomic constructor for typed validation errors, wrapped in Err.
"""
from .types import AppError, ErrorCode, ErrorContext, Err


def validation_error(message: str, *, origin: str = "", **metadata) -> Err[AppError]:
    """Create validation error. Metadata entries that are ``None`` are dropped."""
    return Err(AppError(
        code=ErrorCode.E2000_VALIDATION_GENERIC,
        message=message,
        context=ErrorContext(origin=origin),
        metadata={k: v for k, v in metadata.items() if v is not None},
    ))
