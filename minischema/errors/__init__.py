"""Result-Based Error Handling

Key components:
- Result[T, E]: container for success/failure
- AppError: base error type with context
- ErrorCode: error code taxonomy
- validation_error: builder used by validation boundaries

Usage:
    from minischema.errors import Ok, Err, Result, AppError

    match boundary.parse(payload):
        case Ok(person):
            print(person["name"])
        case Err(error):
            log.error(error.message, code=error.code.name)
"""
from .types import (
    Result,
    Ok,
    Err,
    AppError,
    ErrorCode,
    ErrorContext,
)

from .builders import validation_error

__all__ = [
    "Result",
    "Ok",
    "Err",
    "AppError",
    "ErrorCode",
    "ErrorContext",
    "validation_error",
]
