"""minischema: runtime structural validation.

    import minischema as ms

    point = ms.object_({"x": ms.number, "y": ms.number})
    ms.parse_unknown(point, {"x": 1, "y": 2})
"""
__version__ = "0.1.0"

from minischema.validation import *  # noqa: E402,F401,F403
from minischema.validation import __all__ as _validation_all  # noqa: E402
from minischema.errors import AppError, Err, ErrorCode, Ok, Result  # noqa: E402
from minischema.logging import configure_logging, get_logger  # noqa: E402

__all__ = [
    *_validation_all,
    "AppError",
    "Err",
    "ErrorCode",
    "Ok",
    "Result",
    "configure_logging",
    "get_logger",
    "__version__",
]
