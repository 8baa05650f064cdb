"""Compositional Validation

Validators are immutable (test, describe_failure) pairs. Primitives check a
value's kind exactly; combinators build object shapes, arrays, unions,
intersections and bounds from them. Evaluation is a fresh depth-first walk on
every call with no caching.

Usage:
    from minischema.validation import (
        object_, string, number, nullable, min_, range_length, parse,
    )

    person = object_({
        "name": range_length(string, 1, 32),
        "age": nullable(min_(number, 0)),
    })

    person({"name": "Al", "age": None})     # True
    parse(person, {"name": "", "age": 5})   # raises ValidationError
"""

from .base import (
    UNDEFINED,
    Symbol,
    Validator,
    Predicate,
    create_validator,
    kind_of,
    strict_equals,
    display,
)

from .primitives import (
    string,
    number,
    boolean,
    symbol,
    bigint,
)

from .combinators import (
    nullable,
    undefinable,
    literal,
    one_of,
    one_of_type,
    object_,
    array,
    union,
    intersection,
)

from .refinements import (
    min_,
    max_,
    range_,
    length,
    min_length,
    max_length,
    range_length,
)

from .errors import ValidationError
from .parse import parse, parse_unknown, try_parse
from .boundaries import BoundaryValidator, validates

__all__ = [
    # Core
    "UNDEFINED",
    "Symbol",
    "Validator",
    "Predicate",
    "create_validator",
    "kind_of",
    "strict_equals",
    "display",
    # Primitives
    "string",
    "number",
    "boolean",
    "symbol",
    "bigint",
    # Combinators
    "nullable",
    "undefinable",
    "literal",
    "one_of",
    "one_of_type",
    "object_",
    "array",
    "union",
    "intersection",
    # Refinements
    "min_",
    "max_",
    "range_",
    "length",
    "min_length",
    "max_length",
    "range_length",
    # Parsing
    "ValidationError",
    "parse",
    "parse_unknown",
    "try_parse",
    "BoundaryValidator",
    "validates",
]
