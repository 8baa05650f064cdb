"""Example Schemas

Shows primitives, optionality, value sets, refinements and intersections
working together.

    from minischema.validation.examples import member

    if member(payload):
        payload["name"]  # known to be a 1-32 character string
"""
from __future__ import annotations

from .combinators import intersection, literal, nullable, object_, one_of, union
from .primitives import number, string
from .refinements import min_, range_length

CITIES = (
    "Kraków",
    "Oaxaca",
    "Moscow",
    "Kabul",
    "Baghdad",
    "Kuala, Lumpur",
    "Jeddah",
    "Riyadh",
    "Mogadishu",
    "Dubai",
    "Abu Dhabi",
    "Sanaa",
    "Ibadan",
    "Taizz",
    "Tehran",
)

person = object_({
    "name": range_length(string, 1, 32),
    "age": nullable(min_(number, 0)),
    "sex": union(literal("man"), literal("woman")),
    # one_of is shorthand for a union of literals
    "city": nullable(one_of(*CITIES)),
})

member_role = one_of("admin", "moderator", "user")

member = intersection(person, object_({
    "id": string,
    "role": member_role,
}))
