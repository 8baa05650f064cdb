"""Tests for the example person/member schemas."""

from __future__ import annotations

import pytest

from minischema.validation import ValidationError, parse_unknown
from minischema.validation.examples import member, member_role, person


def _person(**overrides):
    value = {"name": "Al", "age": 30, "sex": "man", "city": "Kraków"}
    value.update(overrides)
    return value


def test_person_accepts_complete_record():
    assert person(_person()) is True
    assert person(_person(age=None, city=None)) is True


@pytest.mark.parametrize(
    "overrides",
    [
        {"name": ""},
        {"name": "x" * 33},
        {"age": -1},
        {"sex": "other"},
        {"city": "Paris"},
    ],
)
def test_person_rejects_invalid_fields(overrides):
    assert person(_person(**overrides)) is False


def test_city_with_comma_is_a_single_option():
    assert person(_person(city="Kuala, Lumpur")) is True
    assert person(_person(city="Kuala")) is False


def test_member_requires_person_and_membership_fields():
    assert member(_person(id="u-1", role="admin")) is True
    assert member(_person(id="u-1", role="owner")) is False
    assert member(_person(name="", id="u-1", role="user")) is False


def test_member_role_values():
    assert [member_role(r) for r in ("admin", "moderator", "user", "guest")] == [True, True, True, False]


def test_parse_unknown_member_raises_for_null():
    with pytest.raises(ValidationError, match="^Expected intersection of"):
        parse_unknown(member, None)
