"""Unit tests for optionality, value-set, structural and logical combinators."""

from __future__ import annotations

from dataclasses import dataclass

import pytest

from minischema.validation import (
    UNDEFINED,
    array,
    boolean,
    create_validator,
    intersection,
    literal,
    nullable,
    number,
    object_,
    one_of,
    one_of_type,
    string,
    undefinable,
    union,
)


# ------------------------------------------------------------------
# Optionality
# ------------------------------------------------------------------


@pytest.mark.parametrize("value", ["a", 1, True, [], {}, UNDEFINED])
def test_nullable_matches_inner_for_non_null(value):
    assert nullable(string).test(None) is True
    assert nullable(string).test(value) == string.test(value)


def test_undefinable_accepts_sentinel_but_not_none():
    validator = undefinable(number)

    assert validator.test(UNDEFINED) is True
    assert validator.test(3) is True
    assert validator.test(None) is False


def test_optional_failure_messages_embed_inner_message():
    assert nullable(string).describe_failure(5) == "Expected null or Expected string, got number, got number"
    assert undefinable(number).describe_failure("x") == (
        "Expected undefined or Expected number, got string, got string"
    )


# ------------------------------------------------------------------
# Value sets
# ------------------------------------------------------------------


def test_literal_uses_strict_equality():
    assert literal("man").test("man") is True
    assert literal("man").test("woman") is False
    assert literal(1).test(True) is False
    assert literal(1).describe_failure(2) == "Expected 1, got 2"


def test_literal_containers_match_by_identity_only():
    config = {"debug": True}

    assert literal(config).test(config) is True
    assert literal(config).test({"debug": True}) is False


def test_one_of_membership():
    validator = one_of("admin", "moderator", "user")

    assert validator.test("admin") is True
    assert validator.test("root") is False
    assert validator.describe_failure("root") == "Expected one of admin, moderator, user, got root"


def test_one_of_does_not_use_deep_equality():
    shared = [1, 2]
    validator = one_of(shared, 3)

    assert validator.test(shared) is True
    assert validator.test([1, 2]) is False


def test_one_of_type_tests_membership_not_type():
    validator = one_of_type(string, "a", "b")

    assert validator.test("a") is True
    assert validator.test("c") is False
    assert validator.describe_failure("c") == "Expected one of Expected string, got string, Expected string, got string, got c"


# ------------------------------------------------------------------
# Structure
# ------------------------------------------------------------------


def test_object_ignores_extra_keys():
    validator = object_({"name": string})

    assert validator.test({"name": "a", "extra": 1}) is True
    assert validator.test({"name": 1}) is False
    assert validator.test(None) is False


def test_object_missing_key_is_undefined():
    validator = object_({"nickname": undefinable(string)})

    assert validator.test({}) is True
    assert object_({"nickname": string}).test({}) is False


def test_object_reads_attributes_of_plain_objects():
    @dataclass
    class Point:
        x: float
        y: float

    validator = object_({"x": number, "y": number})

    assert validator.test(Point(1, 2)) is True
    assert validator.test(Point(1, "2")) is False


@pytest.mark.parametrize("value", ["abc", 3, True, None, UNDEFINED, len])
def test_object_rejects_non_objects(value):
    assert object_({}).test(value) is False


def test_object_failure_message_is_constant():
    validator = object_({"name": string})

    assert validator.describe_failure({"name": 1}) == "Expected object, got object"
    assert validator.describe_failure("x") == "Expected object, got string"


def test_object_short_circuits_on_first_failing_key():
    seen = []

    def tracking(key, result):
        return create_validator(lambda v: seen.append(key) or result, lambda v: "")

    validator = object_({"a": tracking("a", False), "b": tracking("b", True)})

    assert validator.test({"a": 1, "b": 2}) is False
    assert seen == ["a"]


def test_array_checks_every_element():
    validator = array(number)

    assert validator.test([1, 2.5, 3]) is True
    assert validator.test((1, 2)) is True
    assert validator.test([]) is True
    assert validator.test([1, "2"]) is False
    assert validator.test("12") is False
    assert validator.test({"0": 1}) is False


def test_array_failure_message_is_constant():
    assert array(number).describe_failure([1, "x"]) == "Expected array, got object"
    assert array(number).describe_failure(None) == "Expected array, got null"


# ------------------------------------------------------------------
# Logic
# ------------------------------------------------------------------


@pytest.mark.parametrize("value", ["a", 1, True, None, [], {}])
def test_union_is_logical_or(value):
    assert union(string, number).test(value) == (string.test(value) or number.test(value))


@pytest.mark.parametrize("value", [{"a": "x", "b": 1}, {"a": "x"}, {"b": 1}, None])
def test_intersection_is_logical_and(value):
    a = object_({"a": string})
    b = object_({"b": number})

    assert intersection(a, b).test(value) == (a.test(value) and b.test(value))


def test_logical_failure_messages_join_children():
    assert union(string, boolean).describe_failure(1) == (
        "Expected one of Expected string, got number, Expected boolean, got number, got 1"
    )
    assert intersection(string, number).describe_failure(None) == (
        "Expected intersection of Expected string, got null, Expected number, got null, got null"
    )


def test_operators_build_union_and_intersection():
    assert (string | number).test(1) is True
    assert (string | number).test(None) is False
    assert (object_({"a": string}) & object_({"b": number})).test({"a": "x", "b": 2}) is True


def test_children_are_shared_not_copied():
    inner = object_({"id": string})
    combined = union(inner, number)

    assert combined.validators[0] is inner


def test_object_treats_raising_attribute_as_absent():
    class Lazy:
        @property
        def x(self):
            raise ValueError("not loaded")

    assert object_({"x": number}).test(Lazy()) is False
    assert object_({"x": undefinable(number)}).test(Lazy()) is True
