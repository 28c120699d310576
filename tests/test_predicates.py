"""Tests for filter compilation."""

from datetime import datetime, timezone
from types import SimpleNamespace
from uuid import uuid4

import pytest

from pagequery.core.errors import InvalidFilterValue
from pagequery.query import (
    Contains,
    Equals,
    OneOf,
    QueryDefinition,
    Range,
    SoftDelete,
    build_predicate,
)

DEFINITION = QueryDefinition(
    name="articles",
    filters=(
        Equals("author"),
        Equals("pinned", value_type=bool),
        Range("depth", "min_depth_level", "max_depth_level", value_type=int),
        Range("created_at", "created_at_from", "created_at_to", value_type=datetime),
        Range("price", "min_price", "max_price", value_type=float),
        Contains("search", fields=("title", "body")),
        OneOf("status", frozenset({"open", "closed"})),
        SoftDelete(),
    ),
)


def record(**overrides):
    base = {
        "id": uuid4(),
        "author": "ada",
        "pinned": False,
        "depth": 1,
        "created_at": datetime(2024, 3, 1, 12, 0),
        "price": 10.0,
        "title": "Ranking Replies",
        "body": "nothing to see",
        "status": "open",
        "deleted_at": None,
    }
    base.update(overrides)
    return base


def test_empty_request_matches_everything_live():
    predicate = build_predicate(DEFINITION, {})

    assert predicate(record())
    assert predicate({"id": 1})


def test_equality():
    predicate = build_predicate(DEFINITION, {"author": "ada", "pinned": False})

    assert predicate(record())
    assert not predicate(record(author="grace"))
    assert not predicate(record(pinned=True))


def test_range_bounds_are_inclusive_and_independent():
    both = build_predicate(DEFINITION, {"min_depth_level": 1, "max_depth_level": 2})
    lower_only = build_predicate(DEFINITION, {"min_depth_level": 2})

    assert [both(record(depth=d)) for d in range(4)] == [False, True, True, False]
    assert [lower_only(record(depth=d)) for d in (1, 2, 50)] == [False, True, True]


def test_datetime_range_accepts_iso_strings_and_mixed_timezones():
    predicate = build_predicate(
        DEFINITION,
        {"created_at_from": "2024-03-01T00:00:00Z", "created_at_to": datetime(2024, 3, 1, 12, 0)},
    )

    assert predicate(record(created_at=datetime(2024, 3, 1, 12, 0)))
    assert predicate(record(created_at=datetime(2024, 3, 1, 0, 0, tzinfo=timezone.utc)))
    assert not predicate(record(created_at=datetime(2024, 3, 1, 12, 1)))
    assert not predicate(record(created_at=None))


def test_float_range_accepts_integers():
    predicate = build_predicate(DEFINITION, {"min_price": 5, "max_price": 10})

    assert predicate(record(price=10.0))
    assert not predicate(record(price=10.5))


def test_contains_is_case_insensitive_across_fields():
    predicate = build_predicate(DEFINITION, {"search": "REPLIES"})

    assert predicate(record())
    assert predicate(record(title="other", body="about replies"))
    assert not predicate(record(title="other", body=None))


def test_one_of_accepts_single_value_or_list():
    single = build_predicate(DEFINITION, {"status": "closed"})
    several = build_predicate(DEFINITION, {"status": ["closed", "open"]})

    assert not single(record())
    assert single(record(status="closed"))
    assert several(record()) and several(record(status="closed"))


@pytest.mark.parametrize("value", ["archived", ["open", "pending"], []])
def test_one_of_rejects_values_outside_the_set(value):
    with pytest.raises(InvalidFilterValue) as excinfo:
        build_predicate(DEFINITION, {"status": value})

    assert excinfo.value.field == "status"


def test_soft_deleted_records_hidden_unless_requested():
    deleted = record(deleted_at=datetime(2024, 4, 1))

    assert not build_predicate(DEFINITION, {})(deleted)
    assert not build_predicate(DEFINITION, {"include_deleted": False})(deleted)
    assert build_predicate(DEFINITION, {"include_deleted": True})(deleted)


@pytest.mark.parametrize(
    "filters",
    [
        {"author": 7},
        {"pinned": "yes"},
        {"min_depth_level": "2"},
        {"min_depth_level": True},
        {"created_at_to": "last tuesday"},
        {"search": ["a", "b"]},
        {"include_deleted": "true"},
    ],
)
def test_wrong_value_types_are_rejected(filters):
    with pytest.raises(InvalidFilterValue) as excinfo:
        build_predicate(DEFINITION, filters)

    assert excinfo.value.field == next(iter(filters))


def test_unknown_filter_keys_are_rejected():
    with pytest.raises(InvalidFilterValue, match="colour"):
        build_predicate(DEFINITION, {"colour": "red"})


def test_attribute_records_are_supported():
    predicate = build_predicate(DEFINITION, {"author": "ada", "min_depth_level": 1})

    assert predicate(SimpleNamespace(**record()))
    assert not predicate(SimpleNamespace(author="ada"))


def test_definition_rejects_duplicate_request_keys():
    with pytest.raises(ValueError):
        QueryDefinition(name="broken", filters=(Equals("page"),))


@pytest.mark.parametrize("bound", [float("nan"), float("inf"), float("-inf")])
def test_non_finite_float_bounds_are_rejected(bound):
    with pytest.raises(InvalidFilterValue) as excinfo:
        build_predicate(DEFINITION, {"min_price": bound})

    assert excinfo.value.field == "min_price"


def test_nan_record_values_never_fall_inside_a_range():
    predicate = build_predicate(DEFINITION, {"max_price": 100})

    assert not predicate(record(price=float("nan")))
    assert predicate(record(price=99.5))
