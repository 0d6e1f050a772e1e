"""Tests for src/infrastructure/persistence/parameters.py."""

from datetime import date, datetime, timedelta, timezone
from uuid import UUID

import pytest

from src.domain.errors import ParameterNotFound
from src.infrastructure.persistence.parameters import QueryParameterManager


# --- add_parameter / get_placeholder ---

def test_placeholders_are_one_indexed_in_first_seen_order():
    params = QueryParameterManager()
    params.add_parameters(["a", "b", "c"])
    assert [params.get_placeholder(v) for v in ("a", "b", "c")] == [1, 2, 3]


def test_repeated_value_is_a_no_op():
    params = QueryParameterManager()
    params.add_parameter("ACTIVE")
    params.add_parameter("ACTIVE")
    assert params.get_parameters() == ["ACTIVE"]
    assert params.get_placeholder("ACTIVE") == 1


def test_string_and_number_with_same_text_share_a_placeholder():
    params = QueryParameterManager()
    params.add_parameters([42, "42"])
    assert len(params) == 1


def test_equal_datetimes_in_different_zones_share_a_placeholder():
    utc = datetime(2025, 5, 29, 7, 0, tzinfo=timezone.utc)
    plus_two = datetime(2025, 5, 29, 9, 0, tzinfo=timezone(timedelta(hours=2)))
    params = QueryParameterManager()
    params.add_parameters([utc, plus_two])
    assert params.get_parameters() == [utc]
    assert params.get_placeholder(plus_two) == 1


def test_dicts_compare_structurally():
    params = QueryParameterManager()
    params.add_parameter({"b": 2, "a": 1})
    params.add_parameter({"a": 1, "b": 2})
    assert len(params) == 1


def test_lists_compare_structurally():
    params = QueryParameterManager()
    params.add_parameters([[1, 2], [1, 2], [2, 1]])
    assert len(params) == 2


def test_dates_and_uuids_are_accepted():
    value = UUID("12345678-1234-5678-1234-567812345678")
    params = QueryParameterManager()
    params.add_parameters([date(2024, 8, 1), value, str(value)])
    assert params.get_parameters() == [date(2024, 8, 1), value]


def test_parameter_count_equals_distinct_values():
    values = ["x", 1, "x", 2, 1, "y"]
    params = QueryParameterManager()
    params.add_parameters(values)
    assert len(params.get_parameters()) == 4


def test_unknown_value_raises_parameter_not_found():
    params = QueryParameterManager()
    params.add_parameter("a")
    with pytest.raises(ParameterNotFound):
        params.get_placeholder("b")


def test_parameter_not_found_is_lookup_error():
    with pytest.raises(LookupError):
        QueryParameterManager().get_placeholder("missing")


# --- get_parameters / bind_parameters / placeholder ---

def test_get_parameters_returns_a_copy():
    params = QueryParameterManager()
    params.add_parameter("a")
    params.get_parameters().append("b")
    assert params.get_parameters() == ["a"]


def test_bind_parameters_keys_follow_placeholders():
    params = QueryParameterManager()
    params.add_parameters(["ACTIVE", 255901])
    assert params.bind_parameters() == {"p1": "ACTIVE", "p2": 255901}


def test_placeholder_renders_named_bind():
    params = QueryParameterManager()
    params.add_parameters(["a", "b", "c"])
    assert params.placeholder("c") == ":p3"


def test_new_manager_is_empty():
    assert QueryParameterManager().get_parameters() == []
