"""Tests for src/domain/services/validation.py."""

from datetime import date

import pytest

from src.domain.models.requests import CreateCalendarRequest, CreateGradingPeriodRequest
from src.domain.services.validation import (
    OK,
    ValidationResult,
    parse_descriptor_id,
    require_date_order,
    require_descriptor,
    require_max_length,
    require_minimum,
    require_non_empty,
    require_positive,
    validate_create_calendar,
    validate_create_grading_period,
)


def _grading_period_request(**overrides):
    fields = {
        "grading_period_descriptor": "uri://ed-fi.org/GradingPeriodDescriptor#3",
        "grading_period_name": "First Six Weeks",
        "school_reference": {"school_id": 255901},
        "school_year_type_reference": {"school_year": 2025},
        "period_sequence": 1,
        "begin_date": date(2024, 8, 1),
        "end_date": date(2024, 9, 13),
        "total_instructional_days": 30,
    }
    fields.update(overrides)
    return CreateGradingPeriodRequest(**fields)


def _calendar_request(**overrides):
    fields = {
        "calendar_code": "2025-HS",
        "school_reference": {"school_id": 255901},
        "school_year_type_reference": {"school_year": 2025},
        "calendar_type_descriptor": "7",
    }
    fields.update(overrides)
    return CreateCalendarRequest(**fields)


# --- ValidationResult ---

def test_empty_result_is_ok():
    assert OK.ok is True


def test_result_with_violation_is_not_ok():
    assert ValidationResult(("bad",)).ok is False


def test_combine_keeps_violation_order():
    combined = ValidationResult.combine(
        ValidationResult(("a",)), OK, ValidationResult(("b", "c"))
    )
    assert combined.violations == ("a", "b", "c")


def test_message_joins_violations():
    assert ValidationResult(("a", "b")).message() == "a; b"


# --- primitive checks ---

@pytest.mark.parametrize("value", [None, "", "   "])
def test_require_non_empty_rejects_blank(value):
    assert require_non_empty(value, "Name").violations == ("Name is required",)


def test_require_non_empty_accepts_text():
    assert require_non_empty("x", "Name").ok


def test_require_max_length_boundary():
    assert require_max_length("x" * 60, 60, "Name").ok
    assert not require_max_length("x" * 61, 60, "Name").ok


def test_require_positive_rejects_zero():
    assert require_positive(0, "Sequence").violations == ("Sequence must be positive",)


def test_require_minimum():
    assert not require_minimum(1899, 1900, "School year").ok
    assert require_minimum(1900, 1900, "School year").ok


def test_require_date_order_equal_dates_rejected():
    day = date(2024, 8, 1)
    assert require_date_order(day, day).violations == ("End date must be after begin date",)


def test_require_date_order_accepts_later_end():
    assert require_date_order(date(2024, 8, 1), date(2024, 8, 2)).ok


# --- descriptors ---

@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("3", 3),
        (" 12 ", 12),
        ("uri://ed-fi.org/GradingPeriodDescriptor#3", 3),
        ("uri://ed-fi.org/GradingPeriodDescriptor#First", None),
        ("0", None),
        ("-4", None),
        ("", None),
        (None, None),
        ("٣", None),
    ],
)
def test_parse_descriptor_id(value, expected):
    assert parse_descriptor_id(value) == expected


def test_require_descriptor_reports_missing_once():
    result = require_descriptor("", "calendar type descriptor")
    assert result.violations == ("Calendar type descriptor is required",)


def test_require_descriptor_reports_unparseable_value():
    result = require_descriptor("abc", "calendar type descriptor")
    assert result.violations == ("Invalid calendar type descriptor: abc",)


# --- composed validators ---

def test_valid_grading_period_request_passes():
    assert validate_create_grading_period(_grading_period_request()).ok


def test_grading_period_request_collects_every_violation():
    result = validate_create_grading_period(
        _grading_period_request(
            grading_period_name="", period_sequence=0, total_instructional_days=-1
        )
    )
    assert len(result.violations) == 3


def test_grading_period_name_too_long_rejected():
    result = validate_create_grading_period(_grading_period_request(grading_period_name="x" * 61))
    assert "at most 60" in result.message()


def test_grading_period_structure_ignores_date_order():
    day = date(2024, 8, 1)
    assert validate_create_grading_period(_grading_period_request(begin_date=day, end_date=day)).ok


def test_valid_calendar_request_passes():
    assert validate_create_calendar(_calendar_request()).ok


def test_calendar_request_rejects_old_school_year():
    result = validate_create_calendar(
        _calendar_request(school_year_type_reference={"school_year": 1850})
    )
    assert result.violations == ("School year must be at least 1900",)
