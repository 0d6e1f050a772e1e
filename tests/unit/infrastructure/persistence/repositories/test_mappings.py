"""Tests for the grading period and calendar storage mappings."""

from datetime import date, datetime, timezone
from types import SimpleNamespace
from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from src.domain.errors import InvalidFilterFieldException
from src.domain.models.enums import Status
from src.domain.models.resources import Calendar, GradingPeriod
from src.infrastructure.persistence.models.scheduling import Calendar as OrmCalendar
from src.infrastructure.persistence.models.scheduling import GradingPeriod as OrmGradingPeriod
from src.infrastructure.persistence.parameters import QueryParameterManager
from src.infrastructure.persistence.repositories.calendars import (
    CALENDAR_MAPPING,
    SqlCalendarRepository,
)
from src.infrastructure.persistence.repositories.grading_periods import GRADING_PERIOD_MAPPING

T = datetime(2025, 5, 29, 7, 53, 44, tzinfo=timezone.utc)


# --- grading periods ---

def test_grading_period_to_domain_converts_status():
    row = SimpleNamespace(
        id=uuid4(),
        status="INACTIVE",
        createdate=T,
        lastmodifieddate=T,
        deletedate=None,
        grading_period_descriptor_id=3,
        grading_period_name="Fall",
        period_sequence=1,
        school_id=255901,
        school_year=2025,
        begin_date=date(2024, 8, 1),
        end_date=date(2024, 12, 20),
        total_instructional_days=80,
    )
    record = GRADING_PERIOD_MAPPING.to_domain(row)

    assert isinstance(record, GradingPeriod)
    assert record.status is Status.INACTIVE
    assert record.id == row.id
    assert record.end_date == date(2024, 12, 20)


def test_grading_period_to_row_builds_orm_instance():
    entity = GradingPeriod(
        createdate=T,
        lastmodifieddate=T,
        grading_period_descriptor_id=3,
        grading_period_name="Fall",
        period_sequence=1,
        school_id=255901,
        school_year=2025,
        begin_date=date(2024, 8, 1),
        end_date=date(2024, 12, 20),
        total_instructional_days=80,
    )
    row = GRADING_PERIOD_MAPPING.to_row(entity)

    assert isinstance(row, OrmGradingPeriod)
    assert row.id == entity.id
    assert row.status == "ACTIVE"
    assert row.lastmodifieddate == T
    assert row.total_instructional_days == 80


def test_grading_period_natural_key_order():
    assert GRADING_PERIOD_MAPPING.natural_key == (
        "grading_period_descriptor_id",
        "period_sequence",
        "school_id",
        "school_year",
    )


def test_grading_period_name_is_not_filterable():
    assert "grading_period_name" not in GRADING_PERIOD_MAPPING.filterable
    assert "status" in GRADING_PERIOD_MAPPING.filterable


def test_grading_period_qualified_column():
    assert GRADING_PERIOD_MAPPING.qualified_column("period_sequence") == (
        "gradingperiod.periodsequence"
    )


# --- calendars ---

def test_calendar_round_trip_through_row():
    entity = Calendar(
        createdate=T,
        lastmodifieddate=T,
        calendar_code="2025-HS",
        school_id=255901,
        school_year=2025,
        calendar_type_descriptor_id=7,
    )
    row = CALENDAR_MAPPING.to_row(entity)
    assert isinstance(row, OrmCalendar)
    assert CALENDAR_MAPPING.to_domain(row) == entity


def test_calendar_table_name():
    assert CALENDAR_MAPPING.table_name == "calendar"


def test_calendar_natural_key_order():
    assert CALENDAR_MAPPING.natural_key == ("calendar_code", "school_id", "school_year")


def test_calendar_predicate_uses_mapped_columns():
    repo = SqlCalendarRepository(AsyncMock())
    predicate = repo.build_predicate(
        {"calendar_type_descriptor_id": 7, "calendar_code": "2025-HS"}, QueryParameterManager()
    )
    assert predicate == "calendar.calendartypedescriptorid = :p1 AND calendar.calendarcode = :p2"


def test_calendar_rejects_grading_period_filter():
    repo = SqlCalendarRepository(AsyncMock())
    with pytest.raises(InvalidFilterFieldException):
        repo.build_predicate({"period_sequence": 1}, QueryParameterManager())
