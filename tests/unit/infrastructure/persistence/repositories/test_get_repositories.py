"""Tests for the get_repositories() DI factory."""

from unittest.mock import AsyncMock

from src.infrastructure.persistence.repositories import (
    CALENDAR_MAPPING,
    GRADING_PERIOD_MAPPING,
    Repositories,
    SqlCalendarRepository,
    SqlGradingPeriodRepository,
    SqlReferenceRepository,
    get_repositories,
)


def _repos():
    return get_repositories(AsyncMock())


def test_get_repositories_returns_repositories_instance():
    assert isinstance(_repos(), Repositories)


def test_repositories_grading_periods_is_correct_type():
    assert isinstance(_repos().grading_periods, SqlGradingPeriodRepository)


def test_repositories_calendars_is_correct_type():
    assert isinstance(_repos().calendars, SqlCalendarRepository)


def test_repositories_reference_is_correct_type():
    assert isinstance(_repos().reference, SqlReferenceRepository)


def test_resource_repositories_carry_their_mapping():
    repos = _repos()
    assert repos.grading_periods.mapping is GRADING_PERIOD_MAPPING
    assert repos.calendars.mapping is CALENDAR_MAPPING


def test_repositories_dataclass_has_three_fields():
    assert len(Repositories.__dataclass_fields__) == 3
