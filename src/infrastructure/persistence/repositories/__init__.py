"""Concrete SQLAlchemy repository implementations.

Exports the SqlRepository classes and the get_repositories() factory function
for wiring at the application boundary (the unit of work).
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.repositories.unit_of_work import Repositories

from .base import ResourceMapping, SqlResourceRepository
from .calendars import CALENDAR_MAPPING, SqlCalendarRepository
from .grading_periods import GRADING_PERIOD_MAPPING, SqlGradingPeriodRepository
from .reference import SqlReferenceRepository


def get_repositories(session: AsyncSession) -> Repositories:
    """Construct all repositories bound to the given session.

        async with AsyncSessionLocal() as session:
            repos = get_repositories(session)
            period = await repos.grading_periods.get_by_id(period_id)
    """
    return Repositories(
        grading_periods=SqlGradingPeriodRepository(session),
        calendars=SqlCalendarRepository(session),
        reference=SqlReferenceRepository(session),
    )


__all__ = [
    "ResourceMapping",
    "SqlResourceRepository",
    "SqlGradingPeriodRepository",
    "SqlCalendarRepository",
    "SqlReferenceRepository",
    "GRADING_PERIOD_MAPPING",
    "CALENDAR_MAPPING",
    "Repositories",
    "get_repositories",
]
