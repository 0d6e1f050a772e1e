"""Storage mapping for calendars."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.models.enums import Status
from src.domain.models.resources import Calendar as DomainCalendar
from src.infrastructure.persistence.models.scheduling import Calendar as OrmCalendar

from .base import ResourceMapping, SqlResourceRepository


def _to_domain(row: OrmCalendar) -> DomainCalendar:
    return DomainCalendar(
        id=row.id,
        status=Status(row.status),
        createdate=row.createdate,
        lastmodifieddate=row.lastmodifieddate,
        deletedate=row.deletedate,
        calendar_code=row.calendar_code,
        school_id=row.school_id,
        school_year=row.school_year,
        calendar_type_descriptor_id=row.calendar_type_descriptor_id,
    )


def _to_row(entity: DomainCalendar) -> OrmCalendar:
    return OrmCalendar(
        id=entity.id,
        status=entity.status.value,
        createdate=entity.createdate,
        lastmodifieddate=entity.version_timestamp,
        deletedate=entity.deletedate,
        calendar_code=entity.calendar_code,
        school_id=entity.school_id,
        school_year=entity.school_year,
        calendar_type_descriptor_id=entity.calendar_type_descriptor_id,
    )


CALENDAR_MAPPING: ResourceMapping[DomainCalendar] = ResourceMapping(
    orm_model=OrmCalendar,
    natural_key=("calendar_code", "school_id", "school_year"),
    filterable=frozenset(
        {"status", "calendar_code", "school_id", "school_year", "calendar_type_descriptor_id"}
    ),
    to_domain=_to_domain,
    to_row=_to_row,
)


class SqlCalendarRepository(SqlResourceRepository[DomainCalendar]):
    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, CALENDAR_MAPPING)
