"""Storage mapping for grading periods."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.models.enums import Status
from src.domain.models.resources import GradingPeriod as DomainGradingPeriod
from src.infrastructure.persistence.models.scheduling import GradingPeriod as OrmGradingPeriod

from .base import ResourceMapping, SqlResourceRepository


def _to_domain(row: OrmGradingPeriod) -> DomainGradingPeriod:
    return DomainGradingPeriod(
        id=row.id,
        status=Status(row.status),
        createdate=row.createdate,
        lastmodifieddate=row.lastmodifieddate,
        deletedate=row.deletedate,
        grading_period_descriptor_id=row.grading_period_descriptor_id,
        grading_period_name=row.grading_period_name,
        period_sequence=row.period_sequence,
        school_id=row.school_id,
        school_year=row.school_year,
        begin_date=row.begin_date,
        end_date=row.end_date,
        total_instructional_days=row.total_instructional_days,
    )


def _to_row(entity: DomainGradingPeriod) -> OrmGradingPeriod:
    return OrmGradingPeriod(
        id=entity.id,
        status=entity.status.value,
        createdate=entity.createdate,
        lastmodifieddate=entity.version_timestamp,
        deletedate=entity.deletedate,
        grading_period_descriptor_id=entity.grading_period_descriptor_id,
        grading_period_name=entity.grading_period_name,
        period_sequence=entity.period_sequence,
        school_id=entity.school_id,
        school_year=entity.school_year,
        begin_date=entity.begin_date,
        end_date=entity.end_date,
        total_instructional_days=entity.total_instructional_days,
    )


GRADING_PERIOD_MAPPING: ResourceMapping[DomainGradingPeriod] = ResourceMapping(
    orm_model=OrmGradingPeriod,
    natural_key=(
        "grading_period_descriptor_id",
        "period_sequence",
        "school_id",
        "school_year",
    ),
    filterable=frozenset(
        {
            "status",
            "grading_period_descriptor_id",
            "period_sequence",
            "school_id",
            "school_year",
        }
    ),
    to_domain=_to_domain,
    to_row=_to_row,
)


class SqlGradingPeriodRepository(SqlResourceRepository[DomainGradingPeriod]):
    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, GRADING_PERIOD_MAPPING)
