"""SQLAlchemy implementation of ReferenceRepository."""

from __future__ import annotations

from collections.abc import Iterable

from sqlalchemy import exists, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.models.enums import DescriptorKind
from src.domain.models.resources import Descriptor as DomainDescriptor
from src.domain.repositories.reference import ReferenceRepository
from src.infrastructure.persistence.models.reference import (
    CalendarTypeDescriptor,
    Descriptor,
    GradingPeriodDescriptor,
    School,
    SchoolYearType,
)

# Subtype table and its id column per descriptor kind.
_DESCRIPTOR_TABLES = {
    DescriptorKind.GRADING_PERIOD: GradingPeriodDescriptor.grading_period_descriptor_id,
    DescriptorKind.CALENDAR_TYPE: CalendarTypeDescriptor.calendar_type_descriptor_id,
}


class SqlReferenceRepository(ReferenceRepository):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    @staticmethod
    def _to_domain(row: Descriptor) -> DomainDescriptor:
        return DomainDescriptor(
            descriptor_id=row.descriptor_id,
            namespace=row.namespace,
            code_value=row.code_value,
            short_description=row.short_description,
        )

    async def _exists(self, column, value) -> bool:
        result = await self._session.execute(select(exists().where(column == value)))
        return bool(result.scalar())

    async def school_exists(self, school_id: int) -> bool:
        return await self._exists(School.school_id, school_id)

    async def school_year_exists(self, school_year: int) -> bool:
        return await self._exists(SchoolYearType.school_year, school_year)

    async def descriptor_exists(self, kind: DescriptorKind, descriptor_id: int) -> bool:
        return await self._exists(_DESCRIPTOR_TABLES[kind], descriptor_id)

    async def get_descriptors(self, descriptor_ids: Iterable[int]) -> dict[int, DomainDescriptor]:
        ids = sorted(set(descriptor_ids))
        if not ids:
            return {}
        stmt = select(Descriptor).where(Descriptor.descriptor_id.in_(ids))
        result = await self._session.execute(stmt)
        return {row.descriptor_id: self._to_domain(row) for row in result.scalars()}
