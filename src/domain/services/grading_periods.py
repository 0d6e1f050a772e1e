"""Grading period service.

Create checks run in a fixed order inside one transaction:

    1. request structure (validate_create_grading_period)
    2. client-supplied id not taken
    3. natural key not taken (If-None-Match aware)
    4. descriptor, school and school year exist
    5. end date strictly after begin date
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime, timezone
from typing import Any
from uuid import uuid4

from src.domain.errors import BadRequest
from src.domain.models.enums import DescriptorKind, ResourceType
from src.domain.models.query import ResourceResult
from src.domain.models.requests import CreateGradingPeriodRequest
from src.domain.models.resources import GradingPeriod
from src.domain.repositories.base import ResourceRepository
from src.domain.repositories.unit_of_work import Repositories
from src.domain.services.validation import (
    parse_descriptor_id,
    require_date_order,
    validate_create_grading_period,
)

from .resources import ResourceService

GRADING_PERIOD_DESCRIPTOR_URI = "uri://ed-fi.org/GradingPeriodDescriptor"


class GradingPeriodService(ResourceService[GradingPeriod]):
    resource_type = ResourceType.GRADING_PERIODS
    label = "Grading period"

    def repository(self, repos: Repositories) -> ResourceRepository[GradingPeriod]:
        return repos.grading_periods

    async def to_payloads(
        self, records: Sequence[GradingPeriod], repos: Repositories
    ) -> list[dict[str, Any]]:
        return [self.to_payload(record) for record in records]

    def to_payload(self, record: GradingPeriod) -> dict[str, Any]:
        return {
            "id": str(record.id),
            "gradingPeriodDescriptor": (
                f"{GRADING_PERIOD_DESCRIPTOR_URI}#{record.grading_period_descriptor_id}"
            ),
            "gradingPeriodName": record.grading_period_name,
            "schoolReference": {
                "schoolId": record.school_id,
                "link": self.reference_link("School", f"schools/{record.school_id}"),
            },
            "schoolYearTypeReference": {
                "schoolYear": record.school_year,
                "link": self.reference_link("SchoolYearType", f"schoolYearTypes/{record.school_year}"),
            },
            "periodSequence": record.period_sequence,
            "beginDate": record.begin_date.isoformat(),
            "endDate": record.end_date.isoformat(),
            "totalInstructionalDays": record.total_instructional_days,
            **self.version_fields(record),
        }

    async def create(
        self,
        request: CreateGradingPeriodRequest,
        if_none_match: str | None = None,
    ) -> ResourceResult:
        self.raise_if_invalid(validate_create_grading_period(request))
        descriptor_id = parse_descriptor_id(request.grading_period_descriptor)
        school_id = request.school_reference.school_id
        school_year = request.school_year_type_reference.school_year

        async with self._uow.transaction() as repos:
            repository = repos.grading_periods
            resource_id = await self.ensure_id_available(repository, request.id)
            await self.ensure_key_available(
                repository,
                (descriptor_id, request.period_sequence, school_id, school_year),
                if_none_match,
            )

            reference = repos.reference
            if not await reference.descriptor_exists(DescriptorKind.GRADING_PERIOD, descriptor_id):
                raise BadRequest(
                    f"Invalid grading period descriptor: {request.grading_period_descriptor}"
                )
            if not await reference.school_exists(school_id):
                raise BadRequest(f"Invalid school reference: {school_id}")
            if not await reference.school_year_exists(school_year):
                raise BadRequest(f"Invalid school year reference: {school_year}")

            self.raise_if_invalid(require_date_order(request.begin_date, request.end_date))

            now = datetime.now(timezone.utc)
            entity = GradingPeriod(
                id=resource_id or uuid4(),
                createdate=now,
                lastmodifieddate=now,
                grading_period_descriptor_id=descriptor_id,
                grading_period_name=request.grading_period_name.strip(),
                period_sequence=request.period_sequence,
                school_id=school_id,
                school_year=school_year,
                begin_date=request.begin_date,
                end_date=request.end_date,
                total_instructional_days=request.total_instructional_days,
            )
            created = await repository.create(entity)

        return self.created(self.to_payload(created))
