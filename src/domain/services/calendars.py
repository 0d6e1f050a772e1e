"""Calendar service.

calendarTypeDescriptor is rendered as "<namespace>#<codeValue>". The
descriptors for a page of calendars are fetched in one batch through the
reference repository rather than per record.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from datetime import datetime, timezone
from typing import Any
from uuid import uuid4

from src.domain.errors import BadRequest
from src.domain.models.enums import DescriptorKind, ResourceType
from src.domain.models.query import ResourceResult
from src.domain.models.requests import CreateCalendarRequest
from src.domain.models.resources import Calendar, Descriptor
from src.domain.repositories.base import ResourceRepository
from src.domain.repositories.unit_of_work import Repositories
from src.domain.services.validation import parse_descriptor_id, validate_create_calendar

from .resources import ResourceService


class CalendarService(ResourceService[Calendar]):
    resource_type = ResourceType.CALENDARS
    label = "Calendar"

    def repository(self, repos: Repositories) -> ResourceRepository[Calendar]:
        return repos.calendars

    async def to_payloads(
        self, records: Sequence[Calendar], repos: Repositories
    ) -> list[dict[str, Any]]:
        descriptors = await repos.reference.get_descriptors(
            record.calendar_type_descriptor_id for record in records
        )
        return [self.to_payload(record, descriptors) for record in records]

    def to_payload(
        self, record: Calendar, descriptors: Mapping[int, Descriptor]
    ) -> dict[str, Any]:
        descriptor = descriptors.get(record.calendar_type_descriptor_id)
        return {
            "id": str(record.id),
            "calendarCode": record.calendar_code,
            "schoolReference": {
                "schoolId": record.school_id,
                "link": self.reference_link("School", f"schools/{record.school_id}"),
            },
            "schoolYearTypeReference": {
                "schoolYear": record.school_year,
                "link": self.reference_link("SchoolYearType", f"schoolYearTypes/{record.school_year}"),
            },
            "calendarTypeDescriptor": descriptor.uri if descriptor else None,
            "gradeLevels": [],
            **self.version_fields(record),
        }

    async def create(
        self,
        request: CreateCalendarRequest,
        if_none_match: str | None = None,
    ) -> ResourceResult:
        self.raise_if_invalid(validate_create_calendar(request))
        calendar_code = request.calendar_code.strip()
        school_id = request.school_reference.school_id
        school_year = request.school_year_type_reference.school_year
        descriptor_id = parse_descriptor_id(request.calendar_type_descriptor)

        async with self._uow.transaction() as repos:
            repository = repos.calendars
            resource_id = await self.ensure_id_available(repository, request.id)
            await self.ensure_key_available(
                repository, (calendar_code, school_id, school_year), if_none_match
            )

            reference = repos.reference
            if not await reference.school_exists(school_id):
                raise BadRequest(f"Invalid school reference: {school_id}")
            if not await reference.school_year_exists(school_year):
                raise BadRequest(f"Invalid school year reference: {school_year}")
            if not await reference.descriptor_exists(DescriptorKind.CALENDAR_TYPE, descriptor_id):
                raise BadRequest(
                    f"Invalid calendar type descriptor: {request.calendar_type_descriptor}"
                )

            now = datetime.now(timezone.utc)
            created = await repository.create(
                Calendar(
                    id=resource_id or uuid4(),
                    createdate=now,
                    lastmodifieddate=now,
                    calendar_code=calendar_code,
                    school_id=school_id,
                    school_year=school_year,
                    calendar_type_descriptor_id=descriptor_id,
                )
            )
            descriptors = await reference.get_descriptors([descriptor_id])

        return self.created(self.to_payload(created, descriptors))
