"""In-memory unit of work shared by service and API tests.

transaction() snapshots every repository and restores the snapshot when the
block raises, so tests can assert that failed mutations leave no trace.
"""

from contextlib import asynccontextmanager
from datetime import datetime, timezone
from operator import attrgetter

import pytest

from src.domain.models.enums import DescriptorKind, Status
from src.domain.models.resources import Descriptor
from src.domain.repositories.base import ResourceRepository
from src.domain.repositories.reference import ReferenceRepository
from src.domain.repositories.unit_of_work import Repositories, UnitOfWork
from src.domain.services.calendars import CalendarService
from src.domain.services.grading_periods import GradingPeriodService
from src.infrastructure.cache import ResponseCache

SCHOOL_ID = 255901
SCHOOL_YEAR = 2025
GRADING_PERIOD_DESCRIPTOR_ID = 3
CALENDAR_TYPE_DESCRIPTOR_ID = 7


class InMemoryResourceRepository(ResourceRepository):
    def __init__(self, natural_key):
        self.natural_key = natural_key
        self.records = {}
        self.find_all_calls = []

    async def get_by_id(self, id, status=None):
        record = self.records.get(id)
        if record is None or (status is not None and record.status is not status):
            return None
        return record

    async def find_all_by(self, options, where=None):
        self.find_all_calls.append((options, dict(where or {})))
        matches = [
            record
            for record in self.records.values()
            if all(getattr(record, prop) == value for prop, value in (where or {}).items())
        ]
        matches.sort(key=attrgetter("id"))
        page = matches[options.offset : options.offset + options.limit]
        return page, len(matches)

    async def find_by_composite_key(self, *values):
        for record in self.records.values():
            if tuple(getattr(record, prop) for prop in self.natural_key) == values:
                return record
        return None

    async def create(self, entity):
        self.records[entity.id] = entity
        return entity

    async def delete(self, id):
        record = self.records.get(id)
        if record is not None:
            now = datetime.now(timezone.utc)
            self.records[id] = record.model_copy(
                update={"status": Status.DELETED, "deletedate": now, "lastmodifieddate": now}
            )


class InMemoryReferenceRepository(ReferenceRepository):
    def __init__(self):
        self.schools = {SCHOOL_ID}
        self.school_years = {SCHOOL_YEAR}
        self.descriptor_kinds = {
            DescriptorKind.GRADING_PERIOD: {GRADING_PERIOD_DESCRIPTOR_ID},
            DescriptorKind.CALENDAR_TYPE: {CALENDAR_TYPE_DESCRIPTOR_ID},
        }
        self.descriptors = {
            GRADING_PERIOD_DESCRIPTOR_ID: Descriptor(
                descriptor_id=GRADING_PERIOD_DESCRIPTOR_ID,
                namespace="uri://ed-fi.org/GradingPeriodDescriptor",
                code_value="First Six Weeks",
                short_description="First Six Weeks",
            ),
            CALENDAR_TYPE_DESCRIPTOR_ID: Descriptor(
                descriptor_id=CALENDAR_TYPE_DESCRIPTOR_ID,
                namespace="uri://ed-fi.org/CalendarTypeDescriptor",
                code_value="Student Specific",
                short_description="Student Specific",
            ),
        }
        self.descriptor_lookups = []

    async def school_exists(self, school_id):
        return school_id in self.schools

    async def school_year_exists(self, school_year):
        return school_year in self.school_years

    async def descriptor_exists(self, kind, descriptor_id):
        return descriptor_id in self.descriptor_kinds[kind]

    async def get_descriptors(self, descriptor_ids):
        ids = set(descriptor_ids)
        self.descriptor_lookups.append(ids)
        return {i: self.descriptors[i] for i in ids if i in self.descriptors}


class InMemoryUnitOfWork(UnitOfWork):
    def __init__(self):
        self.repos = Repositories(
            grading_periods=InMemoryResourceRepository(
                ("grading_period_descriptor_id", "period_sequence", "school_id", "school_year")
            ),
            calendars=InMemoryResourceRepository(("calendar_code", "school_id", "school_year")),
            reference=InMemoryReferenceRepository(),
        )
        self.reads = 0
        self.commits = 0
        self.rollbacks = 0

    @asynccontextmanager
    async def read(self):
        self.reads += 1
        yield self.repos

    @asynccontextmanager
    async def transaction(self):
        snapshot = {
            "grading_periods": dict(self.repos.grading_periods.records),
            "calendars": dict(self.repos.calendars.records),
        }
        try:
            yield self.repos
        except BaseException:
            self.repos.grading_periods.records = snapshot["grading_periods"]
            self.repos.calendars.records = snapshot["calendars"]
            self.rollbacks += 1
            raise
        self.commits += 1


@pytest.fixture
def uow():
    return InMemoryUnitOfWork()


@pytest.fixture
def cache():
    return ResponseCache(ttl_seconds=60)


@pytest.fixture
def grading_period_service(uow, cache):
    return GradingPeriodService(uow, cache=cache)


@pytest.fixture
def calendar_service(uow, cache):
    return CalendarService(uow, cache=cache)
