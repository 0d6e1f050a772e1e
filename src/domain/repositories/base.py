"""Generic resource repository interface.

ResourceRepository[T] is the root abstraction for all resource data access
in this domain layer. Concrete implementations live in
src/infrastructure/persistence/ and are wired at the application boundary
via dependency injection.

Design notes:
  - All methods are async to accommodate async database drivers (asyncpg / SQLAlchemy async).
  - T is the domain model type (never an ORM row or DTO).
  - One implementation serves every resource type; what differs per type
    (table, natural key, filterable fields) is passed in as configuration.
  - delete() is a soft delete. Rows are never physically removed.
  - Repositories are stateless accessors bound to a session; they never
    cache record identity.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, Generic, TypeVar
from uuid import UUID

from src.domain.models.enums import Status
from src.domain.models.query import QueryOptions
from src.domain.models.resources import ResourceRecord

T = TypeVar("T", bound=ResourceRecord)


class ResourceRepository(ABC, Generic[T]):
    """Read/write interface for one resource type."""

    @abstractmethod
    async def get_by_id(self, id: UUID, status: Status | None = None) -> T | None:
        """Return the record with the given surrogate id, or None.

        When status is given, records in any other status are treated as absent.
        """

    @abstractmethod
    async def find_all_by(
        self,
        options: QueryOptions,
        where: Mapping[str, Any] | None = None,
    ) -> tuple[list[T], int]:
        """Return one page of matching records plus the total match count.

        where maps filterable property names to a value, or to a list/tuple of
        values any of which may match. Records are ordered by id ascending so
        pages are stable across calls. The count ignores limit/offset.
        """

    @abstractmethod
    async def find_by_composite_key(self, *values: Any) -> T | None:
        """Return the record whose natural key equals values, or None."""

    @abstractmethod
    async def create(self, entity: T) -> T:
        """Persist a new record.  Raises BadRequest if the natural key is taken."""

    @abstractmethod
    async def delete(self, id: UUID) -> None:
        """Soft-delete the record with the given id.

        Sets status to TO_BE_DELETED and stamps deletedate and
        lastmodifieddate. An absent id is not an error here.
        """
