"""Shared orchestration for resource services.

ResourceService[T] implements the read and delete paths every resource
type has in common; subclasses supply the repository for their type, the
payload conversion and create().

    list    fields validated → cached? → find_all_by(active) → payloads → shaped
    get     fields validated → cached? → get_by_id(active) → payload → shaped
    delete  transaction: get_by_id(active) → If-Match check → soft delete

Reads go through uow.read(); every mutation runs inside one
uow.transaction(), so a failed check leaves nothing behind. Successful
mutations invalidate the response cache for the resource type.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from typing import Any, Generic, TypeVar
from uuid import UUID

from src.domain.errors import BadRequest, NotFound
from src.domain.models.enums import ResourceType, Status
from src.domain.models.query import ListResult, QueryOptions, ResourceResult
from src.domain.models.resources import ResourceRecord
from src.domain.repositories.base import ResourceRepository
from src.domain.repositories.unit_of_work import Repositories, UnitOfWork
from src.domain.services.etag import ETagService, isoformat_utc
from src.domain.services.field_selector import FieldSelector
from src.domain.services.validation import ValidationResult

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=ResourceRecord)

DEFAULT_LINK_PREFIX = "/ed-fi"


class ResourceService(ABC, Generic[T]):
    resource_type: ResourceType
    label: str

    def __init__(
        self,
        uow: UnitOfWork,
        etags: ETagService | None = None,
        cache: Any | None = None,
        link_prefix: str = DEFAULT_LINK_PREFIX,
    ) -> None:
        self._uow = uow
        self._etags = etags or ETagService()
        self._cache = cache
        self._link_prefix = link_prefix.rstrip("/")

    # ------------------------------------------------------------------ #
    # Hooks                                                                #
    # ------------------------------------------------------------------ #

    @abstractmethod
    def repository(self, repos: Repositories) -> ResourceRepository[T]:
        """The repository for this resource type within a bundle."""

    @abstractmethod
    async def to_payloads(self, records: Sequence[T], repos: Repositories) -> list[dict[str, Any]]:
        """Client representation of records, in order, with version fields."""

    # ------------------------------------------------------------------ #
    # Public API                                                           #
    # ------------------------------------------------------------------ #

    async def list(
        self,
        options: QueryOptions,
        fields: str | None = None,
        filters: Mapping[str, Any] | None = None,
    ) -> ListResult:
        selected = FieldSelector.validate_fields(self.resource_type, fields)
        where = {key: value for key, value in (filters or {}).items() if value is not None}

        cache_key = self._cache_key(
            "list",
            limit=options.limit,
            offset=options.offset,
            fields=selected,
            where=where,
        )
        cached = self._cache_get(cache_key)
        if cached is not None:
            return cached

        async with self._uow.read() as repos:
            records, total = await self.repository(repos).find_all_by(
                options, {**where, "status": Status.ACTIVE}
            )
            payloads = await self.to_payloads(records, repos)

        result = ListResult(
            items=FieldSelector.shape_data(payloads, selected, self.resource_type),
            total_count=total,
        )
        logger.info(
            "Listed %s",
            self.resource_type.value,
            extra={"returned": len(result.items), "total_count": total},
        )
        self._cache_set(cache_key, result)
        return result

    async def get(self, id: UUID | str, fields: str | None = None) -> ResourceResult:
        selected = FieldSelector.validate_fields(self.resource_type, fields)
        resource_id = self.parse_id(id)

        cache_key = self._cache_key("get", id=str(resource_id), fields=selected)
        cached = self._cache_get(cache_key)
        if cached is not None:
            return cached

        async with self._uow.read() as repos:
            record = await self.repository(repos).get_by_id(resource_id, status=Status.ACTIVE)
            if record is None:
                raise self._not_found(resource_id)
            (payload,) = await self.to_payloads([record], repos)

        result = ResourceResult(
            payload=FieldSelector.shape_data(payload, selected, self.resource_type),
            etag=payload["_etag"],
        )
        self._cache_set(cache_key, result)
        return result

    async def delete(self, id: UUID | str, if_match: str | None) -> None:
        resource_id = self.parse_id(id)
        async with self._uow.transaction() as repos:
            repository = self.repository(repos)
            record = await repository.get_by_id(resource_id, status=Status.ACTIVE)
            if record is None:
                raise self._not_found(resource_id)
            self._etags.validate_if_match(if_match, self._etags.for_record(record))
            await repository.delete(resource_id)

        self._invalidate_cache()
        logger.info(
            "Deleted %s", self.label.lower(), extra={"resource_id": str(resource_id)}
        )

    # ------------------------------------------------------------------ #
    # Helpers for subclasses                                               #
    # ------------------------------------------------------------------ #

    def parse_id(self, value: UUID | str) -> UUID:
        if isinstance(value, UUID):
            return value
        try:
            return UUID(str(value).strip())
        except ValueError:
            raise BadRequest(f"Invalid {self.label.lower()} ID: {value}") from None

    def version_fields(self, record: T) -> dict[str, str]:
        return {
            "_etag": self._etags.for_record(record),
            "_lastModifiedDate": isoformat_utc(record.version_timestamp),
        }

    def reference_link(self, rel: str, path: str) -> dict[str, str]:
        return {"rel": rel, "href": f"{self._link_prefix}/{path}"}

    def raise_if_invalid(self, result: ValidationResult) -> None:
        if not result.ok:
            logger.warning(
                "Rejected %s request",
                self.label.lower(),
                extra={"violations": list(result.violations)},
            )
            raise BadRequest(result.message())

    async def ensure_id_available(
        self, repository: ResourceRepository[T], raw_id: str | None
    ) -> UUID | None:
        """Parse a client-supplied id and reject it when already taken."""
        if raw_id is None or not raw_id.strip():
            return None
        resource_id = self.parse_id(raw_id)
        if await repository.get_by_id(resource_id) is not None:
            logger.warning(
                "%s already exists", self.label, extra={"resource_id": str(resource_id)}
            )
            raise BadRequest(
                f"Cannot create {self.label.lower()}: Record already exists with ID {resource_id}"
            )
        return resource_id

    async def ensure_key_available(
        self,
        repository: ResourceRepository[T],
        natural_key: tuple[Any, ...],
        if_none_match: str | None,
    ) -> None:
        """Reject a create whose natural key is already taken.

        An If-None-Match equal to the existing record's token is reported as
        a failed precondition rather than a duplicate.
        """
        existing = await repository.find_by_composite_key(*natural_key)
        if existing is None:
            return
        self._etags.validate_if_none_match(if_none_match, self._etags.for_record(existing))
        logger.warning("%s already exists with the same natural key", self.label)
        raise BadRequest(f"{self.label} already exists with the same natural key")

    def created(self, payload: dict[str, Any]) -> ResourceResult:
        self._invalidate_cache()
        logger.info("Created %s", self.label.lower(), extra={"resource_id": payload["id"]})
        return ResourceResult(payload=payload, etag=payload["_etag"])

    def _not_found(self, resource_id: UUID) -> NotFound:
        logger.warning("%s not found", self.label, extra={"resource_id": str(resource_id)})
        return NotFound(f"{self.label} with ID {resource_id} not found")

    # ------------------------------------------------------------------ #
    # Cache                                                                #
    # ------------------------------------------------------------------ #

    def _cache_key(self, operation: str, **query: Any) -> str | None:
        if self._cache is None:
            return None
        return self._cache.key(self.resource_type.value, operation, **query)

    def _cache_get(self, key: str | None) -> Any | None:
        if key is None:
            return None
        return self._cache.get(key)

    def _cache_set(self, key: str | None, value: Any) -> None:
        if key is not None:
            self._cache.set(key, value)

    def _invalidate_cache(self) -> None:
        if self._cache is not None:
            self._cache.invalidate(self.resource_type.value)
