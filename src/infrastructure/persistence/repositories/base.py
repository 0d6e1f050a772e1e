"""Generic SQLAlchemy repository shared by every resource type.

One engine, configured per resource type by a ResourceMapping: the ORM
model, the natural-key properties, the properties callers may filter on,
and the row <-> domain converters. Nothing here knows about grading
periods or calendars.

Filter predicates are rendered as a text() clause. Literals never appear
in the SQL string; each distinct value is bound once through
QueryParameterManager and referenced by its named placeholder.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Generic, TypeVar
from uuid import UUID

from sqlalchemy import func, inspect, select, text, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.errors import BadRequest, InvalidFilterFieldException
from src.domain.models.enums import Status
from src.domain.models.query import QueryOptions
from src.domain.models.resources import ResourceRecord
from src.domain.repositories.base import ResourceRepository
from src.infrastructure.persistence.parameters import QueryParameterManager

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=ResourceRecord)

# Rendered for an empty OR-list: matches nothing.
_NO_MATCH = "1 = 0"


@dataclass(frozen=True)
class ResourceMapping(Generic[T]):
    """Storage configuration of one resource type.

    natural_key and filterable hold ORM attribute names (snake_case), not
    column names; column names are looked up from the mapper.
    """

    orm_model: type
    natural_key: tuple[str, ...]
    filterable: frozenset[str]
    to_domain: Callable[[Any], T]
    to_row: Callable[[T], Any]

    @property
    def table_name(self) -> str:
        return self.orm_model.__tablename__

    def column_name(self, prop: str) -> str:
        return inspect(self.orm_model).columns[prop].name

    def qualified_column(self, prop: str) -> str:
        return f"{self.table_name}.{self.column_name(prop)}"


def _bindable(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    return value


class SqlResourceRepository(ResourceRepository[T]):
    def __init__(self, session: AsyncSession, mapping: ResourceMapping[T]) -> None:
        self._session = session
        self._mapping = mapping

    @property
    def mapping(self) -> ResourceMapping[T]:
        return self._mapping

    def build_predicate(
        self,
        where: Mapping[str, Any],
        params: QueryParameterManager,
    ) -> str | None:
        """Render where as SQL text, registering every literal with params.

        Properties are AND-ed; a list or tuple value is an OR of equalities.
        Returns None when there is nothing to filter on.
        """
        clauses: list[str] = []
        for prop, value in where.items():
            if prop not in self._mapping.filterable:
                raise InvalidFilterFieldException(f"Invalid filter field: {prop}", field=prop)
            column = self._mapping.qualified_column(prop)
            values = [
                _bindable(v)
                for v in (value if isinstance(value, (list, tuple)) else [value])
            ]
            if not values:
                clauses.append(_NO_MATCH)
                continue
            params.add_parameters(values)
            alternatives = [f"{column} = {params.placeholder(v)}" for v in values]
            if len(alternatives) == 1:
                clauses.append(alternatives[0])
            else:
                clauses.append("(" + " OR ".join(dict.fromkeys(alternatives)) + ")")
        return " AND ".join(clauses) if clauses else None

    async def get_by_id(self, id: UUID, status: Status | None = None) -> T | None:
        model = self._mapping.orm_model
        stmt = select(model).where(model.id == id)
        if status is not None:
            stmt = stmt.where(model.status == status.value)
        result = await self._session.execute(stmt)
        row = result.scalar_one_or_none()
        return self._mapping.to_domain(row) if row else None

    async def find_all_by(
        self,
        options: QueryOptions,
        where: Mapping[str, Any] | None = None,
    ) -> tuple[list[T], int]:
        model = self._mapping.orm_model
        params = QueryParameterManager()
        predicate = self.build_predicate(where or {}, params)

        stmt = select(model)
        count_stmt = select(func.count()).select_from(model)
        if predicate is not None:
            clause = text(predicate).bindparams(**params.bind_parameters())
            stmt = stmt.where(clause)
            count_stmt = count_stmt.where(clause)

        logger.debug(
            "find_all_by",
            extra={
                "table": self._mapping.table_name,
                "predicate": predicate,
                "parameter_count": len(params),
                "limit": options.limit,
                "offset": options.offset,
            },
        )

        total = (await self._session.execute(count_stmt)).scalar_one()
        stmt = stmt.order_by(model.id.asc()).offset(options.offset).limit(options.limit)
        result = await self._session.execute(stmt)
        return [self._mapping.to_domain(row) for row in result.scalars()], total

    async def find_by_composite_key(self, *values: Any) -> T | None:
        natural_key = self._mapping.natural_key
        if len(values) != len(natural_key):
            raise ValueError(
                f"{self._mapping.table_name} natural key has {len(natural_key)} parts "
                f"({', '.join(natural_key)}), got {len(values)}"
            )
        model = self._mapping.orm_model
        stmt = select(model).where(
            *(getattr(model, prop) == _bindable(value) for prop, value in zip(natural_key, values))
        )
        result = await self._session.execute(stmt)
        row = result.scalar_one_or_none()
        logger.debug(
            "find_by_composite_key",
            extra={"table": self._mapping.table_name, "found": row is not None},
        )
        return self._mapping.to_domain(row) if row else None

    async def create(self, entity: T) -> T:
        self._session.add(self._mapping.to_row(entity))
        try:
            await self._session.flush()
        except IntegrityError as exc:
            logger.warning(
                "Insert rejected by a storage constraint",
                extra={"table": self._mapping.table_name, "resource_id": str(entity.id)},
            )
            raise BadRequest(
                f"Cannot create record in {self._mapping.table_name}: "
                "a record with the same key already exists"
            ) from exc
        return entity

    async def delete(self, id: UUID) -> None:
        model = self._mapping.orm_model
        now = datetime.now(timezone.utc)
        stmt = (
            update(model)
            .where(model.id == id)
            .values(status=Status.DELETED.value, deletedate=now, lastmodifieddate=now)
        )
        await self._session.execute(stmt)
        logger.debug("Soft-deleted", extra={"table": self._mapping.table_name, "resource_id": str(id)})
