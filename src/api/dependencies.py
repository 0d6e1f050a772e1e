"""FastAPI dependency functions.

Settings, the session factory and the response cache live on app.state
(set by create_app), so tests can build an app with their own settings and
swap the unit of work through app.dependency_overrides[get_unit_of_work].
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Annotated

from fastapi import Depends, Header, Query, Request

from src.domain.models.enums import ResourceType
from src.domain.models.fields import query_config
from src.domain.models.query import QueryOptions
from src.domain.repositories.unit_of_work import UnitOfWork
from src.domain.services.calendars import CalendarService
from src.domain.services.etag import IF_MATCH_HEADER, IF_NONE_MATCH_HEADER
from src.domain.services.grading_periods import GradingPeriodService
from src.infrastructure.cache import ResponseCache
from src.infrastructure.config import Settings
from src.infrastructure.persistence.unit_of_work import SqlUnitOfWork


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_response_cache(request: Request) -> ResponseCache:
    return request.app.state.cache


def get_unit_of_work(request: Request) -> UnitOfWork:
    return SqlUnitOfWork(request.app.state.session_factory)


AppSettings = Annotated[Settings, Depends(get_app_settings)]
Cache = Annotated[ResponseCache, Depends(get_response_cache)]
Uow = Annotated[UnitOfWork, Depends(get_unit_of_work)]


def query_options(resource_type: ResourceType) -> Callable[..., QueryOptions]:
    """Build the pagination dependency for one resource type.

    limit defaults to the resource's own default, else the configured page
    size, and is clamped to maximum_page_size.
    """
    default_limit = query_config(resource_type).default_limit

    def _query_options(
        settings: AppSettings,
        offset: Annotated[int, Query(ge=0)] = 0,
        limit: Annotated[int | None, Query(ge=0)] = None,
        total_count: Annotated[bool, Query(alias="totalCount")] = False,
    ) -> QueryOptions:
        if limit is None:
            limit = default_limit if default_limit is not None else settings.default_page_size
        return QueryOptions(
            limit=min(limit, settings.maximum_page_size),
            offset=offset,
            total_count=total_count,
        )

    return _query_options


def if_match(value: Annotated[str | None, Header(alias=IF_MATCH_HEADER)] = None) -> str | None:
    return value


def if_none_match(
    value: Annotated[str | None, Header(alias=IF_NONE_MATCH_HEADER)] = None,
) -> str | None:
    return value


def get_grading_period_service(
    uow: Uow, cache: Cache, settings: AppSettings
) -> GradingPeriodService:
    return GradingPeriodService(uow, cache=cache, link_prefix=settings.api_prefix)


def get_calendar_service(uow: Uow, cache: Cache, settings: AppSettings) -> CalendarService:
    return CalendarService(uow, cache=cache, link_prefix=settings.api_prefix)


IfMatch = Annotated[str | None, Depends(if_match)]
IfNoneMatch = Annotated[str | None, Depends(if_none_match)]
