"""Calendar endpoints."""

from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, Depends, Query, Request, Response, status

from src.api.dependencies import IfMatch, IfNoneMatch, get_calendar_service, query_options
from src.domain.models.enums import ResourceType
from src.domain.models.query import QueryOptions
from src.domain.models.requests import CreateCalendarRequest
from src.domain.services.calendars import CalendarService

from .headers import set_created_headers, set_total_count

router = APIRouter(tags=["calendars"])

Service = Annotated[CalendarService, Depends(get_calendar_service)]
Options = Annotated[QueryOptions, Depends(query_options(ResourceType.CALENDARS))]


@router.get("/calendars", summary="List calendars")
async def list_calendars(
    response: Response,
    service: Service,
    options: Options,
    fields: str | None = None,
    calendar_code: Annotated[str | None, Query(alias="calendarCode")] = None,
    school_id: Annotated[int | None, Query(alias="schoolId")] = None,
    school_year: Annotated[int | None, Query(alias="schoolYear")] = None,
    calendar_type_descriptor_id: Annotated[
        int | None, Query(alias="calendarTypeDescriptorId")
    ] = None,
) -> list[dict[str, Any]]:
    result = await service.list(
        options,
        fields=fields,
        filters={
            "calendar_code": calendar_code,
            "school_id": school_id,
            "school_year": school_year,
            "calendar_type_descriptor_id": calendar_type_descriptor_id,
        },
    )
    set_total_count(response, options, result.total_count)
    return result.items


@router.get("/calendars/{id}", summary="Get a calendar by id")
async def get_calendar(
    id: str,
    response: Response,
    service: Service,
    fields: str | None = None,
) -> dict[str, Any]:
    result = await service.get(id, fields=fields)
    response.headers["ETag"] = result.etag
    return result.payload


@router.post("/calendars", status_code=status.HTTP_201_CREATED, summary="Create a calendar")
async def create_calendar(
    body: CreateCalendarRequest,
    request: Request,
    response: Response,
    service: Service,
    if_none_match: IfNoneMatch,
) -> dict[str, Any]:
    result = await service.create(body, if_none_match=if_none_match)
    set_created_headers(request, response, result)
    return result.payload


@router.delete(
    "/calendars/{id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a calendar",
)
async def delete_calendar(id: str, service: Service, if_match: IfMatch) -> Response:
    await service.delete(id, if_match)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
