"""Grading period endpoints."""

from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, Depends, Query, Request, Response, status

from src.api.dependencies import IfMatch, IfNoneMatch, get_grading_period_service, query_options
from src.domain.models.enums import ResourceType
from src.domain.models.query import QueryOptions
from src.domain.models.requests import CreateGradingPeriodRequest
from src.domain.services.grading_periods import GradingPeriodService

from .headers import set_created_headers, set_total_count

router = APIRouter(tags=["gradingPeriods"])

Service = Annotated[GradingPeriodService, Depends(get_grading_period_service)]
Options = Annotated[QueryOptions, Depends(query_options(ResourceType.GRADING_PERIODS))]


@router.get("/gradingPeriods", summary="List grading periods")
async def list_grading_periods(
    response: Response,
    service: Service,
    options: Options,
    fields: str | None = None,
    school_id: Annotated[int | None, Query(alias="schoolId")] = None,
    school_year: Annotated[int | None, Query(alias="schoolYear")] = None,
    period_sequence: Annotated[int | None, Query(alias="periodSequence")] = None,
    grading_period_descriptor_id: Annotated[
        int | None, Query(alias="gradingPeriodDescriptorId")
    ] = None,
) -> list[dict[str, Any]]:
    result = await service.list(
        options,
        fields=fields,
        filters={
            "school_id": school_id,
            "school_year": school_year,
            "period_sequence": period_sequence,
            "grading_period_descriptor_id": grading_period_descriptor_id,
        },
    )
    set_total_count(response, options, result.total_count)
    return result.items


@router.get("/gradingPeriods/{id}", summary="Get a grading period by id")
async def get_grading_period(
    id: str,
    response: Response,
    service: Service,
    fields: str | None = None,
) -> dict[str, Any]:
    result = await service.get(id, fields=fields)
    response.headers["ETag"] = result.etag
    return result.payload


@router.post(
    "/gradingPeriods",
    status_code=status.HTTP_201_CREATED,
    summary="Create a grading period",
)
async def create_grading_period(
    body: CreateGradingPeriodRequest,
    request: Request,
    response: Response,
    service: Service,
    if_none_match: IfNoneMatch,
) -> dict[str, Any]:
    result = await service.create(body, if_none_match=if_none_match)
    set_created_headers(request, response, result)
    return result.payload


@router.delete(
    "/gradingPeriods/{id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a grading period",
)
async def delete_grading_period(id: str, service: Service, if_match: IfMatch) -> Response:
    await service.delete(id, if_match)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
