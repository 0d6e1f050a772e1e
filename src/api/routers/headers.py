"""Response headers shared by resource routers."""

from __future__ import annotations

from fastapi import Request, Response

from src.domain.models.query import QueryOptions, ResourceResult

TOTAL_COUNT_HEADER = "Total-Count"


def set_total_count(response: Response, options: QueryOptions, total_count: int) -> None:
    if options.total_count:
        response.headers[TOTAL_COUNT_HEADER] = str(total_count)


def set_created_headers(request: Request, response: Response, result: ResourceResult) -> None:
    response.headers["ETag"] = result.etag
    response.headers["Location"] = f"{request.url.path.rstrip('/')}/{result.payload['id']}"
