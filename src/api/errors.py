"""Exception handlers mapping failures to JSON error bodies.

    ResourceApiError         its own status, {"description", "codeMinor", ["field"|"header"]}
    RequestValidationError   400, codeMinor "invalid_request_body"
    anything else            500, logged with traceback, never echoed
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from src.domain.errors import ResourceApiError

logger = logging.getLogger(__name__)

INVALID_REQUEST_BODY = "invalid_request_body"
INTERNAL_SERVER_ERROR = "internal_server_error"


def _validation_messages(exc: RequestValidationError) -> list[str]:
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        messages.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
    return messages


def install_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(ResourceApiError)
    async def _resource_api_error_handler(request: Request, exc: ResourceApiError):
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(RequestValidationError)
    async def _validation_error_handler(request: Request, exc: RequestValidationError):
        messages = _validation_messages(exc)
        logger.info(
            "Request validation failed",
            extra={"path": request.url.path, "violations": messages},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"description": "; ".join(messages), "codeMinor": INVALID_REQUEST_BODY},
        )

    @app.exception_handler(Exception)
    async def _unhandled_error_handler(request: Request, exc: Exception):
        logger.exception(
            "Unhandled error", extra={"path": request.url.path, "method": request.method}
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "description": "An unexpected error occurred",
                "codeMinor": INTERNAL_SERVER_ERROR,
            },
        )
