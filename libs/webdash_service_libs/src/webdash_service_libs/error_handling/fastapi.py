"""FastAPI exception handlers for normalized outbound request failures."""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from webdash_service_libs.error_handling.http_request_error import HttpRequestError
from webdash_service_libs.logging_utils import create_service_logger

logger = create_service_logger("webdash.error_handling")

UPSTREAM_FAILURE_STATUS = 502


def _correlation_id(request: Request) -> str | None:
    correlation_id = getattr(request.state, "correlation_id", None)
    return str(correlation_id) if correlation_id is not None else None


def register_error_handlers(app: FastAPI) -> None:
    """Register WebDash error handlers on a FastAPI application."""

    @app.exception_handler(HttpRequestError)
    async def http_request_error_handler(request: Request, exc: HttpRequestError) -> JSONResponse:
        logger.warning(
            "Upstream request failed",
            extra={
                "path": request.url.path,
                "upstream_status": exc.status_code,
                "error_type": exc.__class__.__name__,
                "correlation_id": _correlation_id(request),
            },
        )
        return JSONResponse(
            status_code=UPSTREAM_FAILURE_STATUS,
            content={
                "error": {
                    "message": exc.message,
                    "upstream_status": exc.status_code,
                    "correlation_id": _correlation_id(request),
                }
            },
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception(
            "Unhandled error while serving request",
            extra={
                "path": request.url.path,
                "error_type": exc.__class__.__name__,
                "correlation_id": _correlation_id(request),
            },
        )
        return JSONResponse(
            status_code=500,
            content={
                "error": {
                    "message": "Internal server error",
                    "correlation_id": _correlation_id(request),
                }
            },
        )
