"""WebDash Frontend Service middleware components."""

from __future__ import annotations

from uuid import UUID, uuid4

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response
from webdash_service_libs.logging_utils import bind_request_context


class CorrelationIDMiddleware(BaseHTTPMiddleware):
    """Middleware to ensure every request has a correlation ID."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        """Extract or generate correlation ID, store it in request state and log context."""
        x_correlation_id = request.headers.get("X-Correlation-ID")
        try:
            correlation_id = UUID(x_correlation_id) if x_correlation_id else uuid4()
        except ValueError:
            correlation_id = uuid4()

        request.state.correlation_id = correlation_id
        bind_request_context(correlation_id, path=request.url.path)
        response = await call_next(request)
        response.headers["X-Correlation-ID"] = str(correlation_id)
        return response
