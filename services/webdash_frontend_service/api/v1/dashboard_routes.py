"""WebDash API v1 routes.

Page-specific endpoints. Upstream data goes through the outbound HTTP
client; its normalized errors are turned into responses by the registered
error handlers.
"""

from __future__ import annotations

from typing import Any
from uuid import UUID

from common_core.http_contracts import HttpMethod, HttpRequest, QueryParams
from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, Request
from webdash_service_libs.http import HttpClientProtocol
from webdash_service_libs.logging_utils import create_service_logger

from services.webdash_frontend_service.config import WebDashSettings
from services.webdash_frontend_service.dto.ui_v1 import UIConfigResponseV1

router = APIRouter()
logger = create_service_logger("webdash_frontend.dashboard_routes")


def _forwarded_params(request: Request) -> QueryParams | None:
    grouped: dict[str, list[str]] = {}
    for key, value in request.query_params.multi_items():
        grouped.setdefault(key, []).append(value)
    if not grouped:
        return None
    return {key: values[0] if len(values) == 1 else values for key, values in grouped.items()}


@router.get("/dashboard", response_model=None)
@inject
async def get_dashboard(
    request: Request,
    api_client: FromDishka[HttpClientProtocol],
    config: FromDishka[WebDashSettings],
    correlation_id: FromDishka[UUID],
) -> Any:
    """Return the upstream dashboard payload unchanged.

    Query parameters are forwarded as-is, repeated keys included; when there
    are none the upstream request carries no params at all.
    """
    params = _forwarded_params(request)
    upstream_request: HttpRequest[None] = HttpRequest(
        endpoint=config.DASHBOARD_ENDPOINT,
        method=HttpMethod.GET,
        body=None,
        headers={
            "Content-Type": "application/json",
            "X-Correlation-ID": str(correlation_id),
        },
        params=params,
    )

    logger.debug(
        "Fetching dashboard from upstream",
        extra={"correlation_id": str(correlation_id), "has_params": params is not None},
    )
    return await api_client.send_request(upstream_request)


@router.get("/ui-config", response_model=UIConfigResponseV1)
@inject
async def get_ui_config(config: FromDishka[WebDashSettings]) -> UIConfigResponseV1:
    """Theme defaults for the frontend theme provider."""
    return UIConfigResponseV1(
        default_theme=config.DEFAULT_THEME,
        theme_storage_key=config.THEME_STORAGE_KEY,
    )
