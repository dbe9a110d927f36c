"""Dependency Injection providers for WebDash Frontend Service.

Provides Dishka DI container setup with APP-scoped infrastructure
and REQUEST-scoped context providers.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from uuid import UUID, uuid4

import httpx
from dishka import Provider, Scope, provide
from fastapi import Request
from webdash_service_libs.http import HttpClient, HttpClientProtocol, HttpxTransport
from webdash_service_libs.logging_utils import create_service_logger

from services.webdash_frontend_service.config import WebDashSettings, settings

logger = create_service_logger("webdash_frontend.di")


class WebDashProvider(Provider):
    """Infrastructure provider for WebDash Frontend Service.

    Provides APP-scoped dependencies: config, pooled httpx client, transport
    and the outbound HTTP client.
    """

    scope = Scope.APP

    def __init__(self, config: WebDashSettings | None = None):
        super().__init__()
        self._config = config or settings

    @provide
    def get_config(self) -> WebDashSettings:
        """Provide service settings."""
        return self._config

    @provide(scope=Scope.APP)
    async def get_http_client(self, config: WebDashSettings) -> AsyncIterator[httpx.AsyncClient]:
        """Provide shared httpx client with connection pooling."""
        async with httpx.AsyncClient(
            timeout=httpx.Timeout(
                config.HTTP_CLIENT_TIMEOUT_SECONDS,
                connect=config.HTTP_CLIENT_CONNECT_TIMEOUT_SECONDS,
            )
        ) as client:
            yield client

    @provide(scope=Scope.APP)
    def provide_transport(self, http_client: httpx.AsyncClient) -> HttpxTransport:
        """Provide the httpx transport over the shared client."""
        return HttpxTransport(http_client)

    @provide(scope=Scope.APP)
    def provide_api_client(
        self, config: WebDashSettings, transport: HttpxTransport
    ) -> HttpClientProtocol:
        """Provide the outbound HTTP client bound to the upstream API."""
        logger.info("Outbound HTTP client configured", extra={"base_url": config.API_BASE_URL})
        return HttpClient.create(config.API_BASE_URL, transport=transport)


class RequestContextProvider(Provider):
    """Request-scoped provider for correlation context.

    Reads the correlation_id set on request state by CorrelationIDMiddleware.
    The Request itself comes from dishka's FastapiProvider.
    """

    @provide(scope=Scope.REQUEST)
    def provide_correlation_id(self, request: Request) -> UUID:
        """Provide correlation ID from request state."""
        return getattr(request.state, "correlation_id", uuid4())
