"""Unit tests for the registered error handlers on unexpected exceptions."""

from __future__ import annotations

from collections.abc import AsyncIterator
from uuid import uuid4

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from webdash_service_libs.error_handling.fastapi import register_error_handlers

from services.webdash_frontend_service.middleware import CorrelationIDMiddleware


@pytest.fixture
async def client() -> AsyncIterator[AsyncClient]:
    """App with one route raising an unexpected error."""
    app = FastAPI(title="webdash_frontend_service_test")
    register_error_handlers(app)
    app.add_middleware(CorrelationIDMiddleware)

    @app.get("/explode")
    async def explode() -> None:
        raise RuntimeError("database exploded")

    # Starlette re-raises after the last-resort handler has produced its response
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.mark.asyncio
async def test_unexpected_error_returns_generic_500(client: AsyncClient) -> None:
    """Unexpected exceptions become a 500 without leaking their details."""
    correlation_id = uuid4()

    response = await client.get("/explode", headers={"X-Correlation-ID": str(correlation_id)})

    assert response.status_code == 500
    assert response.json() == {
        "error": {
            "message": "Internal server error",
            "correlation_id": str(correlation_id),
        }
    }
    assert "database exploded" not in response.text
