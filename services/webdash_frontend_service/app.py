"""WebDash Frontend Service - Single page application shell.

Serves the built frontend (dashboard and login pages), exposes page-specific
API endpoints backed by the outbound HTTP client, and wires everything
through Dishka.
"""

from __future__ import annotations

from dishka import make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from webdash_service_libs.error_handling.fastapi import register_error_handlers
from webdash_service_libs.logging_utils import configure_service_logging, create_service_logger

from services.webdash_frontend_service.api.health_routes import router as health_router
from services.webdash_frontend_service.api.spa_routes import router as spa_router
from services.webdash_frontend_service.api.v1 import router as api_router_v1
from services.webdash_frontend_service.config import WebDashSettings, settings
from services.webdash_frontend_service.di import RequestContextProvider, WebDashProvider
from services.webdash_frontend_service.middleware import CorrelationIDMiddleware

logger = create_service_logger("webdash_frontend_service")


def create_app(config: WebDashSettings = settings) -> FastAPI:
    """Create and configure the FastAPI application."""
    configure_service_logging(
        config.SERVICE_NAME,
        environment=config.ENVIRONMENT.value,
        log_level=config.LOG_LEVEL,
    )

    app = FastAPI(
        title=config.SERVICE_NAME,
        version="0.1.0",
        description="WebDash Frontend Service - serves the dashboard SPA",
        docs_url="/docs" if config.is_development() else None,
        redoc_url=None,
        openapi_url="/openapi.json" if config.is_development() else None,
    )

    register_error_handlers(app)

    app.add_middleware(CorrelationIDMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=config.CORS_ALLOW_CREDENTIALS,
        allow_methods=config.CORS_ALLOW_METHODS,
        allow_headers=config.CORS_ALLOW_HEADERS,
    )

    app.include_router(health_router)

    # Only mount if directory exists to avoid startup errors
    assets_dir = config.STATIC_DIR / "assets"
    if assets_dir.exists():
        app.mount("/assets", StaticFiles(directory=str(assets_dir)), name="assets")
        logger.info(f"Mounted static assets from {assets_dir}")
    else:
        logger.warning(f"Assets directory not found: {assets_dir}")

    # API routes must precede the SPA fallback
    app.include_router(api_router_v1, prefix="/bff/v1", tags=["WebDash API"])

    container = make_async_container(
        WebDashProvider(config),
        RequestContextProvider(),
        FastapiProvider(),
    )
    setup_dishka(container, app)
    app.state.di_container = container

    app.include_router(spa_router)

    return app


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        create_app(),
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )
