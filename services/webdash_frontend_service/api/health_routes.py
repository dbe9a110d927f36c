"""Health routes for WebDash Frontend Service."""

from __future__ import annotations

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter

from services.webdash_frontend_service.config import WebDashSettings

router = APIRouter()

SERVICE_VERSION = "0.1.0"


@router.get("/healthz", tags=["Health"])
@inject
async def health_check(config: FromDishka[WebDashSettings]) -> dict[str, str | dict]:
    """Report whether the frontend build is present."""
    checks = {
        "static_dir_exists": config.STATIC_DIR.exists(),
        "index_exists": (config.STATIC_DIR / "index.html").exists(),
        "assets_dir_exists": (config.STATIC_DIR / "assets").exists(),
    }

    overall_status = "healthy" if all(checks.values()) else "degraded"

    return {
        "service": config.SERVICE_NAME,
        "status": overall_status,
        "message": f"WebDash Frontend Service is {overall_status}",
        "version": SERVICE_VERSION,
        "checks": checks,
        "dependencies": {
            "upstream_api": {"base_url": config.API_BASE_URL},
            "frontend_build": {
                "status": "available" if checks["index_exists"] else "missing",
            },
        },
    }

