"""Page routes for WebDash Frontend Service.

``/`` (dashboard) and ``/login`` are the application's pages. Both, and any
other unmatched path, serve index.html so the client-side router can take
over.
"""

from __future__ import annotations

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter
from fastapi.responses import FileResponse, JSONResponse

from services.webdash_frontend_service.config import WebDashSettings

router = APIRouter()


def _serve_index(config: WebDashSettings) -> FileResponse | JSONResponse:
    index_path = config.STATIC_DIR / "index.html"
    if index_path.exists():
        return FileResponse(index_path, media_type="text/html")
    return JSONResponse(
        status_code=503,
        content={
            "detail": "Frontend not built",
            "static_dir": str(config.STATIC_DIR),
        },
    )


@router.get("/", include_in_schema=False, response_model=None)
@inject
async def serve_dashboard_page(config: FromDishka[WebDashSettings]) -> FileResponse | JSONResponse:
    return _serve_index(config)


@router.get("/login", include_in_schema=False, response_model=None)
@inject
async def serve_login_page(config: FromDishka[WebDashSettings]) -> FileResponse | JSONResponse:
    return _serve_index(config)


@router.get("/{_full_path:path}", include_in_schema=False, response_model=None)
@inject
async def serve_spa(
    _full_path: str, config: FromDishka[WebDashSettings]
) -> FileResponse | JSONResponse:
    """Fallback for client-side routes not known to the server."""
    return _serve_index(config)
