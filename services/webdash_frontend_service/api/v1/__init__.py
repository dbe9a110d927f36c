"""WebDash Frontend Service API v1 module.

Contains v1 API routes backing the dashboard and login pages.
"""

from services.webdash_frontend_service.api.v1.dashboard_routes import router

__all__ = ["router"]
