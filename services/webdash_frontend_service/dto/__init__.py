"""WebDash Frontend Service DTO module."""

from services.webdash_frontend_service.dto.ui_v1 import UIConfigResponseV1

__all__ = ["UIConfigResponseV1"]
