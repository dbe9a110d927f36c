"""Error handling utilities for WebDash services."""

from .http_request_error import (
    FALLBACK_STATUS_CODE,
    HttpRequestError,
    StructuredHttpFailure,
    UnknownHttpFailure,
    normalize_exchange_error,
)
from .payload_rendering import OPAQUE_OBJECT_TOKEN, render_payload

__all__ = [
    "FALLBACK_STATUS_CODE",
    "HttpRequestError",
    "OPAQUE_OBJECT_TOKEN",
    "StructuredHttpFailure",
    "UnknownHttpFailure",
    "normalize_exchange_error",
    "render_payload",
]
