"""
Normalized errors raised by the outbound HTTP client.

Every failed exchange surfaces as exactly one HttpRequestError subclass:

- StructuredHttpFailure: the upstream answered with a status and a body
- UnknownHttpFailure: no response reached the client (connection errors,
  unexpected exceptions)

The message format is derived from the typed fields so callers that only
read ``str(error)`` see the same single-line text either way.
"""

from __future__ import annotations

from typing import Any

from webdash_service_libs.error_handling.payload_rendering import render_payload

FALLBACK_STATUS_CODE = 500


class HttpRequestError(Exception):
    """Base class for normalized outbound request failures."""

    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def __str__(self) -> str:
        return self.message


class StructuredHttpFailure(HttpRequestError):
    """The upstream responded with an error status and a body."""

    def __init__(self, status_code: int, payload: Any) -> None:
        super().__init__(
            f"Request failed with status {status_code}: {render_payload(payload)}",
            status_code,
        )
        self.payload = payload


class UnknownHttpFailure(HttpRequestError):
    """The exchange failed without a response."""

    def __init__(self, description: str) -> None:
        super().__init__(
            f"Request failed with status {FALLBACK_STATUS_CODE}: {description}",
            FALLBACK_STATUS_CODE,
        )
        self.description = description


def normalize_exchange_error(exc: BaseException) -> HttpRequestError:
    """
    Classify a failed exchange into one of the two normalized error kinds.

    An exception counts as structured when it carries a ``response`` that
    exposes both ``status`` and ``data``. Anything else is unknown and is
    described by its ``message`` attribute, or by ``str(exc)`` when it has
    none.
    """
    response = getattr(exc, "response", None)
    if response is not None and hasattr(response, "status") and hasattr(response, "data"):
        return StructuredHttpFailure(response.status, response.data)

    message = getattr(exc, "message", None)
    if not isinstance(message, str):
        message = str(exc)
    return UnknownHttpFailure(message)
