"""
Protocol definitions for outbound HTTP.

HttpTransportProtocol is the seam the client talks through: one coroutine
performing one exchange. Implementations signal failure by raising; an
exception carrying a ``response`` with ``status`` and ``data`` is treated as
an upstream error response, anything else as a failure without response.
"""

from __future__ import annotations

from typing import Any, Protocol, TypeVar

from common_core.http_contracts import Headers, HttpMethod, HttpRequest, QueryParams

TResponse = TypeVar("TResponse")
TBody = TypeVar("TBody")

__all__ = [
    "ExchangeResultProtocol",
    "HttpClientProtocol",
    "HttpTransportProtocol",
]


class ExchangeResultProtocol(Protocol):
    """Minimal shape of a successful exchange result."""

    @property
    def data(self) -> Any: ...


class HttpTransportProtocol(Protocol):
    """Performs one HTTP exchange."""

    async def request(
        self,
        *,
        method: HttpMethod,
        headers: Headers,
        data: Any,
        url: str,
        params: QueryParams | None,
    ) -> ExchangeResultProtocol:
        """
        Send one request and wait for its result.

        Args:
            method: HTTP verb
            headers: Request headers, sent as given
            data: Request body, None for no body
            url: Absolute target URL
            params: Query parameters, None for none

        Returns:
            Result exposing the decoded response body as ``data``
        """
        ...


class HttpClientProtocol(Protocol):
    """Protocol for the outbound HTTP client used by routes and pages."""

    async def send_request(
        self,
        request: HttpRequest[TBody],
        response_type: type[TResponse] | None = None,
    ) -> TResponse:
        """Send ``request`` and return the response payload unchanged."""
        ...
