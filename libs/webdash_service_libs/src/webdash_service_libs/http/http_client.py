"""
Outbound HTTP client.

Turns an HttpRequest into exactly one transport exchange. Success returns
the exchange payload unchanged; every failure is raised as one normalized
HttpRequestError (see webdash_service_libs.error_handling).
"""

from __future__ import annotations

from typing import Any, TypeVar

from common_core.http_contracts import HttpRequest
from webdash_service_libs.error_handling.http_request_error import normalize_exchange_error
from webdash_service_libs.http.protocols import HttpTransportProtocol
from webdash_service_libs.http.transport import HttpxTransport
from webdash_service_libs.logging_utils import create_service_logger

logger = create_service_logger("webdash.http_client")

DEFAULT_BASE_URL = "http://localhost:3000"

TResponse = TypeVar("TResponse")
TBody = TypeVar("TBody")


class HttpClient:
    """Stateless client bound to one base URL and one transport."""

    def __init__(self, base_url: str, transport: HttpTransportProtocol) -> None:
        self._base_url = base_url
        self._transport = transport

    @classmethod
    def create(
        cls,
        base_url: str | None = None,
        transport: HttpTransportProtocol | None = None,
    ) -> HttpClient:
        """Build a client. Performs no I/O.

        Args:
            base_url: Prefix prepended verbatim to every endpoint
                (defaults to DEFAULT_BASE_URL)
            transport: Exchange implementation (defaults to HttpxTransport)
        """
        return cls(
            base_url if base_url is not None else DEFAULT_BASE_URL,
            transport if transport is not None else HttpxTransport(),
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def transport(self) -> HttpTransportProtocol:
        return self._transport

    async def send_request(
        self,
        request: HttpRequest[TBody],
        response_type: type[TResponse] | None = None,
    ) -> TResponse:
        """
        Send one request and return the response payload.

        ``response_type`` only documents the expected payload shape at the
        call site; the payload is returned as received.

        Raises:
            StructuredHttpFailure: The upstream answered with an error status
            UnknownHttpFailure: The exchange failed without a response
        """
        url = self._base_url + request.endpoint

        try:
            result = await self._transport.request(
                method=request.method,
                headers=request.headers,
                data=request.body,
                url=url,
                params=request.params,
            )
            payload: Any = result.data
        except Exception as exc:
            error = normalize_exchange_error(exc)
            logger.warning(
                error.message,
                extra={
                    "method": request.method.value,
                    "url": url,
                    "status_code": error.status_code,
                    "error_type": error.__class__.__name__,
                },
            )
            raise error from exc

        return payload
