"""httpx-backed transport for the outbound HTTP client."""

from __future__ import annotations

import json
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from typing import Any

import httpx

from common_core.http_contracts import Headers, HttpMethod, QueryParams
from webdash_service_libs.logging_utils import create_service_logger

logger = create_service_logger("webdash.http_transport")


@dataclass(frozen=True)
class TransportResponse:
    """Decoded result of one exchange."""

    status: int
    data: Any
    headers: dict[str, str] = field(default_factory=dict)


class TransportFailure(Exception):
    """Raised by the transport when an exchange does not succeed.

    ``response`` is set when the upstream answered with a non-2xx status and
    is None when no response was received at all.
    """

    def __init__(self, message: str, response: TransportResponse | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.response = response


class HttpxTransport:
    """Transport performing exchanges with httpx.

    When constructed with a shared ``httpx.AsyncClient`` every exchange goes
    through it and the caller owns its lifecycle. Without one, each exchange
    opens and closes its own short-lived client. Redirects are followed and
    only the final response decides success.
    """

    def __init__(self, http_client: httpx.AsyncClient | None = None) -> None:
        self._client = http_client

    @asynccontextmanager
    async def _session(self) -> AsyncIterator[httpx.AsyncClient]:
        if self._client is not None:
            yield self._client
            return
        async with httpx.AsyncClient() as client:
            yield client

    async def request(
        self,
        *,
        method: HttpMethod,
        headers: Headers,
        data: Any,
        url: str,
        params: QueryParams | None,
    ) -> TransportResponse:
        try:
            async with self._session() as client:
                response = await client.request(
                    method.value,
                    url,
                    headers=dict(headers),
                    params=dict(params) if params is not None else None,
                    follow_redirects=True,
                    **_encode_body(data),
                )
        except httpx.HTTPError as exc:
            raise TransportFailure(str(exc) or exc.__class__.__name__) from exc

        result = TransportResponse(
            status=response.status_code,
            data=_decode_body(response),
            headers=dict(response.headers),
        )
        if not response.is_success:
            logger.debug(
                "Upstream returned error status",
                extra={"url": url, "status_code": response.status_code},
            )
            raise TransportFailure(
                f"Request failed with status code {response.status_code}", result
            )
        return result


def _encode_body(data: Any) -> dict[str, Any]:
    if data is None:
        return {}
    if isinstance(data, (str, bytes)):
        return {"content": data}
    return {"json": data}


def _decode_body(response: httpx.Response) -> Any:
    if not response.content:
        return None
    content_type = response.headers.get("content-type", "")
    if "json" in content_type:
        try:
            return response.json()
        except json.JSONDecodeError:
            return response.text
    return response.text
