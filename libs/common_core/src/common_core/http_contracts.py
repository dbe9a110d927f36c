"""
common_core.http_contracts - Request contracts for outbound HTTP calls.

Pure data shapes. Nothing here validates its input: the generic parameters
only let call sites state which body they send and which payload they
expect back.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

TBody = TypeVar("TBody")

Headers = Mapping[str, str]
QueryScalar = str | int | float | bool | None
QueryParams = Mapping[str, QueryScalar | Sequence[QueryScalar]]


class HttpMethod(str, Enum):
    """HTTP verbs accepted by the outbound client."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"


@dataclass(frozen=True)
class HttpRequest(Generic[TBody]):
    """
    Description of a single outbound exchange.

    Attributes:
        endpoint: Path fragment appended verbatim to the client's base URL
        method: HTTP verb
        body: Request body, or None when the request has no body
        headers: Header name to value mapping
        params: Query parameters, or None when the request has none. A
            sequence value sends the key once per item
    """

    endpoint: str
    method: HttpMethod
    body: TBody | None
    headers: Headers
    params: QueryParams | None = None
