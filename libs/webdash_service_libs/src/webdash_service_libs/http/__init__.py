"""Outbound HTTP client and transports for WebDash services."""

from .http_client import DEFAULT_BASE_URL, HttpClient
from .protocols import ExchangeResultProtocol, HttpClientProtocol, HttpTransportProtocol
from .transport import HttpxTransport, TransportFailure, TransportResponse

__all__ = [
    "DEFAULT_BASE_URL",
    "ExchangeResultProtocol",
    "HttpClient",
    "HttpClientProtocol",
    "HttpTransportProtocol",
    "HttpxTransport",
    "TransportFailure",
    "TransportResponse",
]
