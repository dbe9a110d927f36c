"""
WebDash Service Libraries Package.

Shared infrastructure for WebDash services: the outbound HTTP client,
normalized error handling, structured logging and settings.
"""

from .http import HttpClient, HttpxTransport

__all__ = ["HttpClient", "HttpxTransport"]
