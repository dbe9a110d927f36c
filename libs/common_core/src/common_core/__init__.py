"""
WebDash Common Core Package.

Shared contracts and enums used by the WebDash service libraries and
services.
"""

from .config_enums import Environment, ThemeMode
from .http_contracts import Headers, HttpMethod, HttpRequest, QueryParams

__all__ = [
    "Environment",
    "Headers",
    "HttpMethod",
    "HttpRequest",
    "QueryParams",
    "ThemeMode",
]
