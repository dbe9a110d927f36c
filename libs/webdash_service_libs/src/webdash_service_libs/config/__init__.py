"""Configuration utilities for WebDash services."""

from .service_settings import ServiceSettings

__all__ = ["ServiceSettings"]
