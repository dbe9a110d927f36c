"""Configuration for WebDash Frontend Service.

Uses Pydantic settings for environment-based configuration.
"""

from __future__ import annotations

from pathlib import Path

from common_core.config_enums import ThemeMode
from pydantic import Field
from pydantic_settings import SettingsConfigDict
from webdash_service_libs.config import ServiceSettings


class WebDashSettings(ServiceSettings):
    """Configuration settings for WebDash Frontend Service."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="WEBDASH_FRONTEND_SERVICE_",
        case_sensitive=False,
        extra="ignore",
    )

    # Service identity
    SERVICE_NAME: str = "webdash-frontend-service"

    # HTTP server configuration
    HOST: str = Field(default="0.0.0.0", description="HTTP server host")
    PORT: int = Field(default=4173, description="HTTP server port")

    # Static file serving
    STATIC_DIR: Path = Field(
        default=Path("frontend/dist"),
        description="Directory containing the built single page application",
    )

    # Logging
    LOG_LEVEL: str = Field(default="INFO", description="Logging level")

    # CORS configuration for frontend development
    CORS_ORIGINS: list[str] = Field(
        default=["http://localhost:5173", "http://localhost:4173"],
        description="Allowed CORS origins for the Vite dev server",
    )
    CORS_ALLOW_CREDENTIALS: bool = Field(
        default=True, description="Allow credentials in CORS requests"
    )
    CORS_ALLOW_METHODS: list[str] = Field(
        default=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        description="Allowed HTTP methods for CORS",
    )
    CORS_ALLOW_HEADERS: list[str] = Field(
        default=["*"], description="Allowed headers for CORS requests"
    )

    # Upstream API used by the outbound HTTP client
    API_BASE_URL: str = Field(
        default="http://localhost:3000",
        description="Base URL prepended to every outbound request endpoint",
    )
    DASHBOARD_ENDPOINT: str = Field(
        default="/dashboard",
        description="Upstream endpoint backing the dashboard page",
    )

    # HTTP client configuration
    HTTP_CLIENT_TIMEOUT_SECONDS: float = Field(
        default=30.0,
        description="HTTP client request timeout in seconds",
    )
    HTTP_CLIENT_CONNECT_TIMEOUT_SECONDS: float = Field(
        default=10.0,
        description="HTTP client connection timeout in seconds",
    )

    # Theming
    DEFAULT_THEME: ThemeMode = Field(
        default=ThemeMode.DARK, description="Theme applied before the user picks one"
    )
    THEME_STORAGE_KEY: str = Field(
        default="vite-ui-theme",
        description="Browser storage key holding the user's theme choice",
    )


# Global settings instance
settings = WebDashSettings()
