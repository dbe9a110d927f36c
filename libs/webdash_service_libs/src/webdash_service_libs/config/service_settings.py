"""Base settings class shared by WebDash services."""

from __future__ import annotations

from common_core.config_enums import Environment
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ServiceSettings(BaseSettings):
    """Environment-aware base settings.

    Services subclass this and override ``model_config`` with their own
    env prefix.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    SERVICE_NAME: str = "webdash-service"

    ENVIRONMENT: Environment = Field(
        default=Environment.DEVELOPMENT,
        validation_alias="ENVIRONMENT",
        description="Runtime environment for the service",
    )

    def is_development(self) -> bool:
        return self.ENVIRONMENT in (Environment.DEVELOPMENT, Environment.TESTING)

    def is_production(self) -> bool:
        return self.ENVIRONMENT == Environment.PRODUCTION
