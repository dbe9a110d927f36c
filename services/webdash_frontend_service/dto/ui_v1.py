"""UI bootstrap DTOs served to the single page application."""

from __future__ import annotations

from common_core.config_enums import ThemeMode
from pydantic import BaseModel, Field


class UIConfigResponseV1(BaseModel):
    """Theme defaults the frontend applies before the user picks a theme."""

    default_theme: ThemeMode
    theme_storage_key: str = Field(description="Browser storage key for the chosen theme")
