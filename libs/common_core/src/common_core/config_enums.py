"""
common_core.config_enums - Enums related to service configuration.
"""

from __future__ import annotations

from enum import Enum


class Environment(str, Enum):
    """Defines application environments."""

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TESTING = "testing"


class ThemeMode(str, Enum):
    """Color themes understood by the frontend theme switcher."""

    DARK = "dark"
    LIGHT = "light"
    SYSTEM = "system"
