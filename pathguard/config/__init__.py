"""Configuration management using environment variables."""

from .settings import (
    ConfigurationError,
    PathGuardSettings,
    get_settings,
    load_settings,
    reset_settings,
)

__all__ = [
    "ConfigurationError",
    "PathGuardSettings",
    "get_settings",
    "load_settings",
    "reset_settings",
]
