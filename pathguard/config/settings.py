"""Runtime settings for the pathguard command-line front end.

Settings are read with Pydantic Settings from ``PATHGUARD_*`` environment
variables and an optional ``.env`` file. The core path functions never read
them; only the CLI and logging setup do.
"""
from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Optional

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigurationError(Exception):
    """Raised when configuration validation fails."""
    pass


class PathGuardSettings(BaseSettings):
    """Environment-driven settings.

    Environment variables:
        PATHGUARD_LOG_LEVEL: Package log level (default INFO)
        PATHGUARD_LOG_DIR: Directory for pathguard.log; no file logging if unset
        PATHGUARD_STRICT_TARGET: Validate the join target as untrusted input
        PATHGUARD_JSON_OUTPUT: Emit JSON lines instead of Rich tables
    """

    model_config = SettingsConfigDict(
        env_prefix="PATHGUARD_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = "INFO"
    log_dir: Optional[Path] = None
    strict_target: bool = False
    json_output: bool = False

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: object) -> str:
        """Accept log levels case-insensitively."""
        level = str(v).strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got '{v}'")
        return level

    @field_validator("log_dir", mode="before")
    @classmethod
    def empty_log_dir_is_unset(cls, v: object) -> object:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @property
    def log_level_value(self) -> int:
        """Numeric logging level."""
        return getattr(logging, self.log_level)


_settings: Optional[PathGuardSettings] = None
_settings_lock = threading.Lock()


def load_settings(env_file: Optional[Path] = None, **overrides) -> PathGuardSettings:
    """Build settings from the environment, an optional env file and overrides.

    Args:
        env_file: Alternative ``.env`` file to read
        **overrides: Explicit values taking precedence over the environment

    Returns:
        Validated settings

    Raises:
        ConfigurationError: If any value fails validation
    """
    kwargs = dict(overrides)
    if env_file is not None:
        kwargs["_env_file"] = str(env_file)
    try:
        return PathGuardSettings(**kwargs)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid pathguard configuration: {e}") from e


def get_settings() -> PathGuardSettings:
    """Return the process-wide settings, loading them on first use."""
    global _settings
    if _settings is None:
        with _settings_lock:
            if _settings is None:
                _settings = load_settings()
    return _settings


def reset_settings() -> None:
    """Forget cached settings so the next ``get_settings`` reloads them."""
    global _settings
    with _settings_lock:
        _settings = None
