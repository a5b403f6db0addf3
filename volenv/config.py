"""Runtime configuration — env-driven via pydantic-settings.

Reads from a .env file and VOLENV_* environment variables.  The registry
location itself is fixed and deliberately not configurable.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from volenv.models.notification import DEFAULT_TIMEOUT_MS


class LogLevel(str, Enum):
    """Accepted logging levels for VOLENV_LOG_LEVEL and ``--log-level``."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class VolenvConfig(BaseSettings):
    """volenv configuration with environment variable overrides.

    Examples
    --------
    Override via environment::

        export VOLENV_LOG_LEVEL=DEBUG
        export VOLENV_BROADCAST_ENABLED=false
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="VOLENV_",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: LogLevel = LogLevel.WARNING

    # WM_SETTINGCHANGE broadcast after a successful publish
    broadcast_enabled: bool = True
    broadcast_timeout_ms: int = Field(default=DEFAULT_TIMEOUT_MS, gt=0)

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().upper()
        return value


# Module-level singleton — import as `from volenv.config import config`
config = VolenvConfig()
