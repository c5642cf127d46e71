"""Runtime configuration for sterling_change.

Settings are read from environment variables with the `STERLING_CHANGE_` prefix
(e.g. `STERLING_CHANGE_MAX_TARGET=50000`).
"""
from __future__ import annotations

import logging

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ChangeSettings(BaseSettings):
    """sterling_change configuration"""

    model_config = SettingsConfigDict(env_prefix="STERLING_CHANGE_", env_file=".env", case_sensitive=False, extra="ignore")

    # Code of the DenominationSystem used when none is passed explicitly
    default_system: str = "LSD"

    # Largest accepted change target, in halfpence (bounds the size of the DP tables)
    max_target: int = 1_000_000

    # Level applied to the `sterling_change` logger by `configure_logging`
    log_level: str = "WARNING"

    @field_validator("max_target")
    @classmethod
    def _check_max_target(cls, value: int) -> int:
        if value < 1:
            raise ValueError(f"$max_target must be >= 1, but provided value is: {value}")
        return value

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper().strip()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"$log_level must be a logging level name, but provided value is: '{value}'")
        return level


# Global settings instance
settings = ChangeSettings()


def get_settings() -> ChangeSettings:
    """Get global settings instance"""
    return settings


def reload_settings() -> ChangeSettings:
    """Reload settings from environment"""
    global settings
    settings = ChangeSettings()
    return settings


def configure_logging(config: ChangeSettings | None = None) -> None:
    """Apply $config.log_level to the package logger.

    The root logger is left untouched; applications decide on handlers themselves.
    """
    config = config or get_settings()
    logging.getLogger("sterling_change").setLevel(config.log_level)
