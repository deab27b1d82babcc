"""
Runtime Settings

Settings for the configuration builder itself, loaded from SIMPLE_CONFIG_*
environment variables.

Usage:
    from simple_config.config import get_settings

    settings = get_settings()
    mode = settings.environment

Version: 1.0.0
"""

import logging
from functools import lru_cache
from typing import Any, Dict, List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from ..constants import LOGGER_NAME, SETTINGS_ENV_PREFIX
from ..defaults import Defaults


class SimpleConfigSettings(BaseSettings):
    """
    Builder settings with automatic environment variable loading.

    Environment variables are loaded with the prefix SIMPLE_CONFIG_.
    Example: SIMPLE_CONFIG_ENVIRONMENT=production sets the default mode used
    by the "mode" environment adapter.
    """

    environment: str = Field(
        default=Defaults.ENVIRONMENT,
        description="Fallback mode for the global mode adapter"
    )
    default_adapter: Optional[str] = Field(
        default=Defaults.DEFAULT_ADAPTER,
        description="Adapter applied to roots configured without an explicit environment"
    )
    env_falsy_values: List[str] = Field(
        default_factory=lambda: list(Defaults.ENV_FALSY_VALUES),
        description="Environment variable values treated as unset by the env adapter"
    )
    log_level: str = Field(default=Defaults.LOG_LEVEL)

    model_config = {
        "env_prefix": SETTINGS_ENV_PREFIX,
        "case_sensitive": False,
        "extra": "ignore",
    }

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        return value.upper()

    @field_validator("env_falsy_values")
    @classmethod
    def _normalize_falsy_values(cls, value: List[str]) -> List[str]:
        return [item.strip().lower() for item in value]

    def to_dict(self) -> Dict[str, Any]:
        """Export settings to dictionary."""
        return self.model_dump()


@lru_cache()
def get_settings() -> SimpleConfigSettings:
    """
    Get cached settings instance.

    Call get_settings.cache_clear() after changing SIMPLE_CONFIG_* variables
    to pick up the new values.
    """
    return SimpleConfigSettings()


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Set the level of the package logger.

    Args:
        level: Logging level name; defaults to SIMPLE_CONFIG_LOG_LEVEL

    Returns:
        The package logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel((level or get_settings().log_level).upper())
    return logger
