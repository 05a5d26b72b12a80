"""Configuration management using Pydantic settings.

Only the command-line front end is configurable. The sanitization rules
themselves are fixed and never read from the environment.
"""

import logging
import os
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """CLI configuration loaded from environment variables or ``.env``."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Separator used by `pathologize path` when --sep is not given
    path_separator: str = Field(
        default=os.sep, validation_alias="PATHOLOGIZE_PATH_SEPARATOR"
    )

    log_level: str = Field(default="WARNING", validation_alias="PATHOLOGIZE_LOG_LEVEL")

    @field_validator("path_separator")
    @classmethod
    def _separator_not_empty(cls, value: str) -> str:
        return value or os.sep

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value!r}")
        return level


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
