"""Application configuration management using Pydantic Settings.

This module defines the `Settings` class, which loads the command line front
end's parameters from environment variables and a `.env` file. The mapping
engine itself is configured in code and never reads these settings.

The `get_settings` function provides a cached, singleton instance of the
configuration.
"""
from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict as _SettingsConfigDict

__all__ = ["Settings", "get_settings"]


class Settings(BaseSettings):
    """Defines the CLI configuration parameters.

    Values come from environment variables or a `.env` file in the working
    directory. Command line options override them per invocation.
    """

    model_config = _SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    AUTOMAPPER_LOG_LEVEL: str = Field(default="WARNING", description="Logging level")
    AUTOMAPPER_CONFIGURATOR: Optional[str] = Field(
        default=None,
        description=(
            "Default configurator in 'module:attribute' form. The attribute is a callable "
            "accepting the initialize() configuration object."
        ),
    )
    AUTOMAPPER_JSON_INDENT: int = Field(
        default=2, ge=0, description="Indentation for JSON output (0 = compact)"
    )

    @field_validator("AUTOMAPPER_LOG_LEVEL", mode="before")
    @classmethod
    def normalize_log_level(cls, v: Any) -> str:
        """Upper-case the level name and reject names `logging` does not know."""
        level = str(v).strip().upper() if v is not None else "WARNING"
        if not level:
            return "WARNING"
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level {v!r}")
        return level

    @field_validator("AUTOMAPPER_CONFIGURATOR", mode="before")
    @classmethod
    def validate_configurator(cls, v: Any) -> Optional[str]:
        """Trim whitespace, map blank to None and require 'module:attribute'."""
        if v is None:
            return None
        trimmed = str(v).strip()
        if not trimmed:
            return None
        module, sep, attribute = trimmed.partition(":")
        if not sep or not module or not attribute:
            raise ValueError(
                f"AUTOMAPPER_CONFIGURATOR must look like 'package.module:attribute', got {v!r}"
            )
        return trimmed


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached, singleton instance of the application settings."""
    return Settings()
