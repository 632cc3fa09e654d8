"""Configuration management.

Uses pydantic-settings for type-safe configuration from environment variables.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings.

    All settings can be overridden via environment variables.
    Prefix: TABULAR_SCHEMA_
    """

    model_config = SettingsConfigDict(
        env_prefix="TABULAR_SCHEMA_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging
    log_level: str = Field(
        default="WARNING",
        description="Minimum level for structured log events",
    )
    log_format: Literal["console", "json"] = Field(
        default="console",
        description="'console' for development, 'json' for production/cloud",
    )

    # Compilation
    fail_on_problems: bool = Field(
        default=False,
        description="Treat non-fatal column problems as a CLI failure",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
