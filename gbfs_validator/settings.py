"""Application settings using pydantic-settings.

Loads configuration from GBFS_VALIDATOR_* environment variables with
.env file support.
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Validator configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="GBFS_VALIDATOR_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_ignore_empty=True,
        extra="ignore",
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Level for the gbfs_validator loggers",
    )

    # Schemas
    schema_dir: Path | None = Field(
        default=None,
        description="Directory holding v<version>/<file>.json schemas (empty = bundled schemas)",
    )
    default_file_name: str = Field(
        default="gbfs",
        min_length=1,
        description="Feed file validated when validate_file() is called without file_name",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Uses lru_cache to ensure settings are loaded once and reused.
    """
    return Settings()
