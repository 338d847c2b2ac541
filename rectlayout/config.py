"""
config.py — Runtime settings.

Uses pydantic-settings for type-safe environment variable handling.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LayoutSettings(BaseSettings):
    """Layout settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="RECTLAYOUT_",
        extra="ignore",
    )

    # Viewport used when the caller does not supply one
    viewport_width: float = Field(default=1280.0, ge=0.0)
    viewport_height: float = Field(default=720.0, ge=0.0)

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@lru_cache()
def get_settings() -> LayoutSettings:
    """Get cached settings instance."""
    return LayoutSettings()
