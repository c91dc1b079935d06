"""
Runtime settings using Pydantic.

Settings are loaded from FLAPPY_* environment variables with .env file support.
Game tuning lives in constants.py.
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import DB_FILE


class Settings(BaseSettings):
    """Window, storage and audio settings."""

    model_config = SettingsConfigDict(
        env_prefix="FLAPPY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Window
    window_width: int = Field(default=1000, gt=0)
    window_height: int = Field(default=400, gt=0)
    resizable: bool = True
    fps: int = Field(default=60, gt=0)

    # Storage
    highscore_db: Path = Path(DB_FILE)

    # Audio
    muted: bool = False

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
