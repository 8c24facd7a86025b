"""
sqlstmt Core Configuration
Environment-driven settings for logging and builder behaviour.
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    sqlstmt Configuration Settings
    """

    # Application
    APP_NAME: str = "sqlstmt"

    # Logging
    LOG_LEVEL: str = "WARNING"
    LOG_JSON_FILE: Optional[Path] = None
    LOG_RICH_CONSOLE: bool = True

    # Builder
    STRICT_STATEMENT_KIND: bool = False

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def normalize_log_level(cls, v: Any) -> str:
        level = str(v).strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

    model_config = SettingsConfigDict(
        case_sensitive=True,
        env_prefix="SQLSTMT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance
    """
    return Settings()


# Global settings instance
settings = get_settings()
