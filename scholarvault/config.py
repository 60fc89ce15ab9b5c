"""
Configuration management for ScholarVault
Uses pydantic-settings for environment variable validation
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Client settings loaded from SCHOLARVAULT_* environment variables"""

    model_config = SettingsConfigDict(
        env_prefix="SCHOLARVAULT_",
        env_file=".env",
        extra="ignore",
    )

    # API
    API_URL: str = "http://localhost:3000"
    TIMEOUT: float = 60.0
    MAX_RETRIES: int = 1  # total attempts; 1 means no retry

    # Session
    TOKEN_FILE: Path = Path.home() / ".scholarvault" / "auth_token"

    # Library
    MAX_TREE_DEPTH: int = 64

    # Logging
    LOG_LEVEL: str = "INFO"

    @field_validator("MAX_RETRIES", "MAX_TREE_DEPTH")
    @classmethod
    def must_be_positive(cls, value: int) -> int:
        if value < 1:
            raise ValueError("must be at least 1")
        return value

    @field_validator("LOG_LEVEL")
    @classmethod
    def known_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {value}")
        return level


@lru_cache
def get_settings() -> Settings:
    """Return the cached settings instance"""
    return Settings()


def configure_logging(level: Optional[str] = None) -> None:
    """Set up a basic log format for applications embedding the client"""
    logging.basicConfig(
        level=level or get_settings().LOG_LEVEL,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
