"""
Configuration settings for the subtrack service.
Values come from environment variables and an optional ``.env`` file.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from subtrack import __version__


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Application
    APP_NAME: str = "subtrack"
    APP_VERSION: str = __version__
    DEBUG: bool = Field(default=False, validation_alias="DEBUG")

    # API Server
    API_HOST: str = Field(default="0.0.0.0", validation_alias="API_HOST")
    API_PORT: int = Field(default=8080, ge=1, le=65535, validation_alias="API_PORT")
    API_RELOAD: bool = Field(default=False, validation_alias="API_RELOAD")

    # Logging
    LOG_LEVEL: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    LOG_FORMAT: str = Field(
        default="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        validation_alias="LOG_FORMAT",
    )


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings (read once)."""
    return Settings()
