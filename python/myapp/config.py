"""
Configuration management using Pydantic Settings.
Loads environment variables and provides type-safe configuration.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from myapp._version import __version__


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        # PORT="" behaves like an unset PORT
        env_ignore_empty=True,
        frozen=True,
    )

    # Server
    host: str = "0.0.0.0"
    port: int = 8080

    # Build version, APP_VERSION overrides the value baked in at build time
    app_version: str = __version__

    # Logging
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Constants

APP_NAME = "My Go App"
INFO_MESSAGE = "Hello from My Go App!"
HEALTH_STATUS_OK = "OK"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LISTEN_BACKLOG = 2048
