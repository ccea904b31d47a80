"""
Application settings - pydantic-settings configuration.

This module defines application configuration using pydantic-settings
for environment variable loading with validation and defaults. The
defaults are the fixed values of the botvs rsync protocol, so nothing
needs to be set for normal use.
"""

from functools import lru_cache
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support (BOTVS_ prefix)."""

    model_config = SettingsConfigDict(
        env_prefix="BOTVS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # botvs rsync endpoint
    endpoint_url: str = "https://www.botvs.com/rsync"
    protocol_version: str = "0.0.1"
    client_name: str = "botvs-sync python client"

    # HTTP client
    request_timeout: float = 5.0  # Seconds, same as the httpx default

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
