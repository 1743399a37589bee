"""Application configuration.

Loaded from ``ECOM_``-prefixed environment variables or a ``.env`` file.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="ECOM_",
        extra="ignore",
    )

    # Relative to the working directory
    database_url: str = "sqlite:///ecom.db"
    echo_sql: bool = False
    log_level: str = "INFO"


@lru_cache()
def get_settings() -> Settings:
    return Settings()
