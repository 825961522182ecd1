"""
Application settings using Pydantic.
"""
from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Credential cache
    credential_backend: Literal["local", "memory"] = "local"
    creds_cache_dir: str = "/nack-accounts/creds/"
    nkey_cache_dir: str = "/nack-accounts/keys/"
    cache_dir_mode: int = 0o666
    cache_file_mode: int = 0o666

    # Reject sources whose prefix is neither the auth kind nor "base64"
    strict_source_prefix: bool = True

    # Logging
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
