"""Library settings via Pydantic BaseSettings."""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="SELECTORKIT_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # Logging (checked by selectorkit.config.logging.setup_logging)
    log_level: str = "INFO"
    log_json: bool = False

    # JSON bridge
    json_ensure_ascii: bool = False
    json_allow_nan: bool = False  # emit NaN/Infinity literals instead of null


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()
