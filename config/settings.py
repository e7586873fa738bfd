"""Runtime settings loaded from the environment (``TG_*``) and ``.env``."""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Bot API endpoint, credentials and logging."""

    api_url: str = "https://api.telegram.org"
    bot_token: str = ""
    log_file: str = "tgtypes.log"
    log_level: str = Field("INFO")
    # Also log human-readable lines to stderr
    log_console: bool = False

    model_config = SettingsConfigDict(
        env_prefix="TG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("api_url")
    @classmethod
    def strip_trailing_slash(cls, v):
        return v.rstrip("/")

    @field_validator("log_level")
    @classmethod
    def normalize_level(cls, v):
        level = v.upper()
        if level not in ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"unknown log level: {v}")
        return level


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
