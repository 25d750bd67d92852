"""Application configuration settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE, env_file_encoding=ENV_FILE_ENCODING, extra="ignore"
    )

    platform_api_base_url: str = Field(
        description="Base URL of the remote loyalty platform superadmin API",
        min_length=1,
    )
    platform_api_token: str | None = Field(
        default=None,
        description="Bearer token used when the caller does not forward its own",
    )
    platform_request_timeout_seconds: float = Field(
        default=30.0,
        description="Timeout applied to every request issued to the platform",
        gt=0,
    )
    max_dispatch_batch_size: int | None = Field(
        default=None,
        description="Largest token list accepted for a single dispatch; unset means unlimited",
        gt=0,
    )
    compose_session_idle_seconds: float = Field(
        default=1800.0,
        description="Seconds after which an untouched compose session is discarded",
        gt=0,
    )
    cors_allowed_origins: str = Field(
        default="http://localhost:5173",
        description="Comma separated list of origins allowed to call the API",
    )
    log_level: str = Field(default="INFO", description="Level for the package logger")

    @field_validator("platform_api_base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        return value.strip().upper() or "INFO"

    def cors_origins(self) -> list[str]:
        """Return the configured CORS origins as a list."""

        return [
            origin.strip()
            for origin in self.cors_allowed_origins.split(",")
            if origin.strip()
        ]


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = ["Settings", "get_settings", "reset_settings_cache"]
