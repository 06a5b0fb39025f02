"""Application configuration management."""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Centralised gateway settings derived from environment variables."""

    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8080, ge=1, le=65535)

    recommender_base_url: str = Field(
        default="https://backendpy-production.up.railway.app",
        description="Base URL of the remote recommendation service.",
    )
    health_timeout_seconds: float = Field(default=5.0, gt=0)
    frontend_dist_dir: Path = Field(
        default=Path("dist"),
        description="Directory holding the built front-end bundle.",
    )

    log_level: str = Field(default="INFO")
    log_dir: Path = Field(default=Path("logs"))

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("recommender_base_url")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        """Keep joined upstream paths free of double slashes."""

        value = value.strip()
        if not value:
            raise ValueError("RECOMMENDER_BASE_URL must not be empty")
        return value.rstrip("/")

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        valid = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}
        upper = value.upper()
        if upper not in valid:
            raise ValueError(f"LOG_LEVEL must be one of {', '.join(sorted(valid))}")
        return upper


@lru_cache()
def get_settings() -> Settings:
    """Return cached settings instance so it can be reused across the app."""

    settings = Settings()
    settings.log_dir.mkdir(parents=True, exist_ok=True)
    return settings
