"""Runtime configuration based on environment variables."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import AnyHttpUrl, BaseModel, Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class RecommenderSettings(BaseModel):
    base_url: AnyHttpUrl = Field(
        default="http://127.0.0.1:5000",
        description="Root URL of the recommendation service.",
    )
    endpoint_path: str = Field(default="/api/recommend", min_length=1)
    max_results: int = Field(default=5, ge=1, le=50)
    request_timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        description="Per-request timeout in seconds; requests never time out when unset.",
    )
    max_sessions: int = Field(default=1000, ge=1)

    @field_validator("endpoint_path")
    @classmethod
    def _ensure_leading_slash(cls, value: str) -> str:
        value = value.strip()
        return value if value.startswith("/") else f"/{value}"


class ThrottleSettings(BaseModel):
    max_requests: int = Field(default=5, ge=0)
    interval_seconds: int = Field(default=10, ge=1)


class BotSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="MOVIEBOT_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
    )

    environment: Literal["dev", "staging", "prod"] = "dev"
    telegram_token: SecretStr
    telegram_proxy: str | None = None
    default_language: str = "en"
    admin_telegram_id: int | None = None
    log_level: str = "INFO"
    log_json: bool = True

    recommender: RecommenderSettings = Field(default_factory=RecommenderSettings)
    throttle: ThrottleSettings = Field(default_factory=ThrottleSettings)


@lru_cache
def get_settings() -> BotSettings:
    """Return cached settings instance."""

    return BotSettings()  # type: ignore[call-arg]


__all__ = [
    "BotSettings",
    "RecommenderSettings",
    "ThrottleSettings",
    "get_settings",
]
