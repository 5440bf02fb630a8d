"""API configuration via environment variables."""

from __future__ import annotations

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ApiSettings(BaseSettings):
    """Application settings loaded from environment / .env file."""

    redis_url: str = "redis://localhost:6379/0"
    cors_origins: list[str] = ["*"]

    # Zhixue portal session cookie, shared with the crawler worker
    zhixue_cookie: str = Field("", validation_alias="ZHIXUE_COOKIE")
    zhixue_timeout: int = 30

    # Cache validity
    deployment_marker: str = Field(
        "2026-02-06",
        validation_alias=AliasChoices("API_DEPLOYMENT_MARKER", "DEPLOYMENT_MARKER"),
    )
    refresh_hours: list[int] = Field(
        [10, 22],
        validation_alias=AliasChoices("API_REFRESH_HOURS", "REFRESH_HOURS"),
    )

    model_config = SettingsConfigDict(
        env_prefix="API_", env_file=".env", extra="ignore", populate_by_name=True
    )


settings = ApiSettings()
