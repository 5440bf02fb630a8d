"""Crawler configuration via environment variables."""

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class CrawlerSettings(BaseSettings):
    """Settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="CRAWLER_",
        env_file=".env",
        extra="ignore",
        populate_by_name=True,
    )

    # Zhixue portal session cookie (copied from a logged-in browser)
    zhixue_cookie: str = Field("", validation_alias="ZHIXUE_COOKIE")

    # Timeouts (seconds)
    zhixue_timeout: int = 30

    # Redis
    redis_url: str = "redis://localhost:6379/0"

    # Celery
    celery_broker_url: str = "redis://localhost:6379/1"
    celery_result_backend: str = "redis://localhost:6379/2"

    # Bump to invalidate cached calendars after a logic change.
    # DEPLOYMENT_MARKER and REFRESH_HOURS are shared with the API and scheduler.
    deployment_marker: str = Field(
        "2026-02-06",
        validation_alias=AliasChoices("CRAWLER_DEPLOYMENT_MARKER", "DEPLOYMENT_MARKER"),
    )

    # Daily refresh hours (UTC)
    refresh_hours: list[int] = Field(
        [10, 22],
        validation_alias=AliasChoices("CRAWLER_REFRESH_HOURS", "REFRESH_HOURS"),
    )


settings = CrawlerSettings()
