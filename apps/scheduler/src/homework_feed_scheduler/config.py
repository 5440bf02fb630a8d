"""Scheduler configuration via environment variables."""

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class SchedulerSettings(BaseSettings):
    """Settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_prefix="SCHEDULER_", populate_by_name=True)

    # Celery
    celery_broker_url: str = "redis://localhost:6379/1"
    celery_result_backend: str = "redis://localhost:6379/2"

    # Daily refresh hours (UTC), shared with the API and crawler via REFRESH_HOURS
    refresh_hours: list[int] = Field(
        [10, 22],
        validation_alias=AliasChoices("SCHEDULER_REFRESH_HOURS", "REFRESH_HOURS"),
    )


scheduler_settings = SchedulerSettings()
