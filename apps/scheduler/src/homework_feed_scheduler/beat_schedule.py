"""Celery Beat schedule builder."""

from __future__ import annotations

from collections.abc import Iterable

from celery.schedules import crontab

from homework_feed_core.freshness import RefreshSchedule

from .config import scheduler_settings

REFRESH_TASK = "homework_feed_crawler.tasks.refresh_calendar"


def build_beat_schedule(hours: Iterable[int] | None = None) -> dict:
    """One crontab entry per refresh hour, on the hour, UTC."""
    schedule = RefreshSchedule(
        scheduler_settings.refresh_hours if hours is None else hours
    )
    return {
        f"refresh-calendar-{hour:02d}00": {
            "task": REFRESH_TASK,
            "schedule": crontab(hour=hour, minute=0),
            "args": ["scheduled"],
            "options": {"queue": "refresh"},
        }
        for hour in schedule.hours
    }
