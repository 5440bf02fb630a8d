"""Celery application configuration."""

from __future__ import annotations

from celery import Celery

from .config import settings

app = Celery(
    "homework_feed_crawler",
    broker=settings.celery_broker_url,
    backend=settings.celery_result_backend,
)

app.conf.update(
    task_serializer="json",
    accept_content=["json"],
    result_serializer="json",
    timezone="UTC",
    enable_utc=True,
    task_track_started=True,
    task_routes={
        "homework_feed_crawler.tasks.refresh_calendar": {"queue": "refresh"},
    },
    worker_prefetch_multiplier=1,
    task_acks_late=True,
)
