"""Celery tasks for calendar regeneration."""

from __future__ import annotations

import asyncio
import logging

from homework_feed_core.schemas import RefreshTrigger

from .celery_app import app
from .pipeline.refresh_job import run_refresh

logger = logging.getLogger(__name__)


@app.task(name="homework_feed_crawler.tasks.refresh_calendar")
def refresh_calendar(trigger: str = RefreshTrigger.SCHEDULED.value) -> dict:
    """Regenerate the cached calendar.

    Failures are logged and returned in the result; the task itself always
    succeeds so the worker and beat keep running. The next scheduled run is
    the retry.
    """
    outcome = asyncio.run(run_refresh(RefreshTrigger(trigger)))
    if not outcome.success:
        logger.warning("Calendar refresh failed: %s", outcome.error)
    return outcome.model_dump(mode="json")
