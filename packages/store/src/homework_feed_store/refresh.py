"""Serve-cache-or-regenerate protocol for the calendar feed."""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Protocol

from homework_feed_core.errors import StoreError
from homework_feed_core.freshness import DEFAULT_SCHEDULE, RefreshSchedule
from homework_feed_core.schemas import (
    RefreshOutcome,
    RefreshStatus,
    RefreshTrigger,
)

if TYPE_CHECKING:
    from datetime import datetime

    from homework_feed_core.schemas import Generation, HomeworkItem

    from .artifact_store import ArtifactStore

logger = logging.getLogger(__name__)


class FeedProducer(Protocol):
    """Fetches homework and renders it as calendar text."""

    async def fetch_homework(self) -> list[HomeworkItem]: ...

    def serialize(self, items: list[HomeworkItem]) -> str: ...


class RefreshProtocol:
    """Decides between the cached generation and a fresh one."""

    def __init__(
        self,
        store: ArtifactStore,
        producer: FeedProducer,
        schedule: RefreshSchedule = DEFAULT_SCHEDULE,
    ) -> None:
        self._store = store
        self._producer = producer
        self._schedule = schedule

    @property
    def schedule(self) -> RefreshSchedule:
        return self._schedule

    def stale_reason(
        self,
        generation: Generation | None,
        now: datetime,
        deployment_marker: str,
    ) -> str | None:
        """Return why *generation* cannot be served, or ``None`` if it can."""
        if generation is None:
            return "no complete generation stored"
        if generation.deployment_marker != deployment_marker:
            return (
                f"deployment marker {generation.deployment_marker!r} "
                f"!= {deployment_marker!r}"
            )
        if not generation.artifact_text:
            return "stored artifact is empty"
        last_updated = generation.metadata.last_updated
        if not self._schedule.is_fresh(last_updated, now):
            threshold = self._schedule.last_scheduled_instant(now)
            return (
                f"last updated {last_updated.isoformat()} "
                f"before {threshold.isoformat()}"
            )
        return None

    async def _produce(self) -> tuple[str, int]:
        items = await self._producer.fetch_homework()
        return self._producer.serialize(items), len(items)

    async def get_or_refresh(self, now: datetime, deployment_marker: str) -> str:
        """Return the cached feed if still valid, otherwise regenerate it."""
        generation = await self._store.load()
        reason = self.stale_reason(generation, now, deployment_marker)
        if reason is None:
            logger.debug("Serving cached calendar")
            return generation.artifact_text  # type: ignore[union-attr]

        logger.info("Cache stale (%s), regenerating", reason)
        text, count = await self._produce()
        try:
            await self._store.save(text, count, now, deployment_marker)
        except StoreError:
            logger.exception("Could not persist regenerated calendar; serving it uncached")
        return text

    async def regenerate(self, now: datetime, deployment_marker: str) -> Generation:
        """Fetch, serialize and store unconditionally. Errors propagate."""
        text, count = await self._produce()
        return await self._store.save(text, count, now, deployment_marker)

    async def force_refresh(self, now: datetime, deployment_marker: str) -> str:
        """Unconditionally regenerate and return the new feed text."""
        generation = await self.regenerate(now, deployment_marker)
        return generation.artifact_text

    async def run_scheduled_refresh(
        self,
        now: datetime,
        deployment_marker: str,
        trigger: RefreshTrigger = RefreshTrigger.SCHEDULED,
    ) -> RefreshOutcome:
        """Force a refresh and report the result instead of raising.

        On failure the previously stored generation is left untouched and the
        read path keeps serving it.
        """
        start = time.monotonic()
        try:
            generation = await self.regenerate(now, deployment_marker)
        except Exception as exc:
            elapsed_ms = int((time.monotonic() - start) * 1000)
            logger.exception("%s refresh failed: %s", trigger.value, exc)
            return RefreshOutcome(
                status=RefreshStatus.FAILED,
                trigger=trigger,
                refreshed_at=now,
                duration_ms=elapsed_ms,
                error=str(exc) or type(exc).__name__,
            )
        elapsed_ms = int((time.monotonic() - start) * 1000)
        logger.info(
            "%s refresh stored %d items in %dms",
            trigger.value,
            generation.metadata.item_count,
            elapsed_ms,
        )
        return RefreshOutcome(
            status=RefreshStatus.SUCCESS,
            trigger=trigger,
            refreshed_at=generation.metadata.last_updated,
            item_count=generation.metadata.item_count,
            duration_ms=elapsed_ms,
        )
