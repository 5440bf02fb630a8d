"""Wire the producer and the Redis-backed store into one refresh run."""

from __future__ import annotations

import logging
from datetime import UTC, datetime

import redis.asyncio as redis

from homework_feed_core.errors import ConfigurationError
from homework_feed_core.freshness import RefreshSchedule
from homework_feed_core.schemas import RefreshOutcome, RefreshStatus, RefreshTrigger
from homework_feed_crawler.config import settings
from homework_feed_crawler.zhixue.producer import ZhixueFeedProducer
from homework_feed_store.artifact_store import ArtifactStore
from homework_feed_store.redis_client import RedisKeyValueStore
from homework_feed_store.refresh import RefreshProtocol

logger = logging.getLogger(__name__)


def _failed(trigger: RefreshTrigger, now: datetime, exc: Exception) -> RefreshOutcome:
    return RefreshOutcome(
        status=RefreshStatus.FAILED,
        trigger=trigger,
        refreshed_at=now,
        error=str(exc) or type(exc).__name__,
    )


async def run_refresh(
    trigger: RefreshTrigger = RefreshTrigger.SCHEDULED,
    *,
    now: datetime | None = None,
    redis_url: str | None = None,
    cookie: str | None = None,
) -> RefreshOutcome:
    """Unconditionally regenerate the stored calendar.

    Never raises: configuration problems, portal failures and store errors
    all come back as a failed :class:`RefreshOutcome`.
    """
    now = now or datetime.now(tz=UTC)
    try:
        producer = ZhixueFeedProducer(cookie)
    except ConfigurationError as exc:
        logger.error("%s refresh skipped: %s", trigger.value, exc)
        return _failed(trigger, now, exc)

    client: redis.Redis | None = None
    try:
        schedule = RefreshSchedule(settings.refresh_hours)
        client = redis.from_url(redis_url or settings.redis_url, decode_responses=True)
        protocol = RefreshProtocol(
            ArtifactStore(RedisKeyValueStore(client)),
            producer,
            schedule,
        )
        return await protocol.run_scheduled_refresh(
            now, settings.deployment_marker, trigger
        )
    except Exception as exc:
        logger.exception("%s refresh could not start: %s", trigger.value, exc)
        return _failed(trigger, now, exc)
    finally:
        await producer.close()
        if client is not None:
            await client.aclose()
