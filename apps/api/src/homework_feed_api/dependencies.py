"""FastAPI dependency injection providers."""

from __future__ import annotations

from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends

from homework_feed_core.freshness import RefreshSchedule
from homework_feed_crawler.zhixue.producer import ZhixueFeedProducer
from homework_feed_store.artifact_store import ArtifactStore
from homework_feed_store.kv import KeyValueStore
from homework_feed_store.redis_client import RedisKeyValueStore, get_redis_pool
from homework_feed_store.refresh import FeedProducer, RefreshProtocol

from .config import ApiSettings, settings
from .services.calendar_service import CalendarService, Clock, utcnow


def get_settings() -> ApiSettings:
    return settings


def get_clock() -> Clock:
    return utcnow


SettingsDep = Annotated[ApiSettings, Depends(get_settings)]


async def get_kv_store() -> KeyValueStore:
    """Key-value store over the shared Redis connection."""
    return RedisKeyValueStore(await get_redis_pool())


async def get_producer(app_settings: SettingsDep) -> AsyncGenerator[FeedProducer]:
    """Yield a Zhixue producer; raises ConfigurationError without a cookie."""
    producer = ZhixueFeedProducer(
        app_settings.zhixue_cookie,
        timeout=app_settings.zhixue_timeout,
    )
    try:
        yield producer
    finally:
        await producer.close()


async def get_calendar_service(
    app_settings: SettingsDep,
    producer: Annotated[FeedProducer, Depends(get_producer)],
    kv: Annotated[KeyValueStore, Depends(get_kv_store)],
    clock: Annotated[Clock, Depends(get_clock)],
) -> CalendarService:
    protocol = RefreshProtocol(
        ArtifactStore(kv),
        producer,
        RefreshSchedule(app_settings.refresh_hours),
    )
    return CalendarService(
        protocol,
        deployment_marker=app_settings.deployment_marker,
        clock=clock,
    )
