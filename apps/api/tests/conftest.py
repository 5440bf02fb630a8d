"""TestClient wired to in-memory doubles through dependency overrides."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

import pytest
from fastapi.testclient import TestClient

from homework_feed_api.config import ApiSettings
from homework_feed_api.dependencies import get_clock, get_kv_store, get_producer, get_settings
from homework_feed_api.main import create_app
from homework_feed_core.schemas import CacheMetadata
from homework_feed_store.keys import DEFAULT_CACHE_KEYS

NOW = datetime(2026, 2, 5, 12, 0, tzinfo=UTC)


@dataclass
class FrozenClock:
    now: datetime = NOW

    def __call__(self) -> datetime:
        return self.now


@dataclass
class ApiHarness:
    client: TestClient
    kv: Any
    producer: Any
    clock: FrozenClock
    settings: ApiSettings
    overrides: dict = field(default_factory=dict)

    def seed(self, text: str, last_updated: datetime, marker: str | None = None) -> None:
        """Store a complete generation directly in the key-value store."""
        self.kv.data[DEFAULT_CACHE_KEYS.artifact] = text
        self.kv.data[DEFAULT_CACHE_KEYS.metadata] = CacheMetadata(
            last_updated=last_updated, item_count=1
        ).to_json()
        self.kv.data[DEFAULT_CACHE_KEYS.deployment] = marker or self.settings.deployment_marker


@pytest.fixture
def api(kv_store, make_producer, make_item) -> ApiHarness:
    app = create_app()
    app_settings = ApiSettings(zhixue_cookie="test-cookie")
    producer = make_producer([make_item("hw-1"), make_item("hw-2", subject="英语")])
    clock = FrozenClock()

    app.dependency_overrides[get_settings] = lambda: app_settings
    app.dependency_overrides[get_kv_store] = lambda: kv_store
    app.dependency_overrides[get_producer] = lambda: producer
    app.dependency_overrides[get_clock] = lambda: clock

    return ApiHarness(
        client=TestClient(app, raise_server_exceptions=False),
        kv=kv_store,
        producer=producer,
        clock=clock,
        settings=app_settings,
        overrides=app.dependency_overrides,
    )
