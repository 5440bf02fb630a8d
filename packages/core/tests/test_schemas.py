"""Cache metadata encoding and refresh outcome schemas."""

from __future__ import annotations

import json
from datetime import UTC, datetime

import pytest

from homework_feed_core.errors import ConfigurationError, CorruptMetadataError
from homework_feed_core.schemas import (
    CacheMetadata,
    RefreshOutcome,
    RefreshStatus,
    RefreshTrigger,
)


def test_metadata_serializes_with_camel_case_keys() -> None:
    meta = CacheMetadata(last_updated=datetime(2026, 2, 6, 11, 0, tzinfo=UTC), item_count=5)
    payload = json.loads(meta.to_json())
    assert set(payload) == {"lastUpdated", "itemCount"}
    assert payload["itemCount"] == 5
    assert datetime.fromisoformat(payload["lastUpdated"]) == datetime(2026, 2, 6, 11, 0, tzinfo=UTC)


def test_metadata_round_trips() -> None:
    meta = CacheMetadata(last_updated=datetime(2026, 2, 6, 11, 0, tzinfo=UTC), item_count=0)
    assert CacheMetadata.from_json(meta.to_json()) == meta


def test_legacy_homework_count_key_is_accepted() -> None:
    meta = CacheMetadata.from_json('{"lastUpdated": "2026-02-06T11:00:00.000Z", "homeworkCount": 5}')
    assert meta.item_count == 5
    assert meta.last_updated == datetime(2026, 2, 6, 11, 0, tzinfo=UTC)


def test_naive_timestamp_is_read_as_utc() -> None:
    meta = CacheMetadata.from_json('{"lastUpdated": "2026-02-06T11:00:00", "itemCount": 1}')
    assert meta.last_updated.tzinfo is not None
    assert meta.last_updated == datetime(2026, 2, 6, 11, 0, tzinfo=UTC)


@pytest.mark.parametrize(
    "raw",
    [
        "not json",
        "[]",
        "{}",
        '{"lastUpdated": "yesterday", "itemCount": 1}',
        '{"lastUpdated": "2026-02-06T11:00:00Z"}',
        '{"lastUpdated": "2026-02-06T11:00:00Z", "itemCount": -1}',
    ],
    ids=["not-json", "array", "empty", "bad-date", "no-count", "negative-count"],
)
def test_corrupt_metadata_raises(raw: str) -> None:
    with pytest.raises(CorruptMetadataError):
        CacheMetadata.from_json(raw)


def test_refresh_outcome_success_flag() -> None:
    now = datetime(2026, 2, 6, 22, 0, tzinfo=UTC)
    ok = RefreshOutcome(status=RefreshStatus.SUCCESS, trigger=RefreshTrigger.SCHEDULED, refreshed_at=now)
    failed = RefreshOutcome(
        status=RefreshStatus.FAILED,
        trigger=RefreshTrigger.SCHEDULED,
        refreshed_at=now,
        error="boom",
    )
    assert ok.success is True
    assert failed.success is False
    assert failed.model_dump(mode="json")["status"] == "failed"


def test_configuration_error_names_the_setting() -> None:
    exc = ConfigurationError("ZHIXUE_COOKIE", "Set it in .env.")
    assert exc.setting == "ZHIXUE_COOKIE"
    assert str(exc) == "ZHIXUE_COOKIE is not set. Set it in .env."
    assert exc.code == "configuration_error"
