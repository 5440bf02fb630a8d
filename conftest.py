"""Shared test doubles: in-memory key-value store and canned feed producer."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from homework_feed_core.schemas import HomeworkItem


class InMemoryKeyValueStore:
    """Dict-backed KeyValueStore with per-key failure injection."""

    def __init__(self) -> None:
        self.data: dict[str, str] = {}
        self.fail_get: set[str] = set()
        self.fail_put: set[str] = set()
        self.puts: list[str] = []

    async def get(self, key: str) -> str | None:
        if key in self.fail_get:
            msg = f"read failed for {key}"
            raise ConnectionError(msg)
        return self.data.get(key)

    async def put(self, key: str, value: str) -> None:
        if key in self.fail_put:
            msg = f"write failed for {key}"
            raise ConnectionError(msg)
        self.puts.append(key)
        self.data[key] = value


class StaticProducer:
    """FeedProducer returning a fixed homework list."""

    def __init__(
        self,
        items: list[HomeworkItem] | None = None,
        *,
        error: Exception | None = None,
    ) -> None:
        self.items = items or []
        self.error = error
        self.fetch_calls = 0

    async def fetch_homework(self) -> list[HomeworkItem]:
        self.fetch_calls += 1
        if self.error is not None:
            raise self.error
        return list(self.items)

    def serialize(self, items: list[HomeworkItem]) -> str:
        lines = ["BEGIN:VCALENDAR", "METHOD:PUBLISH"]
        lines += [f"UID:{item.id}" for item in items]
        lines.append("END:VCALENDAR")
        return "\r\n".join(lines)

    async def close(self) -> None:
        return None


def homework(
    hw_id: str = "hw-1",
    *,
    subject: str = "数学",
    title: str = "函数练习",
    due_at: datetime | None = None,
) -> HomeworkItem:
    return HomeworkItem(
        id=hw_id,
        subject=subject,
        title=title,
        created_at=datetime(2026, 2, 1, 1, 0, tzinfo=UTC),
        due_at=due_at or datetime(2026, 2, 10, 14, 0, tzinfo=UTC),
        type=1,
        state_name="未完成",
        state_code=0,
        type_name="练习",
    )


@pytest.fixture
def kv_store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def make_producer():
    """Factory fixture for StaticProducer instances."""

    def _make(
        items: list[HomeworkItem] | None = None,
        *,
        error: Exception | None = None,
    ) -> StaticProducer:
        return StaticProducer(items, error=error)

    return _make


@pytest.fixture
def make_item():
    """Factory fixture for HomeworkItem instances."""
    return homework
