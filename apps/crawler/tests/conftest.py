"""Fixtures for Zhixue client and parser tests."""

from __future__ import annotations

from typing import Any

import pytest

# 2026-02-01 09:00 and 2026-02-10 22:00 Beijing time, in epoch ms
CREATE_MS = 1769907600000
END_MS = 1770732000000


def raw_homework(
    hw_id: str | int = "a1b2c3",
    *,
    subject: str = "数学",
    title: str = "函数练习",
    create_ms: int = CREATE_MS,
    end_ms: int = END_MS,
    state: dict[str, Any] | None = None,
    type_dto: dict[str, Any] | None = None,
) -> dict[str, Any]:
    return {
        "hwId": hw_id,
        "subjectName": subject,
        "hwTitle": title,
        "createTime": create_ms,
        "endTime": end_ms,
        "hwType": 105,
        "homeWorkState": state if state is not None else {"stateName": "未完成", "stateCode": 0},
        "homeWorkTypeDTO": type_dto if type_dto is not None else {"typeName": "练习"},
    }


@pytest.fixture
def make_raw_homework():
    return raw_homework


@pytest.fixture
def homework_response() -> dict[str, Any]:
    return {
        "code": 200,
        "info": "success",
        "result": {
            "list": [
                raw_homework("hw-1"),
                raw_homework("hw-2", subject="英语", title="Unit 3 听力"),
            ]
        },
    }


class FakeRedis:
    """Just enough of ``redis.asyncio.Redis`` for the refresh job and CLI."""

    def __init__(self) -> None:
        self.values: dict[str, str] = {}
        self.closed = False

    async def get(self, key: str) -> str | None:
        return self.values.get(key)

    async def set(self, key: str, value: str) -> bool:
        self.values[key] = value
        return True

    async def aclose(self) -> None:
        self.closed = True


@pytest.fixture
def fake_redis(monkeypatch: pytest.MonkeyPatch) -> FakeRedis:
    """Route every ``redis.asyncio.from_url`` call to one in-memory client."""
    import redis.asyncio

    fake = FakeRedis()
    monkeypatch.setattr(redis.asyncio, "from_url", lambda *a, **kw: fake)
    return fake
