"""Zhixue-backed feed producer."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from homework_feed_core.errors import ConfigurationError
from homework_feed_crawler.base import BaseFeedProducer
from homework_feed_crawler.config import settings
from homework_feed_crawler.ics.serializer import serialize_calendar

from .client import ZhixueClient
from .response_parser import parse_homework_response

if TYPE_CHECKING:
    from homework_feed_core.schemas import HomeworkItem

logger = logging.getLogger(__name__)

COOKIE_SETTING = "ZHIXUE_COOKIE"
_COOKIE_HINT = "Copy the session cookie of a logged-in zhixue.com browser into the environment."


class ZhixueFeedProducer(BaseFeedProducer):
    """Fetches the student's open homework and renders it as iCalendar."""

    def __init__(self, cookie: str | None = None, *, timeout: int | None = None) -> None:
        cookie = (cookie if cookie is not None else settings.zhixue_cookie).strip()
        if not cookie:
            raise ConfigurationError(COOKIE_SETTING, _COOKIE_HINT)
        self._client = ZhixueClient(
            cookie,
            timeout=timeout or settings.zhixue_timeout,
        )

    async def fetch_homework(self) -> list[HomeworkItem]:
        raw = await self._client.get_homework_list()
        return parse_homework_response(raw)

    def serialize(self, items: list[HomeworkItem]) -> str:
        return serialize_calendar(items)

    async def close(self) -> None:
        await self._client.close()
