"""Calendar read path: cached feed or on-demand regeneration."""

from __future__ import annotations

import hashlib
import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from homework_feed_store.refresh import RefreshProtocol

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utcnow() -> datetime:
    return datetime.now(tz=UTC)


def compute_etag(text: str) -> str:
    """Quoted, content-derived entity tag (MD5 hex of the UTF-8 body)."""
    digest = hashlib.md5(text.encode("utf-8")).hexdigest()
    return f'"{digest}"'


def etag_matches(if_none_match: str | None, etag: str) -> bool:
    """Evaluate an ``If-None-Match`` header against *etag* (weak comparison)."""
    if not if_none_match:
        return False
    candidates = [c.strip() for c in if_none_match.split(",")]
    if "*" in candidates:
        return True
    return any(c.removeprefix("W/") == etag for c in candidates)


@dataclass(frozen=True, slots=True)
class CalendarFeed:
    """Feed body plus the values needed for response headers."""

    text: str
    etag: str
    next_refresh: datetime


class CalendarService:
    """Serves the calendar through the refresh protocol."""

    def __init__(
        self,
        protocol: RefreshProtocol,
        *,
        deployment_marker: str,
        clock: Clock = utcnow,
    ) -> None:
        self._protocol = protocol
        self._deployment_marker = deployment_marker
        self._clock = clock

    async def get_calendar(self) -> CalendarFeed:
        now = self._clock()
        text = await self._protocol.get_or_refresh(now, self._deployment_marker)
        logger.debug("Serving calendar: %d chars", len(text))
        return CalendarFeed(
            text=text,
            etag=compute_etag(text),
            next_refresh=self._protocol.schedule.next_scheduled_instant(now),
        )
