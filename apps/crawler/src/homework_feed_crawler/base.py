"""Abstract base class for feed producers."""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from homework_feed_core.schemas import HomeworkItem


class BaseFeedProducer(abc.ABC):
    """Base class that every homework source must implement."""

    @abc.abstractmethod
    async def fetch_homework(self) -> list[HomeworkItem]:
        """Fetch the current homework list from the source."""

    @abc.abstractmethod
    def serialize(self, items: list[HomeworkItem]) -> str:
        """Render *items* as calendar text."""

    @abc.abstractmethod
    async def close(self) -> None:
        """Release any held resources (HTTP clients, etc.)."""
