"""Scheduled-refresh freshness model.

Cached calendar content is regenerated at a fixed set of UTC hours each day.
A cached generation stays valid until the next scheduled instant passes,
independent of how long ago it was written.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import UTC, datetime, timedelta

DEFAULT_REFRESH_HOURS: tuple[int, ...] = (10, 22)


def _as_utc(value: datetime) -> datetime:
    """Interpret naive datetimes as UTC and normalise aware ones to UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


class RefreshSchedule:
    """Fixed daily refresh hours (UTC, hour granularity)."""

    __slots__ = ("_hours",)

    def __init__(self, hours: Iterable[int] = DEFAULT_REFRESH_HOURS) -> None:
        hours = list(hours)
        if not hours:
            msg = "Refresh schedule needs at least one hour"
            raise ValueError(msg)
        for hour in hours:
            # bool is an int subclass; reject it explicitly
            if type(hour) is not int or not 0 <= hour <= 23:
                msg = f"Refresh hour must be an integer in 0..23, got {hour!r}"
                raise ValueError(msg)
        self._hours: tuple[int, ...] = tuple(sorted(set(hours)))

    @property
    def hours(self) -> tuple[int, ...]:
        return self._hours

    def __repr__(self) -> str:
        return f"RefreshSchedule(hours={self._hours!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RefreshSchedule):
            return NotImplemented
        return self._hours == other._hours

    def __hash__(self) -> int:
        return hash(self._hours)

    def last_scheduled_instant(self, now: datetime) -> datetime:
        """Return the latest scheduled instant at or before *now*.

        When *now* precedes every scheduled hour of its UTC day, the answer is
        the last scheduled hour of the previous day.
        """
        now = _as_utc(now)
        midnight = now.replace(hour=0, minute=0, second=0, microsecond=0)
        passed = [h for h in self._hours if h <= now.hour]
        if passed:
            return midnight + timedelta(hours=passed[-1])
        return midnight - timedelta(days=1) + timedelta(hours=self._hours[-1])

    def next_scheduled_instant(self, now: datetime) -> datetime:
        """Return the earliest scheduled instant strictly after *now*."""
        now = _as_utc(now)
        midnight = now.replace(hour=0, minute=0, second=0, microsecond=0)
        for hour in self._hours:
            candidate = midnight + timedelta(hours=hour)
            if candidate > now:
                return candidate
        return midnight + timedelta(days=1, hours=self._hours[0])

    def is_fresh(self, last_updated: datetime, now: datetime) -> bool:
        """True if *last_updated* is at or after the last scheduled instant.

        Timestamps ahead of *now* (clock skew) are accepted as fresh.
        """
        return _as_utc(last_updated) >= self.last_scheduled_instant(now)


DEFAULT_SCHEDULE = RefreshSchedule()


def last_scheduled_instant(
    now: datetime, hours: Iterable[int] = DEFAULT_REFRESH_HOURS
) -> datetime:
    """Shortcut for :meth:`RefreshSchedule.last_scheduled_instant`."""
    return RefreshSchedule(hours).last_scheduled_instant(now)


def is_fresh(
    last_updated: datetime,
    now: datetime,
    hours: Iterable[int] = DEFAULT_REFRESH_HOURS,
) -> bool:
    """Shortcut for :meth:`RefreshSchedule.is_fresh`."""
    return RefreshSchedule(hours).is_fresh(last_updated, now)
