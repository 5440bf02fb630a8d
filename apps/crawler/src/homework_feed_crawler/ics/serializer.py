"""Render homework items as a subscribable iCalendar feed.

Every assignment becomes a 45 minute event at 06:45 Beijing time on its due
date, so it shows up as a morning reminder in calendar clients. Output is
byte-for-byte deterministic for a given input: ``DTSTAMP`` comes from the
assignment's creation time instead of the wall clock.
"""

from __future__ import annotations

from datetime import datetime, time, timedelta
from typing import TYPE_CHECKING
from zoneinfo import ZoneInfo

from icalendar import Calendar, Event, Timezone, TimezoneStandard

from homework_feed_crawler.zhixue.client import HOMEWORK_PAGE_URL

if TYPE_CHECKING:
    from collections.abc import Iterable

    from homework_feed_core.schemas import HomeworkItem

CALENDAR_NAME = "智学网作业日历"
TIMEZONE_ID = "Asia/Shanghai"
PRODID = "-//homework-feed//Zhixue Homework Calendar//ZH"
EVENT_LOCATION = "智学网"
EVENT_START = time(6, 45)
EVENT_DURATION = timedelta(minutes=45)

_TZ = ZoneInfo(TIMEZONE_ID)


def _timezone_block() -> Timezone:
    """VTIMEZONE for Asia/Shanghai (fixed UTC+8, no DST since 1991)."""
    standard = TimezoneStandard()
    standard.add("dtstart", datetime(1970, 1, 1))
    standard.add("tzoffsetfrom", timedelta(hours=8))
    standard.add("tzoffsetto", timedelta(hours=8))
    standard.add("tzname", "CST")

    tz = Timezone()
    tz.add("tzid", TIMEZONE_ID)
    tz.add_component(standard)
    return tz


def event_window(due_at: datetime) -> tuple[datetime, datetime]:
    """Local start/end of the reminder event for an assignment due at *due_at*."""
    due_day = due_at.astimezone(_TZ).date()
    start = datetime.combine(due_day, EVENT_START, tzinfo=_TZ)
    return start, start + EVENT_DURATION


def _event(item: HomeworkItem) -> Event:
    start, end = event_window(item.due_at)
    event = Event()
    event.add("uid", item.id)
    event.add("dtstamp", item.created_at)
    event.add("dtstart", start)
    event.add("dtend", end)
    event.add("summary", f"[{item.subject}] {item.title}")
    event.add(
        "description",
        f"类型: {item.type_name}\n状态: {item.state_name}\nID: {item.id}",
    )
    event.add("location", EVENT_LOCATION)
    event.add("url", HOMEWORK_PAGE_URL)
    return event


def serialize_calendar(items: Iterable[HomeworkItem]) -> str:
    """Build the calendar document for *items* and return it as text."""
    cal = Calendar()
    cal.add("prodid", PRODID)
    cal.add("version", "2.0")
    cal.add("calscale", "GREGORIAN")
    cal.add("method", "PUBLISH")
    cal.add("x-wr-calname", CALENDAR_NAME)
    cal.add("x-wr-timezone", TIMEZONE_ID)
    cal.add_component(_timezone_block())

    for item in items:
        cal.add_component(_event(item))

    return cal.to_ical().decode("utf-8")
