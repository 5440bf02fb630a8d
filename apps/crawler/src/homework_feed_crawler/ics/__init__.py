"""iCalendar rendering for homework feeds."""

from .serializer import serialize_calendar

__all__ = ["serialize_calendar"]
