"""Calendar feed router."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Header, Response

from ..dependencies import get_calendar_service
from ..services.calendar_service import CalendarService, etag_matches

router = APIRouter(tags=["calendar"])

CALENDAR_MEDIA_TYPE = "text/calendar; charset=utf-8"
CALENDAR_FILENAME = "zhixue-homework.ics"

_NO_CACHE_HEADERS: dict[str, str] = {
    "Cache-Control": "no-cache, no-store, must-revalidate",
    "Pragma": "no-cache",
    "Expires": "0",
}
_CORS_HEADERS: dict[str, str] = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, HEAD, OPTIONS",
}

ServiceDep = Annotated[CalendarService, Depends(get_calendar_service)]


@router.api_route("/calendar.ics", methods=["GET", "HEAD"], response_model=None)
@router.api_route("/", methods=["GET", "HEAD"], response_model=None, include_in_schema=False)
async def get_calendar(
    service: ServiceDep,
    if_none_match: Annotated[str | None, Header()] = None,
) -> Response:
    """Serve the homework calendar, regenerating it if the cache is stale."""
    feed = await service.get_calendar()

    headers = {
        **_NO_CACHE_HEADERS,
        **_CORS_HEADERS,
        "ETag": feed.etag,
        "X-Next-Refresh": feed.next_refresh.isoformat(),
    }
    if etag_matches(if_none_match, feed.etag):
        return Response(status_code=304, headers=headers)

    headers["Content-Disposition"] = f'attachment; filename="{CALENDAR_FILENAME}"'
    return Response(
        content=feed.text,
        media_type=CALENDAR_MEDIA_TYPE,
        headers=headers,
    )
