"""HTTP client for the Zhixue student homework list endpoint.

The endpoint sits behind the web portal's session cookie; there is no public
API key. The ``appName`` header is mandatory, requests without it are
rejected by the middle service.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from homework_feed_core.errors import UpstreamError

logger = logging.getLogger(__name__)

_BASE_URL = "https://www.zhixue.com"
_HOMEWORK_LIST_PATH = (
    "/middleweb/homework_middle_service/stuapp/getStudentHomeWorkList"
)
HOMEWORK_PAGE_URL = "https://www.zhixue.com/middlehomework/web-student/views/"
_APP_NAME = "com.iflytek.zxzy.web.zx.stu"

# subjectCode -1 = all subjects, completeStatus 0 = not yet completed
_LIST_PARAMS: dict[str, str] = {
    "subjectCode": "-1",
    "completeStatus": "0",
    "pageSize": "500",
    "pageIndex": "1",
}


class ZhixueClient:
    """Thin async wrapper around the homework list endpoint. No retries."""

    def __init__(self, cookie: str, *, timeout: int = 30) -> None:
        self._client = httpx.AsyncClient(
            base_url=_BASE_URL,
            headers={
                "Cookie": cookie,
                "Referer": HOMEWORK_PAGE_URL,
                "Origin": _BASE_URL,
                "appName": _APP_NAME,
            },
            timeout=httpx.Timeout(timeout),
        )

    async def get_homework_list(self) -> dict[str, Any]:
        """Call the list endpoint and return the decoded JSON body.

        Raises :class:`UpstreamError` on transport failures, non-2xx
        responses and bodies that are not a JSON object.
        """
        logger.info("Fetching Zhixue homework list")
        try:
            resp = await self._client.get(_HOMEWORK_LIST_PATH, params=_LIST_PARAMS)
        except httpx.HTTPError as exc:
            msg = f"Error contacting Zhixue: {exc}"
            raise UpstreamError(msg) from exc

        if not resp.is_success:
            msg = f"Error fetching data from Zhixue: {resp.status_code} {resp.reason_phrase}"
            raise UpstreamError(msg, status_code=resp.status_code)

        try:
            data = resp.json()
        except ValueError as exc:
            msg = "Zhixue returned a non-JSON body"
            raise UpstreamError(msg, status_code=resp.status_code) from exc
        if not isinstance(data, dict):
            msg = f"Zhixue returned unexpected JSON type {type(data).__name__}"
            raise UpstreamError(msg, status_code=resp.status_code)
        return data

    async def close(self) -> None:
        """Shut down the underlying HTTPX client."""
        await self._client.aclose()
