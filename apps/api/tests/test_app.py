"""Health check, CORS preflight and ETag helpers."""

from __future__ import annotations

import pytest

from homework_feed_api.services.calendar_service import compute_etag, etag_matches


def test_health(api) -> None:
    resp = api.client.get("/health")

    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_cors_preflight(api) -> None:
    resp = api.client.options(
        "/calendar.ics",
        headers={
            "Origin": "https://calendar.example.com",
            "Access-Control-Request-Method": "GET",
        },
    )

    assert resp.status_code == 200
    assert resp.headers["access-control-allow-origin"] == "*"
    assert api.producer.fetch_calls == 0


def test_etag_is_quoted_md5() -> None:
    etag = compute_etag("BEGIN:VCALENDAR")

    assert etag.startswith('"') and etag.endswith('"')
    assert len(etag) == 34
    assert compute_etag("BEGIN:VCALENDAR") == etag
    assert compute_etag("END:VCALENDAR") != etag


@pytest.mark.parametrize(
    ("header", "expected"),
    [
        (None, False),
        ("", False),
        ('"abc"', True),
        ('W/"abc"', True),
        ('"x", "abc"', True),
        ("*", True),
        ('"abcd"', False),
    ],
)
def test_etag_matches(header: str | None, expected: bool) -> None:
    assert etag_matches(header, '"abc"') is expected
