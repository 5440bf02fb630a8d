"""E2E test against the live Zhixue portal.

Run:
    ZHIXUE_COOKIE='...' pytest apps/crawler/tests/test_e2e_zhixue.py -v -m e2e
"""

from __future__ import annotations

import os

import pytest

pytestmark = [
    pytest.mark.e2e,
    pytest.mark.skipif(not os.environ.get("ZHIXUE_COOKIE"), reason="ZHIXUE_COOKIE not set"),
]


@pytest.mark.timeout(60)
async def test_live_homework_list():
    from icalendar import Calendar

    from homework_feed_crawler.zhixue.producer import ZhixueFeedProducer

    producer = ZhixueFeedProducer(os.environ["ZHIXUE_COOKIE"])
    try:
        items = await producer.fetch_homework()
        text = producer.serialize(items)
    finally:
        await producer.close()

    assert all(item.id for item in items)
    cal = Calendar.from_ical(text)
    assert len(cal.walk("VEVENT")) == len(items)
