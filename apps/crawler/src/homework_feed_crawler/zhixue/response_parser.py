"""Validate a Zhixue homework list response and map it to HomeworkItem objects."""

from __future__ import annotations

import json
import logging
from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from homework_feed_core.errors import UpstreamError
from homework_feed_core.schemas import UNKNOWN_LABEL, HomeworkItem

logger = logging.getLogger(__name__)

_SUCCESS_CODE = 200


class _HomeworkState(BaseModel):
    state_name: str | None = Field(None, alias="stateName")
    state_code: int | None = Field(None, alias="stateCode")


class _HomeworkType(BaseModel):
    type_name: str | None = Field(None, alias="typeName")


class _RawHomework(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    hw_id: str = Field(alias="hwId")
    subject_name: str = Field("", alias="subjectName")
    hw_title: str = Field("", alias="hwTitle")
    create_time: float = Field(alias="createTime")  # epoch ms
    end_time: float = Field(alias="endTime")  # epoch ms
    hw_type: int | None = Field(None, alias="hwType")
    state: _HomeworkState | None = Field(None, alias="homeWorkState")
    type_dto: _HomeworkType | None = Field(None, alias="homeWorkTypeDTO")


class _ResultBody(BaseModel):
    items: list[_RawHomework] | None = Field(None, alias="list")


class _Envelope(BaseModel):
    code: int
    info: str | None = None
    result: _ResultBody | None = None


def _epoch_ms_to_utc(ms: float) -> datetime:
    return datetime.fromtimestamp(ms / 1000, tz=UTC)


def _to_item(raw: _RawHomework) -> HomeworkItem:
    state = raw.state or _HomeworkState()
    type_dto = raw.type_dto or _HomeworkType()
    return HomeworkItem(
        id=raw.hw_id,
        subject=raw.subject_name,
        title=raw.hw_title,
        created_at=_epoch_ms_to_utc(raw.create_time),
        due_at=_epoch_ms_to_utc(raw.end_time),
        type=raw.hw_type,
        state_name=state.state_name or UNKNOWN_LABEL,
        state_code=state.state_code,
        type_name=type_dto.type_name or UNKNOWN_LABEL,
    )


def parse_homework_response(raw: dict[str, Any]) -> list[HomeworkItem]:
    """Convert the ``result.list`` of a homework list response.

    Raises :class:`UpstreamError` when the portal reports a non-200 ``code``
    or the payload does not match the expected shape.
    """
    try:
        envelope = _Envelope.model_validate(raw)
    except ValidationError as exc:
        msg = f"Malformed Zhixue response: {exc.error_count()} validation error(s)"
        raise UpstreamError(msg) from exc

    if envelope.code != _SUCCESS_CODE:
        detail = envelope.info or json.dumps(raw, ensure_ascii=False)
        msg = f"Zhixue API returned error: {detail}"
        raise UpstreamError(msg)

    records = envelope.result.items if envelope.result else None
    items = [_to_item(r) for r in records or []]
    logger.info("Parsed %d homework items from Zhixue response", len(items))
    return items
