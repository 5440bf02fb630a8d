"""Homework item DTO, decoupled from the portal's wire format."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict

UNKNOWN_LABEL = "未知"


class HomeworkItem(BaseModel):
    """One homework assignment as read from the portal."""

    model_config = ConfigDict(frozen=True)

    id: str
    subject: str
    title: str
    created_at: datetime
    due_at: datetime
    type: int | None = None
    state_name: str = UNKNOWN_LABEL
    state_code: int | None = None
    type_name: str = UNKNOWN_LABEL
