"""Cached generation and refresh outcome schemas."""

from __future__ import annotations

from datetime import UTC, datetime

from pydantic import AliasChoices, BaseModel, Field, ValidationError, field_validator

from homework_feed_core.errors import CorruptMetadataError

from .enums import RefreshStatus, RefreshTrigger


class CacheMetadata(BaseModel):
    """Metadata stored next to the cached calendar text.

    Persisted as ``{"lastUpdated": <ISO-8601>, "itemCount": <int>}``.
    Older generations wrote ``homeworkCount``; it is still accepted on read.
    """

    last_updated: datetime = Field(
        validation_alias=AliasChoices("lastUpdated", "last_updated"),
        serialization_alias="lastUpdated",
    )
    item_count: int = Field(
        ge=0,
        validation_alias=AliasChoices("itemCount", "homeworkCount", "item_count"),
        serialization_alias="itemCount",
    )

    @field_validator("last_updated", mode="after")
    @classmethod
    def _ensure_utc(cls, v: datetime) -> datetime:
        if v.tzinfo is None:
            return v.replace(tzinfo=UTC)
        return v.astimezone(UTC)

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)

    @classmethod
    def from_json(cls, raw: str | bytes) -> CacheMetadata:
        """Decode stored metadata, raising :class:`CorruptMetadataError` on any defect."""
        try:
            return cls.model_validate_json(raw)
        except ValidationError as exc:
            msg = f"Unreadable cache metadata: {exc.error_count()} error(s)"
            raise CorruptMetadataError(msg) from exc


class Generation(BaseModel):
    """One consistent (artifact, metadata, deployment marker) triple."""

    artifact_text: str
    metadata: CacheMetadata
    deployment_marker: str


class RefreshOutcome(BaseModel):
    """Result of one refresh invocation, reported instead of raised."""

    status: RefreshStatus
    trigger: RefreshTrigger
    refreshed_at: datetime
    item_count: int = 0
    duration_ms: int = 0
    error: str | None = None

    @property
    def success(self) -> bool:
        return self.status == RefreshStatus.SUCCESS
