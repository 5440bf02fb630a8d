"""Persist and load the generated calendar as one logical generation."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from homework_feed_core.errors import CorruptMetadataError, StoreError
from homework_feed_core.schemas import CacheMetadata, Generation

from .keys import DEFAULT_CACHE_KEYS, CacheKeys

if TYPE_CHECKING:
    from datetime import datetime

    from .kv import KeyValueStore

logger = logging.getLogger(__name__)


class ArtifactStore:
    """Read and write (artifact, metadata, deployment marker) triples.

    The three parts live under independent keys and the backing store gives
    no cross-key consistency, so anything short of a complete, decodable
    triple loads as ``None``.
    """

    def __init__(self, kv: KeyValueStore, keys: CacheKeys = DEFAULT_CACHE_KEYS) -> None:
        self._kv = kv
        self._keys = keys

    @property
    def keys(self) -> CacheKeys:
        return self._keys

    async def _read(self, key: str) -> str | None:
        try:
            return await self._kv.get(key)
        except Exception as exc:
            logger.warning("Cache read failed for %s, treating as absent: %s", key, exc)
            return None

    async def load_metadata(self) -> CacheMetadata | None:
        """Return stored metadata alone, or ``None`` if absent or unreadable."""
        raw = await self._read(self._keys.metadata)
        return self._decode_metadata(raw)

    def _decode_metadata(self, raw: str | None) -> CacheMetadata | None:
        if not raw:
            return None
        try:
            return CacheMetadata.from_json(raw)
        except CorruptMetadataError as exc:
            logger.warning("Ignoring corrupt metadata under %s: %s", self._keys.metadata, exc)
            return None

    async def load(self) -> Generation | None:
        """Load the current generation, or ``None`` if any part is missing."""
        artifact, raw_meta, marker = await asyncio.gather(
            self._read(self._keys.artifact),
            self._read(self._keys.metadata),
            self._read(self._keys.deployment),
        )
        metadata = self._decode_metadata(raw_meta)
        if artifact is None or metadata is None or marker is None:
            logger.debug(
                "Incomplete generation (artifact=%s, metadata=%s, marker=%s)",
                artifact is not None,
                metadata is not None,
                marker is not None,
            )
            return None
        return Generation(
            artifact_text=artifact,
            metadata=metadata,
            deployment_marker=marker,
        )

    async def save(
        self,
        artifact_text: str,
        item_count: int,
        now: datetime,
        deployment_marker: str,
    ) -> Generation:
        """Write a new generation.

        Keys are written in order: artifact, metadata, then deployment marker.
        The first failed write raises :class:`StoreError` and later keys are
        left untouched, so new metadata or a new marker never sits next to an
        old artifact. A stored triple that is only partly replaced keeps its
        old marker or its old timestamp and reads as stale.
        """
        metadata = CacheMetadata(last_updated=now, item_count=item_count)
        writes = (
            (self._keys.artifact, artifact_text),
            (self._keys.metadata, metadata.to_json()),
            (self._keys.deployment, deployment_marker),
        )
        for key, value in writes:
            try:
                await self._kv.put(key, value)
            except Exception as exc:
                msg = f"Failed to write {key}: {exc}"
                raise StoreError(msg, failed_keys=(key,)) from exc
        logger.info(
            "Stored generation: %d items, %d chars, marker=%s",
            item_count,
            len(artifact_text),
            deployment_marker,
        )
        return Generation(
            artifact_text=artifact_text,
            metadata=metadata,
            deployment_marker=deployment_marker,
        )
