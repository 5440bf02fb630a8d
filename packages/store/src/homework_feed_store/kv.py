"""Minimal key-value store contract."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class KeyValueStore(Protocol):
    """String-to-string store with eventually consistent ``get``/``put``."""

    async def get(self, key: str) -> str | None:
        """Return the stored value, or ``None`` if the key is absent."""
        ...

    async def put(self, key: str, value: str) -> None:
        """Store *value* under *key*, replacing any previous value."""
        ...
