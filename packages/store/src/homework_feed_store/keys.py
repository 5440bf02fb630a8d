"""Cache key names for the three parts of a generation."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CacheKeys:
    """Independent keys for artifact text, metadata and deployment marker."""

    artifact: str = "zhixue-calendar-ics"
    metadata: str = "zhixue-calendar-meta"
    deployment: str = "zhixue-calendar-deployment"

    @classmethod
    def with_prefix(cls, prefix: str) -> CacheKeys:
        """Build keys namespaced under *prefix* (e.g. one feed per student)."""
        return cls(
            artifact=f"{prefix}:ics",
            metadata=f"{prefix}:meta",
            deployment=f"{prefix}:deployment",
        )

    def all(self) -> tuple[str, str, str]:
        return (self.artifact, self.metadata, self.deployment)


DEFAULT_CACHE_KEYS = CacheKeys()
