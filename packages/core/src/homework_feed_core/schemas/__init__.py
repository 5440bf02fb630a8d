"""Core schemas for the homework calendar feed."""

from .enums import RefreshStatus, RefreshTrigger
from .generation import CacheMetadata, Generation, RefreshOutcome
from .homework import UNKNOWN_LABEL, HomeworkItem

__all__ = [
    "UNKNOWN_LABEL",
    "CacheMetadata",
    "Generation",
    "HomeworkItem",
    "RefreshOutcome",
    "RefreshStatus",
    "RefreshTrigger",
]
