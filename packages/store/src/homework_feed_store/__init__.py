"""Key-value backed cache for the generated calendar feed."""

from .artifact_store import ArtifactStore
from .keys import DEFAULT_CACHE_KEYS, CacheKeys
from .kv import KeyValueStore
from .refresh import FeedProducer, RefreshProtocol

__all__ = [
    "DEFAULT_CACHE_KEYS",
    "ArtifactStore",
    "CacheKeys",
    "FeedProducer",
    "KeyValueStore",
    "RefreshProtocol",
]
