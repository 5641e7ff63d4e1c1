"""Domain entities for cacheaside."""

from cacheaside.core.entities.cache_config import CacheConfig
from cacheaside.core.entities.cache_entry import CacheEntry, EntryKind

__all__ = [
    "CacheConfig",
    "CacheEntry",
    "EntryKind",
]
