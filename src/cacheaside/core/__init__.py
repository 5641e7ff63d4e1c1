"""Core domain layer for cacheaside."""

from cacheaside.core.entities import CacheConfig, CacheEntry, EntryKind
from cacheaside.core.exceptions import (
    CacheAsideError,
    ConfigError,
    NotFoundError,
    StoreError,
)
from cacheaside.core.interfaces import (
    ICacheBackend,
    ICacheRepository,
    IKeyBuilder,
    IStoreAdapter,
)
from cacheaside.core.services import CacheAsideRepository

__all__ = [
    # Entities
    "CacheConfig",
    "CacheEntry",
    "EntryKind",
    # Errors
    "CacheAsideError",
    "ConfigError",
    "NotFoundError",
    "StoreError",
    # Interfaces
    "ICacheBackend",
    "IKeyBuilder",
    "IStoreAdapter",
    "ICacheRepository",
    # Services
    "CacheAsideRepository",
]
