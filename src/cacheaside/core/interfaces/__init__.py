"""Core interfaces (Protocol classes) for cacheaside."""

from cacheaside.core.interfaces.cache_backend import ICacheBackend
from cacheaside.core.interfaces.key_builder import IKeyBuilder
from cacheaside.core.interfaces.repository import ICacheRepository
from cacheaside.core.interfaces.store_adapter import IStoreAdapter

__all__ = [
    "ICacheBackend",
    "IKeyBuilder",
    "IStoreAdapter",
    "ICacheRepository",
]
