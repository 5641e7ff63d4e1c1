"""Infrastructure layer implementations for cacheaside."""

from cacheaside.infrastructure.backends import InMemoryCacheBackend, cache_table
from cacheaside.infrastructure.key_builders import ALL_KEY, DefaultKeyBuilder

__all__ = [
    "ALL_KEY",
    "DefaultKeyBuilder",
    "InMemoryCacheBackend",
    "cache_table",
]
