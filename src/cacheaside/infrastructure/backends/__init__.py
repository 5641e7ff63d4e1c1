"""Cache backend implementations."""

from cacheaside.infrastructure.backends.memory import InMemoryCacheBackend, cache_table

__all__ = [
    "InMemoryCacheBackend",
    "cache_table",
]
