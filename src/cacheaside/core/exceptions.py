"""Exception hierarchy for cacheaside."""

from typing import Any


class CacheAsideError(Exception):
    """Base exception for all cacheaside errors."""


class NotFoundError(CacheAsideError):
    """Raised when an entity exists neither in the cache nor in the store.

    This is the only error eligible for negative caching. A negatively
    cached lookup raises the same error as a fresh store miss.
    """

    def __init__(self, id: Any, message: str | None = None) -> None:
        self.id = id
        super().__init__(message or f"Entity not found: {id!r}")


class StoreError(CacheAsideError):
    """Raised when the persistent store fails for any reason but not-found.

    Store errors are never cached and never retried by the repository.
    """


class ConfigError(CacheAsideError, ValueError):
    """Raised at construction time for invalid configuration."""
