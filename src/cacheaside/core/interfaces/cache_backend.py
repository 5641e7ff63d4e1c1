"""Cache backend interface."""

from datetime import timedelta
from typing import Protocol, runtime_checkable

from cacheaside.core.entities.cache_entry import CacheEntry


@runtime_checkable
class ICacheBackend(Protocol):
    """Contract for cache storage backends.

    All cache backends must implement this protocol to be used with
    CacheAsideRepository. Every method must be safe to call from several
    threads at once without external locking.
    """

    def get(self, key: str) -> CacheEntry | None:
        """Retrieve a cache entry by key.

        Args:
            key: The cache key to retrieve.

        Returns:
            The cache entry, or None if not found or expired.
        """
        ...

    def set(
        self,
        key: str,
        entry: CacheEntry,
        ttl: timedelta | None = None,
    ) -> None:
        """Store an entry, replacing any entry under the same key.

        Args:
            key: The cache key.
            entry: The entry to store.
            ttl: Time-to-live measured from now. None or zero means the
                entry never expires.
        """
        ...

    def delete(self, key: str) -> bool:
        """Delete a cache entry.

        Args:
            key: The cache key to delete.

        Returns:
            True if a live entry existed and was deleted, False otherwise.
        """
        ...

    def exists(self, key: str) -> bool:
        """Check if a live entry exists under key.

        Args:
            key: The cache key to check.

        Returns:
            True if the key exists and has not expired, False otherwise.
        """
        ...

    def clear(self) -> None:
        """Remove every entry regardless of TTL."""
        ...
