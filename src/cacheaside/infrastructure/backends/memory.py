"""In-memory cache backend implementation."""

import logging
import math
import threading
import time
from collections.abc import Callable
from datetime import timedelta
from typing import Any, NamedTuple

from cachetools import TLRUCache  # type: ignore[import-untyped]

from cacheaside.core.entities.cache_entry import CacheEntry

logger = logging.getLogger(__name__)


class _Slot(NamedTuple):
    entry: CacheEntry
    ttl: float  # seconds, math.inf = never expires


def _time_to_use(key: str, slot: _Slot, now: float) -> float:
    # Evaluated once at insertion, so expiry is absolute, not sliding.
    return now + slot.ttl


class InMemoryCacheBackend:
    """Thread-safe in-memory cache backend with per-entry TTL.

    Suitable for single-process deployments. Uses cachetools TLRUCache,
    whose time-to-use function gives every entry its own expiry deadline.
    All operations are serialized by an internal lock, so one instance
    can be shared by any number of threads.
    """

    def __init__(
        self,
        namespace: str = "default",
        maxsize: int | None = None,
        timer: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize the in-memory cache backend.

        Args:
            namespace: Name of the cache table, used in log messages.
            maxsize: Maximum number of items. None means unbounded.
            timer: Clock returning seconds, used for expiry.
        """
        self._namespace = namespace
        self._maxsize = maxsize
        self._cache: TLRUCache[str, _Slot] = TLRUCache(
            maxsize=maxsize if maxsize is not None else math.inf,
            ttu=_time_to_use,
            timer=timer,
        )
        self._lock = threading.RLock()

    def get(self, key: str) -> CacheEntry | None:
        """Retrieve a cache entry by key.

        Args:
            key: The cache key to retrieve.

        Returns:
            The cache entry, or None if not found or expired.
        """
        with self._lock:
            slot = self._cache.get(key)
        return slot.entry if slot is not None else None

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
            ttl: Time-to-live from now. None or zero means never expire.
        """
        seconds = ttl.total_seconds() if ttl else math.inf
        with self._lock:
            self._cache[key] = _Slot(entry, seconds)

    def delete(self, key: str) -> bool:
        """Delete a cache entry.

        Args:
            key: The cache key to delete.

        Returns:
            True if a live entry existed and was deleted, False otherwise.
        """
        with self._lock:
            try:
                del self._cache[key]
            except KeyError:
                # Missing, or already expired (TLRUCache drops it anyway)
                return False
        return True

    def exists(self, key: str) -> bool:
        """Check if a live entry exists under key.

        Args:
            key: The cache key to check.

        Returns:
            True if the key exists and has not expired, False otherwise.
        """
        with self._lock:
            return key in self._cache

    def clear(self) -> None:
        """Remove every entry regardless of TTL."""
        with self._lock:
            self._cache.clear()
        logger.debug("Flushed cache table %r", self._namespace)

    def expire(self) -> None:
        """Physically purge entries whose deadline has passed.

        Expired entries are never returned, and the underlying cache also
        purges them on every set, so calling this is optional.
        """
        with self._lock:
            expired: list[Any] = self._cache.expire()
        if expired:
            logger.debug(
                "Purged %d expired entries from cache table %r",
                len(expired),
                self._namespace,
            )

    def __len__(self) -> int:
        """Return the number of live items in the cache."""
        with self._lock:
            self._cache.expire()
            return len(self._cache)

    @property
    def namespace(self) -> str:
        """Return the name of this cache table."""
        return self._namespace

    @property
    def maxsize(self) -> int | None:
        """Return the maximum size of the cache, None if unbounded."""
        return self._maxsize


# Process-wide cache tables, one per namespace
_tables: dict[str, InMemoryCacheBackend] = {}
_tables_lock = threading.Lock()


def cache_table(namespace: str, maxsize: int | None = None) -> InMemoryCacheBackend:
    """Get the shared cache table for a namespace, creating it if needed.

    Repositories configured with the same namespace share one table, so
    a write through one is visible to reads through the other.

    Args:
        namespace: Name of the cache table.
        maxsize: Maximum size used when the table is created. Ignored if
            the table already exists.

    Returns:
        The cache table for the namespace.
    """
    with _tables_lock:
        table = _tables.get(namespace)
        if table is None:
            table = InMemoryCacheBackend(namespace=namespace, maxsize=maxsize)
            _tables[namespace] = table
            logger.debug("Created cache table %r", namespace)
        return table
