"""Cache-aside repository - orchestrates the cache and the persistent store."""

import logging
import threading
from collections.abc import Iterable
from typing import Generic, TypeVar

from cacheaside.core.entities.cache_config import CacheConfig
from cacheaside.core.entities.cache_entry import CacheEntry
from cacheaside.core.exceptions import NotFoundError
from cacheaside.core.interfaces.cache_backend import ICacheBackend
from cacheaside.core.interfaces.key_builder import IKeyBuilder
from cacheaside.core.interfaces.store_adapter import IStoreAdapter

logger = logging.getLogger(__name__)

T = TypeVar("T")
ID = TypeVar("ID")


class CacheAsideRepository(Generic[T, ID]):
    """Repository serving reads from a cache and falling back to a store.

    Reads populate the cache on miss. Writes and deletes go to the store
    first and only touch the cache once the store call succeeded. The
    full-collection snapshot is never patched; any write or delete evicts
    it and the next get_all rebuilds it.

    The cache is an optimization, not a source of truth: a failing cache
    backend is logged and treated as a miss, while store errors always
    propagate unchanged.

    Consistency between cache and store is best-effort. Concurrent writes
    for the same id may race in the cache.
    """

    def __init__(
        self,
        store: IStoreAdapter[T, ID],
        backend: ICacheBackend,
        key_builder: IKeyBuilder,
        config: CacheConfig,
    ) -> None:
        """Initialize the repository.

        Args:
            store: The persistent store adapter.
            backend: The cache backend, shared by all callers.
            key_builder: The key builder for ids and entities.
            config: The cache configuration.
        """
        self._store = store
        self._backend = backend
        self._key_builder = key_builder
        self._config = config

        # Statistics
        self._stats_lock = threading.Lock()
        self._hits = 0
        self._misses = 0

    @property
    def config(self) -> CacheConfig:
        """Get the cache configuration."""
        return self._config

    @property
    def stats(self) -> dict[str, int]:
        """Get cache statistics.

        Returns:
            Dictionary with hits, misses, and total lookups.
        """
        with self._stats_lock:
            return {
                "hits": self._hits,
                "misses": self._misses,
                "total": self._hits + self._misses,
            }

    def get_by_id(self, id: ID) -> T:
        """Get an entity by id.

        A cached negative marker raises NotFoundError without touching
        the store, exactly as a fresh store miss would.

        Args:
            id: The entity identifier.

        Returns:
            The entity.

        Raises:
            NotFoundError: If the entity does not exist.
            StoreError: If the store fails. Nothing is cached then.
        """
        key = self._key_builder.key_for(id)

        entry = self._lookup(key)
        if entry is not None:
            if entry.is_absent:
                raise NotFoundError(id)
            return entry.value

        try:
            entity = self._store.find_by_id(id)
        except NotFoundError:
            if self._config.negative_caching:
                self._populate(key, CacheEntry.absent())
            raise

        self._populate(key, CacheEntry.present(entity))
        return entity

    def get_all(self) -> list[T]:
        """Get every entity of the collection.

        Returns:
            The entities, in the order the store returned them.

        Raises:
            StoreError: If the store fails. Nothing is cached then.
        """
        key = self._key_builder.all_key

        entry = self._lookup(key)
        if entry is not None and entry.is_collection:
            return list(entry.value)

        entry = CacheEntry.collection(self._store.find_all())
        self._populate(key, entry)
        return list(entry.value)

    def save(self, entity: T) -> T:
        """Persist an entity, then cache it and evict the collection snapshot.

        Args:
            entity: The entity to insert or update.

        Returns:
            The persisted entity as returned by the store.

        Raises:
            StoreError: If the store fails. The cache is left untouched.
        """
        persisted = self._store.upsert(entity)

        self._populate(
            self._key_builder.key_for_entity(persisted),
            CacheEntry.present(persisted),
        )
        self._evict(self._key_builder.all_key)
        return persisted

    def delete(self, id: ID) -> None:
        """Delete an entity, then evict it and the collection snapshot.

        Args:
            id: The entity identifier.

        Raises:
            StoreError: If the store fails. The cache is left untouched.
        """
        self._store.delete_by_id(id)

        self._evict(self._key_builder.key_for(id))
        self._evict(self._key_builder.all_key)

    def clear_cache(self, id: ID) -> None:
        """Evict the cache entry of one entity.

        Neither the store nor the collection snapshot is touched.
        """
        self._evict(self._key_builder.key_for(id))

    def clear_all_cache(self) -> None:
        """Flush the whole cache table and reset statistics.

        The table is shared by every repository using the same namespace,
        so their entries are flushed too. Only this repository's
        statistics are reset.
        """
        try:
            self._backend.clear()
        except Exception:
            logger.warning(
                "Cache flush failed for namespace %r",
                self._config.namespace,
                exc_info=True,
            )

        with self._stats_lock:
            self._hits = 0
            self._misses = 0

    def batch_get(self, ids: Iterable[ID]) -> dict[ID, T]:
        """Get several entities with at most one store query.

        Cached entities are served from the cache, cached negatives are
        skipped, and everything else is loaded with a single batched
        store call. Ids that cannot be resolved are omitted from the
        result instead of failing the call.

        Args:
            ids: The entity identifiers. Duplicates are looked up once.

        Returns:
            Mapping of id to entity for every id that exists. Ids of
            store-loaded entities come from the key extractor.

        Raises:
            StoreError: If the batched store query fails. No partial
                result is returned then.
        """
        result: dict[ID, T] = {}
        pending: list[ID] = []

        for id in dict.fromkeys(ids):
            entry = self._lookup(self._key_builder.key_for(id))
            if entry is None:
                pending.append(id)
            elif entry.is_present:
                result[id] = entry.value

        if not pending:
            return result

        entities = self._store.find_by_ids(pending)

        resolved_keys: set[str] = set()
        for entity in entities:
            entity_id = self._key_builder.id_of(entity)
            key = self._key_builder.key_for(entity_id)
            self._populate(key, CacheEntry.present(entity))
            resolved_keys.add(key)
            result[entity_id] = entity

        if self._config.negative_caching and self._config.batch_negative_caching:
            for id in pending:
                key = self._key_builder.key_for(id)
                if key not in resolved_keys:
                    self._populate(key, CacheEntry.absent())

        logger.debug(
            "Batch get in %r: %d requested from store, %d found",
            self._config.namespace,
            len(pending),
            len(resolved_keys),
        )
        return result

    def _lookup(self, key: str) -> CacheEntry | None:
        """Look up a key, counting hits and misses.

        Backend failures are logged and reported as a miss.
        """
        try:
            entry = self._backend.get(key)
        except Exception:
            logger.warning(
                "Cache lookup failed for %r in %r, treating as miss",
                key,
                self._config.namespace,
                exc_info=True,
            )
            entry = None

        with self._stats_lock:
            if entry is None:
                self._misses += 1
            else:
                self._hits += 1

        logger.debug(
            "Cache %s for %r in %r",
            "miss" if entry is None else "hit",
            key,
            self._config.namespace,
        )
        return entry

    def _populate(self, key: str, entry: CacheEntry) -> None:
        """Store an entry with the configured TTL."""
        try:
            self._backend.set(key, entry, self._config.ttl)
        except Exception:
            logger.warning(
                "Cache write failed for %r in %r",
                key,
                self._config.namespace,
                exc_info=True,
            )

    def _evict(self, key: str) -> None:
        """Delete an entry. Deleting a missing key is a no-op."""
        try:
            self._backend.delete(key)
        except Exception:
            logger.warning(
                "Cache eviction failed for %r in %r",
                key,
                self._config.namespace,
                exc_info=True,
            )
