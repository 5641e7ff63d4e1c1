"""Convenience wiring for cache-aside repositories."""

from typing import TypeVar

from cacheaside.core.entities.cache_config import CacheConfig
from cacheaside.core.interfaces.cache_backend import ICacheBackend
from cacheaside.core.interfaces.store_adapter import IStoreAdapter
from cacheaside.core.services.repository import CacheAsideRepository
from cacheaside.infrastructure.backends.memory import cache_table
from cacheaside.infrastructure.key_builders.default import DefaultKeyBuilder

T = TypeVar("T")
ID = TypeVar("ID")


def create_repository(
    store: IStoreAdapter[T, ID],
    config: CacheConfig,
    backend: ICacheBackend | None = None,
) -> CacheAsideRepository[T, ID]:
    """Build a repository with the default key builder.

    Args:
        store: The persistent store adapter.
        config: The cache configuration. Its key_extractor drives the
            key builder.
        backend: Optional cache backend. Defaults to the process-wide
            in-memory table for config.namespace.

    Returns:
        A ready-to-use CacheAsideRepository.

    Example:
        repo = create_repository(
            SqlAlchemyStoreAdapter(session_factory, User),
            CacheConfig(
                namespace="users",
                key_extractor=lambda user: user.id,
                ttl=timedelta(minutes=10),
                negative_caching=True,
            ),
        )
    """
    if backend is None:
        backend = cache_table(config.namespace, maxsize=config.max_size)

    return CacheAsideRepository(
        store=store,
        backend=backend,
        key_builder=DefaultKeyBuilder(config.key_extractor),
        config=config,
    )
