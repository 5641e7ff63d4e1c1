"""cacheaside - Cache-aside repositories for Python.

A small library that puts a thread-safe, TTL-based in-memory cache in
front of a persistent store. Reads are served from the cache when
possible and populate it on miss; writes go to the store first and then
refresh or invalidate the cache.

Example with SQLAlchemy:
    from datetime import timedelta

    from sqlalchemy import create_engine
    from sqlalchemy.orm import sessionmaker

    from cacheaside import CacheConfig, NotFoundError, create_repository
    from cacheaside.infrastructure.stores.sqlalchemy_store import (
        SqlAlchemyStoreAdapter,
    )

    engine = create_engine("sqlite:///app.db")
    session_factory = sessionmaker(engine, expire_on_commit=False)

    users = create_repository(
        SqlAlchemyStoreAdapter(session_factory, User),
        CacheConfig(
            namespace="users",
            key_extractor=lambda user: user.id,
            ttl=timedelta(minutes=10),
            negative_caching=True,  # remember ids that do not exist
        ),
    )

    user = users.save(User(username="john_doe", email="john@example.com"))
    users.get_by_id(user.id)  # loaded from the database
    users.get_by_id(user.id)  # served from the cache

    try:
        users.get_by_id(99999)
    except NotFoundError:
        ...

    users.batch_get([1, 2, 3])  # one query for everything not cached
"""

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
from cacheaside.factory import create_repository
from cacheaside.infrastructure import (
    ALL_KEY,
    DefaultKeyBuilder,
    InMemoryCacheBackend,
    cache_table,
)

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Core entities
    "CacheConfig",
    "CacheEntry",
    "EntryKind",
    # Errors
    "CacheAsideError",
    "ConfigError",
    "NotFoundError",
    "StoreError",
    # Core interfaces
    "ICacheBackend",
    "IKeyBuilder",
    "IStoreAdapter",
    "ICacheRepository",
    # Core services
    "CacheAsideRepository",
    "create_repository",
    # Infrastructure implementations
    "InMemoryCacheBackend",
    "cache_table",
    "DefaultKeyBuilder",
    "ALL_KEY",
]
