"""Cache repository interface."""

from collections.abc import Iterable
from typing import Protocol, TypeVar, runtime_checkable

T = TypeVar("T")
ID = TypeVar("ID")


@runtime_checkable
class ICacheRepository(Protocol[T, ID]):
    """Contract for repositories providing cached data access."""

    def get_by_id(self, id: ID) -> T:
        """Get an entity by id, from the cache when possible."""
        ...

    def get_all(self) -> list[T]:
        """Get every entity, from the cache when possible."""
        ...

    def save(self, entity: T) -> T:
        """Persist an entity and refresh its cache entry."""
        ...

    def delete(self, id: ID) -> None:
        """Delete an entity and evict its cache entries."""
        ...

    def clear_cache(self, id: ID) -> None:
        """Evict the cache entry of one entity."""
        ...

    def clear_all_cache(self) -> None:
        """Evict every cache entry of this repository."""
        ...

    def batch_get(self, ids: Iterable[ID]) -> dict[ID, T]:
        """Get several entities, omitting those that do not exist."""
        ...
