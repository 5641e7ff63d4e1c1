"""Persistent store adapter interface."""

from collections.abc import Sequence
from typing import Protocol, TypeVar, runtime_checkable

T = TypeVar("T")
ID_contra = TypeVar("ID_contra", contravariant=True)


@runtime_checkable
class IStoreAdapter(Protocol[T, ID_contra]):
    """Contract for the persistent store behind a repository.

    The store is the source of truth and is unaware of the cache.
    Implementations raise NotFoundError for a missing entity and
    StoreError for any other failure.
    """

    def find_by_id(self, id: ID_contra) -> T:
        """Load one entity.

        Args:
            id: The entity identifier.

        Returns:
            The entity.

        Raises:
            NotFoundError: If no entity has this identifier.
            StoreError: If the store fails.
        """
        ...

    def find_all(self) -> Sequence[T]:
        """Load every entity of the collection.

        Raises:
            StoreError: If the store fails.
        """
        ...

    def find_by_ids(self, ids: Sequence[ID_contra]) -> Sequence[T]:
        """Load several entities in one query.

        Unknown ids are simply missing from the result.

        Args:
            ids: The identifiers to load.

        Returns:
            The entities that were found, in no particular order.

        Raises:
            StoreError: If the store fails.
        """
        ...

    def upsert(self, entity: T) -> T:
        """Insert or update an entity.

        Args:
            entity: The entity to persist.

        Returns:
            The persisted entity, including store-assigned identifiers.

        Raises:
            StoreError: If the store fails.
        """
        ...

    def delete_by_id(self, id: ID_contra) -> None:
        """Delete an entity. Deleting an unknown id is not an error.

        Args:
            id: The entity identifier.

        Raises:
            StoreError: If the store fails.
        """
        ...
