"""Key builder interface."""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class IKeyBuilder(Protocol):
    """Contract for building cache keys from identifiers and entities.

    Key builders must be deterministic: equal ids always yield equal keys.
    """

    @property
    def all_key(self) -> str:
        """The reserved key of the full-collection snapshot."""
        ...

    def key_for(self, id: Any) -> str:
        """Build the cache key for an identifier.

        Args:
            id: The entity identifier.

        Returns:
            The cache key string.
        """
        ...

    def key_for_entity(self, entity: Any) -> str:
        """Build the cache key for an entity.

        Args:
            entity: The entity whose identifier is used.

        Returns:
            The cache key string.
        """
        ...

    def id_of(self, entity: Any) -> Any:
        """Extract the identifier of an entity.

        Args:
            entity: The entity to inspect.

        Returns:
            The entity identifier.
        """
        ...
