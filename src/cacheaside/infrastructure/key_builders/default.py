"""Default key builder implementation."""

from collections.abc import Callable
from typing import Any

from cacheaside.core.exceptions import ConfigError

ALL_KEY = "all"


class DefaultKeyBuilder:
    """Default key builder using the string form of the identifier.

    Per-entity keys look like ``id:42``. The prefix keeps every
    per-entity key distinct from the reserved ``all`` key, whatever the
    identifier's value.
    """

    def __init__(
        self,
        key_extractor: Callable[[Any], Any] | None,
        prefix: str = "id",
    ) -> None:
        """Initialize the key builder.

        Args:
            key_extractor: Function returning the identifier of an entity.
            prefix: Prefix for per-entity keys.

        Raises:
            ConfigError: If key_extractor is missing or not callable, or
                the prefix is empty.
        """
        if key_extractor is None or not callable(key_extractor):
            raise ConfigError("DefaultKeyBuilder requires a callable key_extractor")
        if not prefix:
            raise ConfigError("key prefix must be a non-empty string")
        self._key_extractor = key_extractor
        self._prefix = prefix

    @property
    def all_key(self) -> str:
        """The reserved key of the full-collection snapshot."""
        return ALL_KEY

    def key_for(self, id: Any) -> str:
        """Build the cache key for an identifier.

        Args:
            id: The entity identifier.

        Returns:
            The cache key string.
        """
        return f"{self._prefix}:{id}"

    def key_for_entity(self, entity: Any) -> str:
        """Build the cache key for an entity.

        Args:
            entity: The entity whose identifier is used.

        Returns:
            The cache key string.
        """
        return self.key_for(self.id_of(entity))

    def id_of(self, entity: Any) -> Any:
        """Extract the identifier of an entity."""
        return self._key_extractor(entity)
