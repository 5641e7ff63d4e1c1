"""Cache entry entity."""

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Any


class EntryKind(Enum):
    """Tag of a cache entry.

    PRESENT: A single entity loaded from the store.
    ABSENT: The store confirmed the entity does not exist.
    COLLECTION: A full-collection snapshot.
    """

    PRESENT = "present"
    ABSENT = "absent"
    COLLECTION = "collection"


@dataclass(frozen=True)
class CacheEntry:
    """Immutable tagged cache value.

    Exactly one kind is active per entry, so a stored negative marker can
    never be mistaken for real data. Expiry is tracked by the backend that
    holds the entry, not by the entry itself.
    """

    kind: EntryKind
    value: Any = None

    @property
    def is_present(self) -> bool:
        """Check if the entry holds a single entity."""
        return self.kind is EntryKind.PRESENT

    @property
    def is_absent(self) -> bool:
        """Check if the entry is a negative marker."""
        return self.kind is EntryKind.ABSENT

    @property
    def is_collection(self) -> bool:
        """Check if the entry holds a full-collection snapshot."""
        return self.kind is EntryKind.COLLECTION

    @classmethod
    def present(cls, entity: Any) -> "CacheEntry":
        """Create an entry holding a single entity.

        Args:
            entity: The entity loaded from or written to the store.

        Returns:
            A new PRESENT entry.
        """
        return cls(kind=EntryKind.PRESENT, value=entity)

    @classmethod
    def absent(cls) -> "CacheEntry":
        """Create a negative marker entry."""
        return cls(kind=EntryKind.ABSENT)

    @classmethod
    def collection(cls, entities: Iterable[Any]) -> "CacheEntry":
        """Create an entry holding a collection snapshot.

        The entities are copied into a tuple so later changes to the
        caller's list do not leak into the cache.

        Args:
            entities: The entities returned by a full scan.

        Returns:
            A new COLLECTION entry.
        """
        return cls(kind=EntryKind.COLLECTION, value=tuple(entities))
