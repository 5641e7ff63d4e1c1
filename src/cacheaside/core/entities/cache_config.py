"""Cache configuration entity."""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import timedelta
from typing import Any

from cacheaside.core.exceptions import ConfigError


@dataclass
class CacheConfig:
    """Cache configuration for one repository.

    Each entity type gets its own namespace, which selects a distinct
    cache table. The key extractor maps an entity to its identifier and
    must be supplied explicitly.

    TTL:
        None or zero means entries never expire and live until they are
        deleted or the table is flushed. A positive TTL is absolute,
        measured from insertion.

    Negative caching:
        When negative_caching=True, store misses on get_by_id are cached
        as ABSENT markers. batch_negative_caching extends this to ids a
        batch lookup could not resolve.
    """

    namespace: str
    key_extractor: Callable[[Any], Any] | None = None
    ttl: timedelta | None = None
    negative_caching: bool = False
    batch_negative_caching: bool = True
    max_size: int | None = None  # None = unbounded

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if not self.namespace:
            raise ConfigError("namespace must be a non-empty string")
        if self.key_extractor is None:
            raise ConfigError(
                f"key_extractor is required for namespace {self.namespace!r}"
            )
        if not callable(self.key_extractor):
            raise ConfigError("key_extractor must be callable")
        if self.ttl is not None and self.ttl < timedelta(0):
            raise ConfigError(f"ttl must not be negative, got {self.ttl}")
        if self.max_size is not None and self.max_size <= 0:
            raise ConfigError(f"max_size must be positive, got {self.max_size}")
