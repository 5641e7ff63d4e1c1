"""Key builder implementations."""

from cacheaside.infrastructure.key_builders.default import ALL_KEY, DefaultKeyBuilder

__all__ = [
    "ALL_KEY",
    "DefaultKeyBuilder",
]
