"""Domain services for cacheaside."""

from cacheaside.core.services.repository import CacheAsideRepository

__all__ = [
    "CacheAsideRepository",
]
