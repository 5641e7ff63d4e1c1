"""Pytest configuration for cacheaside tests."""

from collections.abc import Callable, Sequence
from dataclasses import dataclass, replace
from datetime import timedelta
from typing import Any

import pytest

from cacheaside import (
    CacheAsideRepository,
    CacheConfig,
    InMemoryCacheBackend,
    NotFoundError,
    create_repository,
)


@dataclass
class User:
    """Minimal entity used by the unit tests."""

    id: int | None
    name: str


class FakeStore:
    """Dict-backed store adapter that counts every call."""

    def __init__(self) -> None:
        self.rows: dict[int, User] = {}
        self.calls: dict[str, int] = {
            "find_by_id": 0,
            "find_all": 0,
            "find_by_ids": 0,
            "upsert": 0,
            "delete_by_id": 0,
        }
        self.batches: list[list[Any]] = []
        self.fail_with: Exception | None = None
        self._next_id = 1000

    def make(self, id: int | None, name: str) -> User:
        """Create a user without persisting it."""
        return User(id=id, name=name)

    def add(self, id: int, name: str) -> User:
        """Persist a user directly, bypassing any repository."""
        user = User(id=id, name=name)
        self.rows[id] = user
        return user

    def _call(self, name: str) -> None:
        self.calls[name] += 1
        if self.fail_with is not None:
            raise self.fail_with

    def find_by_id(self, id: int) -> User:
        self._call("find_by_id")
        try:
            return self.rows[id]
        except KeyError:
            raise NotFoundError(id) from None

    def find_all(self) -> Sequence[User]:
        self._call("find_all")
        return list(self.rows.values())

    def find_by_ids(self, ids: Sequence[int]) -> Sequence[User]:
        self._call("find_by_ids")
        self.batches.append(list(ids))
        return [self.rows[id] for id in ids if id in self.rows]

    def upsert(self, entity: User) -> User:
        self._call("upsert")
        if entity.id is None:
            self._next_id += 1
            entity = replace(entity, id=self._next_id)
        self.rows[entity.id] = entity  # type: ignore[index]
        return entity

    def delete_by_id(self, id: int) -> None:
        self._call("delete_by_id")
        self.rows.pop(id, None)


class FakeClock:
    """Manually advanced clock for TTL tests."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture(autouse=True)
def reset_cache_tables():
    """Reset the process-wide cache table registry around each test."""
    import cacheaside.infrastructure.backends.memory

    cacheaside.infrastructure.backends.memory._tables.clear()

    yield

    cacheaside.infrastructure.backends.memory._tables.clear()


@pytest.fixture
def store() -> FakeStore:
    """Create an empty fake store."""
    return FakeStore()


@pytest.fixture
def clock() -> FakeClock:
    """Create a fake clock."""
    return FakeClock()


@pytest.fixture
def make_repository(
    store: FakeStore, clock: FakeClock
) -> Callable[..., CacheAsideRepository[User, int]]:
    """Factory for repositories over the fake store and fake clock.

    Keyword arguments override the CacheConfig defaults.
    """

    def factory(**overrides: Any) -> CacheAsideRepository[User, int]:
        settings: dict[str, Any] = {
            "namespace": "users",
            "key_extractor": lambda user: user.id,
            "ttl": timedelta(minutes=10),
        }
        settings.update(overrides)
        config = CacheConfig(**settings)
        backend = InMemoryCacheBackend(namespace=config.namespace, timer=clock)
        return create_repository(store, config, backend=backend)

    return factory
