"""Tests for DefaultKeyBuilder."""

from dataclasses import dataclass
from uuid import UUID

import pytest

from cacheaside.core.exceptions import ConfigError
from cacheaside.infrastructure.key_builders.default import ALL_KEY, DefaultKeyBuilder


@dataclass
class Account:
    account_no: str
    owner: str


class TestDefaultKeyBuilder:
    """Tests for DefaultKeyBuilder."""

    @pytest.fixture
    def key_builder(self) -> DefaultKeyBuilder:
        """Create a key builder for testing."""
        return DefaultKeyBuilder(key_extractor=lambda account: account.account_no)

    def test_key_for_id(self, key_builder: DefaultKeyBuilder) -> None:
        """Test building a key from an identifier."""
        assert key_builder.key_for(42) == "id:42"
        assert key_builder.key_for("abc") == "id:abc"

    def test_equal_ids_equal_keys(self, key_builder: DefaultKeyBuilder) -> None:
        """Keys are deterministic."""
        uid = UUID("12345678-1234-5678-1234-567812345678")

        assert key_builder.key_for(uid) == key_builder.key_for(UUID(str(uid)))

    def test_different_ids_different_keys(
        self, key_builder: DefaultKeyBuilder
    ) -> None:
        """Distinct ids map to distinct keys."""
        assert key_builder.key_for(1) != key_builder.key_for(2)

    def test_key_for_entity(self, key_builder: DefaultKeyBuilder) -> None:
        """The entity key uses the injected extractor."""
        account = Account(account_no="ACC-7", owner="alice")

        assert key_builder.key_for_entity(account) == "id:ACC-7"
        assert key_builder.key_for_entity(account) == key_builder.key_for("ACC-7")
        assert key_builder.id_of(account) == "ACC-7"

    def test_all_key(self, key_builder: DefaultKeyBuilder) -> None:
        """The collection key is the reserved constant."""
        assert key_builder.all_key == ALL_KEY == "all"

    def test_all_key_never_collides(self, key_builder: DefaultKeyBuilder) -> None:
        """An id spelled 'all' still gets its own key."""
        assert key_builder.key_for("all") != key_builder.all_key

    def test_custom_prefix(self) -> None:
        """Test building keys with a custom prefix."""
        key_builder = DefaultKeyBuilder(key_extractor=lambda e: e, prefix="user")

        assert key_builder.key_for(1) == "user:1"

    def test_missing_extractor(self) -> None:
        """A missing extractor fails at construction time."""
        with pytest.raises(ConfigError):
            DefaultKeyBuilder(key_extractor=None)

    def test_non_callable_extractor(self) -> None:
        """A non-callable extractor fails at construction time."""
        with pytest.raises(ConfigError):
            DefaultKeyBuilder(key_extractor="id")  # type: ignore[arg-type]

    def test_empty_prefix(self) -> None:
        """An empty prefix would let ids collide with the reserved key."""
        with pytest.raises(ConfigError):
            DefaultKeyBuilder(key_extractor=lambda e: e, prefix="")
