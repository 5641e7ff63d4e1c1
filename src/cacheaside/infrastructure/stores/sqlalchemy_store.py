"""SQLAlchemy persistent store adapter."""

import logging
from collections.abc import Sequence
from typing import Any, Generic, TypeVar

from sqlalchemy import delete, inspect, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from cacheaside.core.exceptions import ConfigError, NotFoundError, StoreError

logger = logging.getLogger(__name__)

T = TypeVar("T")
ID = TypeVar("ID")


class SqlAlchemyStoreAdapter(Generic[T, ID]):
    """Store adapter for one SQLAlchemy mapped model.

    Opens a short-lived session per call. Entities are returned detached
    with their column attributes loaded, so they stay usable after the
    session closes. Every SQLAlchemyError is wrapped in StoreError.
    """

    def __init__(
        self,
        session_factory: sessionmaker[Session],
        model: type[T],
        primary_key: str | None = None,
    ) -> None:
        """Initialize the adapter.

        Args:
            session_factory: Factory for sessions bound to the database.
            model: The mapped model class.
            primary_key: Name of the primary key attribute. Defaults to the
                mapper's primary key column when it has exactly one.

        Raises:
            ConfigError: If the primary key cannot be determined.
        """
        self._session_factory = session_factory
        self._model = model
        self._name = model.__name__
        self._pk_column = self._resolve_pk_column(model, primary_key)

    @staticmethod
    def _resolve_pk_column(model: type[Any], primary_key: str | None) -> Any:
        if primary_key is not None:
            column = getattr(model, primary_key, None)
            if column is None:
                raise ConfigError(
                    f"{model.__name__} has no attribute {primary_key!r}"
                )
            return column

        pk_columns = inspect(model).primary_key
        if len(pk_columns) != 1:
            raise ConfigError(
                f"{model.__name__} has a composite primary key; "
                "pass primary_key explicitly"
            )
        return pk_columns[0]

    def find_by_id(self, id: ID) -> T:
        """Load one entity by primary key."""
        try:
            with self._session_factory() as session:
                entity = session.scalars(
                    select(self._model).where(self._pk_column == id)
                ).first()
        except SQLAlchemyError as e:
            raise StoreError(f"Failed to load {self._name} {id!r}: {e}") from e

        if entity is None:
            raise NotFoundError(id)
        return entity

    def find_all(self) -> Sequence[T]:
        """Load every row of the model's table."""
        try:
            with self._session_factory() as session:
                return list(session.scalars(select(self._model)).all())
        except SQLAlchemyError as e:
            raise StoreError(f"Failed to load {self._name} rows: {e}") from e

    def find_by_ids(self, ids: Sequence[ID]) -> Sequence[T]:
        """Load the rows whose primary key is in ids."""
        if not ids:
            return []
        try:
            with self._session_factory() as session:
                stmt = select(self._model).where(self._pk_column.in_(list(ids)))
                return list(session.scalars(stmt).all())
        except SQLAlchemyError as e:
            raise StoreError(f"Failed to load {self._name} rows: {e}") from e

    def upsert(self, entity: T) -> T:
        """Insert or update an entity.

        Uses Session.merge, so the returned instance is the persisted one
        and carries any store-assigned primary key. The instance passed in
        is left untouched.
        """
        try:
            with self._session_factory() as session:
                merged = session.merge(entity)
                session.commit()
                # Reload after commit so attributes survive detaching
                session.refresh(merged)
                session.expunge(merged)
        except SQLAlchemyError as e:
            raise StoreError(f"Failed to save {self._name}: {e}") from e

        logger.debug("Upserted %s", self._name)
        return merged

    def delete_by_id(self, id: ID) -> None:
        """Delete the row with this primary key, if any."""
        try:
            with self._session_factory() as session:
                result = session.execute(
                    delete(self._model).where(self._pk_column == id)
                )
                deleted = result.rowcount
                session.commit()
        except SQLAlchemyError as e:
            raise StoreError(f"Failed to delete {self._name} {id!r}: {e}") from e

        logger.debug("Deleted %s %r (%d rows)", self._name, id, deleted)
