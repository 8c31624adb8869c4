"""
SQLAlchemy Store

Store implementation over a SQLAlchemy engine. Every operation runs in its
own short-lived session, committed on success and rolled back on failure.
Records handed back are detached from their session but keep their loaded
state (expire_on_commit=False), so they can be modified and saved later.
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any, TypeVar

from sqlalchemy import delete, func, select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from autocrud.errors import MigrationError, RecordNotFoundError, StoreError
from autocrud.persistence.migrations import auto_migrate
from autocrud.persistence.models import ID_FIELD, table_name

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT")


class SQLAlchemyStore:
    """Store backed by a SQLAlchemy engine."""

    def __init__(self, engine: Engine, session_factory: sessionmaker | None = None):
        self.engine = engine
        self.session_factory = session_factory or sessionmaker(
            bind=engine,
            autoflush=False,
            expire_on_commit=False,
        )

    @contextmanager
    def _session(self) -> Iterator[Session]:
        session = self.session_factory()
        try:
            yield session
            session.commit()
        except (SQLAlchemyError, OverflowError) as e:
            # OverflowError: the driver cannot bind an out-of-range integer
            session.rollback()
            raise StoreError(str(e)) from e
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    @staticmethod
    def _id_column(model: type):
        return getattr(model, ID_FIELD)

    def migrate(self, model: type) -> None:
        """Create or alter the table of model."""
        try:
            with self.engine.begin() as connection:
                auto_migrate(connection, model)
        except SQLAlchemyError as e:
            raise MigrationError(f"migration of {table_name(model)} failed: {e}") from e

    def insert(self, record: Any) -> None:
        """Insert record; its ID is populated afterwards."""
        with self._session() as session:
            session.add(record)

    def first_by_id(self, model: type[RecordT], record_id: int) -> RecordT:
        with self._session() as session:
            record = session.scalars(
                select(model).where(self._id_column(model) == record_id).limit(1)
            ).first()
            if record is None:
                raise RecordNotFoundError(table_name(model), record_id)
            return record

    def count(self, model: type) -> int:
        with self._session() as session:
            return session.scalar(select(func.count()).select_from(model)) or 0

    def query(
        self,
        model: type[RecordT],
        offset: int | None = None,
        limit: int | None = None,
    ) -> list[RecordT]:
        """Fetch records ordered by ID, optionally offset and limited."""
        statement = select(model).order_by(self._id_column(model))
        if offset is not None:
            statement = statement.offset(offset)
        if limit is not None:
            statement = statement.limit(limit)

        with self._session() as session:
            return list(session.scalars(statement).all())

    def save(self, record: Any) -> None:
        """Merge-write record (by primary key) back to its table."""
        with self._session() as session:
            session.merge(record)

    def delete(self, model: type, record_id: int) -> None:
        with self._session() as session:
            result = session.execute(
                delete(model).where(self._id_column(model) == record_id)
            )
            if result.rowcount == 0:
                raise RecordNotFoundError(table_name(model), record_id)
