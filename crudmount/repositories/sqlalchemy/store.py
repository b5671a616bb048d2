"""
Storage SQLAlchemy Implementation

Provides the Storer capability over any ORM model carrying the RecordMixin columns.
"""

import logging
import uuid
from typing import Any, List, Mapping, TypeVar

from sqlalchemy import ColumnElement, false, select, update
from sqlalchemy import Uuid
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from crudmount.common.errors import NotFoundError, PersistenceError
from crudmount.common.time import utc_naive_now
from crudmount.db.models import Base
from crudmount.repositories.base import Storer
from crudmount.repositories.filter import Filter

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SQLAlchemyStore(Storer):
    """
    Storer SQLAlchemy Implementation

    Each call opens its own session from the factory and commits it; the
    engine's connection pool is the only shared state.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        """
        Initialize Store

        Args:
            session_factory: Async session factory
        """
        self.session_factory = session_factory

    def _column(self, model: type[Any], key: str):
        """
        Resolve a mapped column by name

        Raises:
            PersistenceError: model has no such column
        """
        column = model.__table__.columns.get(key)
        if column is None:
            raise PersistenceError(
                message=f"Unknown field '{key}' for {model.__tablename__}",
                code="unknown_field",
            )
        return column

    def _criteria(self, model: type[Any], filter: Filter) -> list[ColumnElement[bool]]:
        """
        Build WHERE clauses from a filter, restricted to live records

        UUID columns accept string values; a string that is not a UUID cannot
        match any row, so the whole filter collapses to false.
        """
        clauses: list[ColumnElement[bool]] = [model.deleted_at.is_(None)]
        for key, value in filter.items():
            column = self._column(model, key)
            if isinstance(column.type, Uuid) and value is not None and not isinstance(value, uuid.UUID):
                try:
                    value = uuid.UUID(str(value))
                except ValueError:
                    return [false()]
            clauses.append(column.is_(None) if value is None else column == value)
        return clauses

    def _failure(self, operation: str, model: type[Any], exc: Exception) -> PersistenceError:
        logger.error("storage-%s failed on %s: %s", operation, model.__tablename__, exc)
        return PersistenceError(message=str(exc), details={"operation": operation})

    async def create(self, record: Any) -> int:
        """Create Record"""
        record.uuid = uuid.uuid4()
        model = type(record)
        async with self.session_factory() as session:
            session.add(record)
            try:
                await session.commit()
            except (SQLAlchemyError, OSError) as exc:
                await session.rollback()
                raise self._failure("create", model, exc) from exc
        logger.debug("Created %s %s", model.__tablename__, record.uuid)
        return 1

    async def get(self, model: type[T], filter: Filter) -> T:
        """Get first live record matching filter"""
        query = select(model).where(*self._criteria(model, filter)).order_by(model.uuid).limit(1)
        async with self.session_factory() as session:
            try:
                result = await session.execute(query)
            except (SQLAlchemyError, OSError) as exc:
                raise self._failure("get", model, exc) from exc
            record = result.scalars().first()
        if record is None:
            raise NotFoundError()
        return record

    async def list(self, model: type[T], filter: Filter) -> List[T]:
        """List live records matching filter"""
        query = select(model).where(*self._criteria(model, filter))
        async with self.session_factory() as session:
            try:
                result = await session.execute(query)
            except (SQLAlchemyError, OSError) as exc:
                raise self._failure("list", model, exc) from exc
            return list(result.scalars().all())

    async def update(self, model: type[Any], filter: Filter, values: Mapping[str, Any]) -> int:
        """Partially update live records matching filter"""
        changes = {self._column(model, key).key: value for key, value in values.items()}
        changes["updated_at"] = utc_naive_now()
        statement = update(model).where(*self._criteria(model, filter)).values(**changes)
        async with self.session_factory() as session:
            try:
                result = await session.execute(statement)
                await session.commit()
            except (SQLAlchemyError, OSError) as exc:
                await session.rollback()
                raise self._failure("update", model, exc) from exc
        return result.rowcount

    async def delete(self, model: type[Any], filter: Filter) -> int:
        """Soft-delete live records matching filter"""
        now = utc_naive_now()
        statement = (
            update(model)
            .where(*self._criteria(model, filter))
            .values(deleted_at=now, updated_at=now)
        )
        async with self.session_factory() as session:
            try:
                result = await session.execute(statement)
                await session.commit()
            except (SQLAlchemyError, OSError) as exc:
                await session.rollback()
                raise self._failure("delete", model, exc) from exc
        logger.debug("Soft-deleted %d row(s) from %s", result.rowcount, model.__tablename__)
        return result.rowcount

    async def run_migrations(self, *models: type[Any]) -> None:
        """Create missing tables for the given record types"""
        tables = [model.__table__ for model in models]
        logger.info("storage-run-migrations: %s", ", ".join(table.name for table in tables))
        async with self.session_factory() as session:
            try:
                await session.run_sync(
                    lambda sync_session: Base.metadata.create_all(
                        sync_session.connection(), tables=tables
                    )
                )
                await session.commit()
            except (SQLAlchemyError, OSError) as exc:
                await session.rollback()
                logger.error("storage-run-migrations failed: %s", exc)
                raise PersistenceError(message=str(exc), details={"operation": "migrate"}) from exc
