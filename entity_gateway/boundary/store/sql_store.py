"""
Relational entity store backed by async SQLAlchemy.

Each primitive runs in its own session and commits on success, so every
gateway operation is a single atomic request against the database.
Driver and ORM errors are surfaced as StoreFaultError.

Dependencies: sqlalchemy, entity_gateway.boundary.db
System role: Production store client
"""

import logging
from typing import Any

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

from entity_gateway.boundary.db.base import Base
from entity_gateway.boundary.db.connection import get_async_session_factory
from entity_gateway.boundary.db.CRUD.base_crud import BaseCRUD
from entity_gateway.boundary.store.base import Document, EntityStore
from entity_gateway.core.exceptions import StoreFaultError

logger = logging.getLogger(__name__)


class SQLAlchemyEntityStore(EntityStore):
    """
    Store client mapping collection names to ORM models.

    Args:
        engine: Async engine, owned by the store and disposed on close
        models: Collection (table) name to ORM model class
        create_tables: Issue CREATE TABLE IF NOT EXISTS for the models on open
    """

    def __init__(
        self,
        engine: AsyncEngine,
        models: dict[str, type[Base]],
        create_tables: bool = False,
    ) -> None:
        self.engine = engine
        self.session_factory = get_async_session_factory(engine)
        self.create_tables = create_tables
        self._cruds: dict[str, BaseCRUD] = {
            name: BaseCRUD(model) for name, model in models.items()
        }

    def _crud(self, collection: str, operation: str) -> BaseCRUD:
        try:
            return self._cruds[collection]
        except KeyError:
            raise StoreFaultError(
                f"Unknown collection: {collection}", operation=operation
            ) from None

    async def open(self) -> None:
        """
        Create missing tables (if enabled) and verify connectivity.

        Raises:
            SQLAlchemyError: If the database cannot be reached
        """
        if self.create_tables:
            tables = [crud.model.__table__ for crud in self._cruds.values()]
            async with self.engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all, tables=tables)
            logger.info(
                "Entity tables ensured",
                extra={"tables": [table.name for table in tables]},
            )
        async with self.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        logger.info("Connected to database", extra={"url": self.engine.url.render_as_string()})

    async def close(self) -> None:
        await self.engine.dispose()
        logger.info("Database engine disposed")

    async def ping(self) -> bool:
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
        except SQLAlchemyError as e:
            logger.warning("Database ping failed", extra={"error": str(e)})
            return False
        return True

    async def insert_one(self, collection: str, document: Document) -> Document:
        crud = self._crud(collection, "insert_one")
        values = {k: v for k, v in document.items() if not (k == "id" and v is None)}
        try:
            async with self.session_factory() as session:
                instance = await crud.create(session, **values)
                stored = instance.to_dict()
                await session.commit()
        except SQLAlchemyError as e:
            raise StoreFaultError(
                f"Failed to insert into {collection}",
                operation="insert_one",
                details={"error": str(e)},
            ) from e
        return stored

    async def find_by_id(self, collection: str, id: Any) -> Document | None:
        crud = self._crud(collection, "find_by_id")
        try:
            async with self.session_factory() as session:
                instance = await crud.get_by_id(session, id)
        except SQLAlchemyError as e:
            raise StoreFaultError(
                f"Failed to read from {collection}",
                operation="find_by_id",
                details={"error": str(e)},
            ) from e
        return instance.to_dict() if instance is not None else None

    async def find_all(self, collection: str) -> list[Document]:
        crud = self._crud(collection, "find_all")
        try:
            async with self.session_factory() as session:
                instances = await crud.get_all(session)
        except SQLAlchemyError as e:
            raise StoreFaultError(
                f"Failed to list {collection}",
                operation="find_all",
                details={"error": str(e)},
            ) from e
        return [instance.to_dict() for instance in instances]

    async def replace_by_id(
        self, collection: str, id: Any, values: Document
    ) -> Document | None:
        crud = self._crud(collection, "replace_by_id")
        try:
            async with self.session_factory() as session:
                instance = await crud.update_by_id(session, id, **values)
                updated = instance.to_dict() if instance is not None else None
                await session.commit()
        except SQLAlchemyError as e:
            raise StoreFaultError(
                f"Failed to update {collection}",
                operation="replace_by_id",
                details={"error": str(e)},
            ) from e
        return updated

    async def delete_by_id(self, collection: str, id: Any) -> bool:
        crud = self._crud(collection, "delete_by_id")
        try:
            async with self.session_factory() as session:
                deleted = await crud.delete_by_id(session, id)
                await session.commit()
        except SQLAlchemyError as e:
            raise StoreFaultError(
                f"Failed to delete from {collection}",
                operation="delete_by_id",
                details={"error": str(e)},
            ) from e
        return deleted
