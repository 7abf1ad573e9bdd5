"""
Entity store factory for selecting between SQLAlchemy and in-memory backends.

Depends on the STORE_BACKEND environment variable.

Dependencies: entity_gateway.boundary, entity_gateway.configs
System role: Store instantiation and selection
"""

import logging
from collections.abc import Iterable

from entity_gateway.boundary.db.connection import get_async_engine
from entity_gateway.boundary.store.base import EntityStore
from entity_gateway.boundary.store.memory_store import InMemoryEntityStore
from entity_gateway.boundary.store.sql_store import SQLAlchemyEntityStore
from entity_gateway.configs import Settings

logger = logging.getLogger(__name__)


def create_entity_store(settings: Settings, definitions: Iterable) -> EntityStore:
    """
    Build the store client for the enabled entity definitions.

    Args:
        settings: Application settings
        definitions: EntityDefinition objects whose collections the store serves

    Returns:
        EntityStore: Unopened store client

    Raises:
        ValueError: If STORE_BACKEND is invalid
    """
    backend = settings.store.backend.lower()

    if backend == "memory":
        logger.info("Creating in-memory entity store")
        return InMemoryEntityStore()

    elif backend == "sqlalchemy":
        logger.info(
            "Creating SQLAlchemy entity store",
            extra={"host": settings.database.host, "db": settings.database.db},
        )
        return SQLAlchemyEntityStore(
            engine=get_async_engine(settings.database),
            models={d.collection: d.model for d in definitions},
            create_tables=settings.database.create_tables,
        )

    else:
        raise ValueError(
            f"Invalid STORE_BACKEND: {backend}. Must be 'sqlalchemy' or 'memory'."
        )
