"""
Entity store boundary.

Exports:
  - EntityStore: Abstract store client consumed by the gateway
  - SQLAlchemyEntityStore: Relational store over an async SQLAlchemy engine
  - InMemoryEntityStore: Process-local store, used as a test double
  - create_entity_store(): Backend selection from settings
"""

from entity_gateway.boundary.store.base import EntityStore
from entity_gateway.boundary.store.factory import create_entity_store
from entity_gateway.boundary.store.memory_store import InMemoryEntityStore
from entity_gateway.boundary.store.sql_store import SQLAlchemyEntityStore

__all__ = [
    "EntityStore",
    "SQLAlchemyEntityStore",
    "InMemoryEntityStore",
    "create_entity_store",
]
