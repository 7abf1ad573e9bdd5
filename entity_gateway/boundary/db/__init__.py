"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, IntegerIdMixin, HexIdMixin: Model building blocks
  - get_async_engine(), get_async_session_factory(): Async connection management
  - BookModel, UserModel, StockModel: Entity tables
  - BaseCRUD: Generic CRUD operations

Dependencies: sqlalchemy, entity_gateway.configs
System role: Relational persistence for entities
"""

from entity_gateway.boundary.db.base import Base, HexIdMixin, IntegerIdMixin
from entity_gateway.boundary.db.connection import (
    get_async_engine,
    get_async_session_factory,
)
from entity_gateway.boundary.db.models import BookModel, StockModel, UserModel
from entity_gateway.boundary.db.CRUD import BaseCRUD

__all__ = [
    # Base classes
    "Base",
    "IntegerIdMixin",
    "HexIdMixin",
    # Connection
    "get_async_engine",
    "get_async_session_factory",
    # Models
    "BookModel",
    "UserModel",
    "StockModel",
    # CRUD
    "BaseCRUD",
]
