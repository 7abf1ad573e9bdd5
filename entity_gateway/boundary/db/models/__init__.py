"""
Database models package.

Exports:
  - BookModel: Book ORM model (store-assigned integer id)
  - UserModel: User ORM model (gateway-generated hex id)
  - StockModel: Stock ORM model (store-assigned integer id)

Dependencies: sqlalchemy, entity_gateway.boundary.db.base
System role: Database model definitions for entities
"""

from entity_gateway.boundary.db.models.book_model import BookModel
from entity_gateway.boundary.db.models.stock_model import StockModel
from entity_gateway.boundary.db.models.user_model import UserModel

__all__ = ["BookModel", "UserModel", "StockModel"]
