"""
CRUD operations for database models.

Exports the generic CRUD class used by the SQL entity store.

Usage:
    from entity_gateway.boundary.db.CRUD import BaseCRUD

    book_crud = BaseCRUD(BookModel)
    book = await book_crud.get_by_id(db, 1)
"""

from entity_gateway.boundary.db.CRUD.base_crud import BaseCRUD

__all__ = ["BaseCRUD"]
