"""
Book ORM model.

Dependencies: sqlalchemy, entity_gateway.boundary.db.base
System role: Book persistence for the bookstore routes
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from entity_gateway.boundary.db.base import Base, IntegerIdMixin


class BookModel(Base, IntegerIdMixin):
    """
    Book ORM model.

    Attributes:
        id: Auto-increment primary key
        title: Book title
        author: Author name
        publication: Publisher or publication year, free text
    """

    __tablename__ = "books"

    title: Mapped[str | None] = mapped_column(String(255), nullable=True, default=None)
    author: Mapped[str | None] = mapped_column(String(255), nullable=True, default=None)
    publication: Mapped[str | None] = mapped_column(
        String(255), nullable=True, default=None
    )
