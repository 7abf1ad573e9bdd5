"""
SQLAlchemy declarative base and identifier mixins.

Provides base class for all ORM models and reusable mixins for the two
identifier policies (store-assigned integer, gateway-generated hex).

Dependencies: sqlalchemy
System role: Foundation for all database models
"""

from typing import Any

from sqlalchemy import BigInteger, Integer, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """
    SQLAlchemy declarative base for ORM model registration.

    All database models inherit from this class to ensure they're
    registered with the metadata and included in table creation.
    """

    def to_dict(self) -> dict[str, Any]:
        """Return column values keyed by column name."""
        return {
            column.key: getattr(self, column.key)
            for column in self.__table__.columns
        }


class IntegerIdMixin:
    """
    Mixin providing an auto-increment integer primary key.

    BigInteger on PostgreSQL, plain INTEGER on SQLite so that SQLite
    still treats the column as ROWID alias and autoincrements it.

    Attributes:
        id: Store-assigned primary key
    """

    id: Mapped[int] = mapped_column(
        BigInteger().with_variant(Integer, "sqlite"),
        primary_key=True,
        autoincrement=True,
    )


class HexIdMixin:
    """
    Mixin providing a 24-character hex primary key.

    The value is generated by the gateway before insert, never by the store.

    Attributes:
        id: Gateway-generated hex token
    """

    id: Mapped[str] = mapped_column(
        String(24),
        primary_key=True,
        nullable=False,
    )
