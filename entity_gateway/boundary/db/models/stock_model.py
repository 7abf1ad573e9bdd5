"""
Stock ORM model.

Dependencies: sqlalchemy, entity_gateway.boundary.db.base
System role: Stock persistence for the stocks routes
"""

from sqlalchemy import BigInteger, String
from sqlalchemy.orm import Mapped, mapped_column

from entity_gateway.boundary.db.base import Base, IntegerIdMixin


class StockModel(Base, IntegerIdMixin):
    """
    Stock ORM model.

    Attributes:
        id: Auto-increment primary key
        name: Ticker or stock name
        price: Price in the smallest currency unit
        company: Issuing company
    """

    __tablename__ = "stocks"

    name: Mapped[str | None] = mapped_column(String(255), nullable=True, default=None)
    price: Mapped[int | None] = mapped_column(BigInteger, nullable=True, default=None)
    company: Mapped[str | None] = mapped_column(String(255), nullable=True, default=None)
