"""
User ORM model.

Dependencies: sqlalchemy, entity_gateway.boundary.db.base
System role: User persistence for the users routes
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from entity_gateway.boundary.db.base import Base, HexIdMixin


class UserModel(Base, HexIdMixin):
    """
    User ORM model.

    Identifiers are generated by the gateway, mirroring document-store
    object ids.

    Attributes:
        id: 24-char hex primary key
        name: Display name
        email: Email address, stored as given
        gender: Free text
        age: Age in years
    """

    __tablename__ = "users"

    name: Mapped[str | None] = mapped_column(String(255), nullable=True, default=None)
    email: Mapped[str | None] = mapped_column(String(320), nullable=True, default=None)
    gender: Mapped[str | None] = mapped_column(String(64), nullable=True, default=None)
    age: Mapped[int | None] = mapped_column(Integer, nullable=True, default=None)
