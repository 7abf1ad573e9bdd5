"""
Entity definitions.

Binds each entity kind to its path segment, table, ORM model, wire
schemas and identifier policy. The API and store layers are generic and
are driven entirely by these definitions.

Dependencies: pydantic, entity_gateway.boundary.db.models, entity_gateway.core
System role: Registry of exposed entity kinds
"""

from collections.abc import Iterable
from dataclasses import dataclass

from pydantic import BaseModel

from entity_gateway.boundary.db.base import Base
from entity_gateway.boundary.db.models import BookModel, StockModel, UserModel
from entity_gateway.core.identifiers import (
    GeneratedHexPolicy,
    IdentifierPolicy,
    StoreAssignedIntegerPolicy,
)
from entity_gateway.models import (
    BookResponse,
    CreateBookRequest,
    CreateStockRequest,
    CreateUserRequest,
    StockResponse,
    UpdateBookRequest,
    UpdateStockRequest,
    UpdateUserRequest,
    UserResponse,
)


@dataclass(frozen=True)
class EntityDefinition:
    """
    Everything the gateway needs to serve one entity kind.

    Attributes:
        name: Singular name, used as the URL path segment
        collection: Table or collection name in the store
        model: ORM model for the relational store
        create_schema: Body schema for POST
        update_schema: Body schema for PUT
        response_schema: Schema of returned entities
        id_policy: Identifier assignment and validation rules
    """

    name: str
    collection: str
    model: type[Base]
    create_schema: type[BaseModel]
    update_schema: type[BaseModel]
    response_schema: type[BaseModel]
    id_policy: IdentifierPolicy


BOOK = EntityDefinition(
    name="book",
    collection="books",
    model=BookModel,
    create_schema=CreateBookRequest,
    update_schema=UpdateBookRequest,
    response_schema=BookResponse,
    id_policy=StoreAssignedIntegerPolicy(),
)

USER = EntityDefinition(
    name="user",
    collection="users",
    model=UserModel,
    create_schema=CreateUserRequest,
    update_schema=UpdateUserRequest,
    response_schema=UserResponse,
    id_policy=GeneratedHexPolicy(),
)

STOCK = EntityDefinition(
    name="stock",
    collection="stocks",
    model=StockModel,
    create_schema=CreateStockRequest,
    update_schema=UpdateStockRequest,
    response_schema=StockResponse,
    id_policy=StoreAssignedIntegerPolicy(),
)

ENTITY_DEFINITIONS: dict[str, EntityDefinition] = {
    definition.name: definition for definition in (BOOK, USER, STOCK)
}


def get_definitions(names: Iterable[str]) -> list[EntityDefinition]:
    """
    Resolve enabled entity names to their definitions.

    Args:
        names: Entity names, e.g. from SERVER_ENTITIES

    Returns:
        list[EntityDefinition]: Definitions in the given order

    Raises:
        ValueError: If a name is not a known entity kind
    """
    unknown = [name for name in names if name not in ENTITY_DEFINITIONS]
    if unknown:
        raise ValueError(
            f"Unknown entities: {', '.join(unknown)}. "
            f"Known: {', '.join(ENTITY_DEFINITIONS)}"
        )
    return [ENTITY_DEFINITIONS[name] for name in names]
