"""
Application layer: entity definitions and the gateway service.
"""

from entity_gateway.application.definitions import (
    BOOK,
    ENTITY_DEFINITIONS,
    STOCK,
    USER,
    EntityDefinition,
    get_definitions,
)
from entity_gateway.application.services import EntityGateway

__all__ = [
    "EntityDefinition",
    "BOOK",
    "USER",
    "STOCK",
    "ENTITY_DEFINITIONS",
    "get_definitions",
    "EntityGateway",
]
