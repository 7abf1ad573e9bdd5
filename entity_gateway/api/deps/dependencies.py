"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: fastapi, entity_gateway.application, entity_gateway.boundary
System role: DI container for store and gateway injection
"""

from typing import Callable

from fastapi import Depends, Request

from entity_gateway.application.definitions import EntityDefinition
from entity_gateway.application.services import EntityGateway
from entity_gateway.boundary.store.base import EntityStore


def get_store(request: Request) -> EntityStore:
    """
    Get the store client opened at application startup.

    Args:
        request: Current request (used to reach app.state)

    Returns:
        EntityStore: Shared store client
    """
    return request.app.state.store


def gateway_dependency(
    definition: EntityDefinition,
) -> Callable[..., EntityGateway]:
    """
    Build a dependency yielding a gateway for one entity kind.

    Args:
        definition: Entity kind served by the gateway

    Returns:
        Callable: FastAPI dependency returning an EntityGateway
    """

    def get_gateway(store: EntityStore = Depends(get_store)) -> EntityGateway:
        return EntityGateway(store=store, definition=definition)

    get_gateway.__name__ = f"get_{definition.name}_gateway"
    return get_gateway
