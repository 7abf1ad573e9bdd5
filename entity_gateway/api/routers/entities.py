"""
Entity CRUD endpoints.

Routes, for each enabled entity:
- POST /{entity}/ - Create entity
- GET /{entity}/ - List all entities
- GET /{entity}/{id} - Get single entity
- PUT /{entity}/{id} - Update entity
- DELETE /{entity}/{id} - Delete entity

Dependencies: entity_gateway.application, entity_gateway.models
System role: Generic entity HTTP API
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from entity_gateway.api.deps.dependencies import gateway_dependency
from entity_gateway.api.error_handling import handle_gateway_errors
from entity_gateway.application.definitions import EntityDefinition
from entity_gateway.application.services import EntityGateway
from entity_gateway.models.common import ErrorResponse

logger = logging.getLogger(__name__)

NOT_FOUND = {404: {"model": ErrorResponse}}
STORE_FAULT = {500: {"model": ErrorResponse}}


def build_entity_router(definition: EntityDefinition) -> APIRouter:
    """
    Build the CRUD router for one entity kind.

    Args:
        definition: Entity kind to expose

    Returns:
        APIRouter: Router mounted at /{definition.name}
    """
    router = APIRouter(prefix=f"/{definition.name}", tags=[definition.collection])
    get_gateway = gateway_dependency(definition)
    CreateRequest = definition.create_schema
    UpdateRequest = definition.update_schema
    Response = definition.response_schema

    @router.post("/", response_model=Response, responses=STORE_FAULT)
    @handle_gateway_errors
    async def create_entity(
        request: CreateRequest,
        gateway: EntityGateway = Depends(get_gateway),
    ):
        """Create a new entity; the identifier is assigned server-side."""
        return await gateway.create_entity(request.model_dump())

    @router.get("/", response_model=list[Response], responses=STORE_FAULT)
    @handle_gateway_errors
    async def list_entities(gateway: EntityGateway = Depends(get_gateway)):
        """List the whole collection."""
        entities = await gateway.list_entities()
        logger.info(
            f"Listed {definition.collection}",
            extra={"entity": definition.name, "count": len(entities)},
        )
        return entities

    @router.get(
        "/{entity_id}",
        response_model=Response,
        responses={**NOT_FOUND, **STORE_FAULT},
    )
    @handle_gateway_errors
    async def get_entity(
        entity_id: str,
        gateway: EntityGateway = Depends(get_gateway),
    ):
        """Get a single entity by identifier."""
        return await gateway.get_entity(entity_id)

    @router.put(
        "/{entity_id}",
        response_model=Response,
        responses={**NOT_FOUND, **STORE_FAULT},
    )
    @handle_gateway_errors
    async def update_entity(
        entity_id: str,
        request: UpdateRequest,
        gateway: EntityGateway = Depends(get_gateway),
    ):
        """Overwrite the attributes sent in the body."""
        return await gateway.update_entity(
            entity_id, request.model_dump(exclude_unset=True)
        )

    @router.delete(
        "/{entity_id}",
        response_class=PlainTextResponse,
        responses={**NOT_FOUND, **STORE_FAULT},
    )
    @handle_gateway_errors
    async def delete_entity(
        entity_id: str,
        gateway: EntityGateway = Depends(get_gateway),
    ):
        """Delete an entity; responds with a text confirmation."""
        return PlainTextResponse(await gateway.delete_entity(entity_id))

    return router
