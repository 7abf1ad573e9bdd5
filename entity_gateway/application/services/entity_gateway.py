"""
Entity store gateway.

Stateless translation layer between decoded wire payloads and store
primitives for one entity kind.

Dependencies: entity_gateway.boundary.store, entity_gateway.core
System role: CRUD use case orchestration
"""

import logging
from typing import Any, TYPE_CHECKING

from entity_gateway.boundary.store.base import Document, EntityStore
from entity_gateway.core.exceptions import EntityNotFoundError, StoreFaultError
from entity_gateway.core.identifiers import require_identifier

if TYPE_CHECKING:
    from entity_gateway.application.definitions import EntityDefinition

logger = logging.getLogger(__name__)


class EntityGateway:
    """
    CRUD gateway for a single entity kind.

    Identifier-taking operations run the identifier guard before any store
    access, so malformed ids never cost a round-trip.
    """

    def __init__(self, store: EntityStore, definition: "EntityDefinition") -> None:
        """
        Initialize gateway with a store client and entity definition.

        Args:
            store: Store client shared across requests
            definition: Entity kind served by this gateway
        """
        self.store = store
        self.definition = definition

    @property
    def entity(self) -> str:
        return self.definition.name

    @property
    def collection(self) -> str:
        return self.definition.collection

    def _to_wire(self, document: Document) -> dict[str, Any]:
        return {**document, "id": str(document["id"])}

    def _attributes(self, payload: dict[str, Any]) -> dict[str, Any]:
        # The identifier is never taken from the client
        return {k: v for k, v in payload.items() if k != "id"}

    async def create_entity(self, payload: dict[str, Any]) -> dict[str, Any]:
        """
        Persist a new entity.

        Args:
            payload: Decoded attributes (any "id" is ignored)

        Returns:
            dict: Stored entity including its identifier

        Raises:
            StoreFaultError: If persistence fails
        """
        document = self._attributes(payload)
        generated_id = self.definition.id_policy.assign()
        if generated_id is not None:
            document["id"] = generated_id

        try:
            stored = await self.store.insert_one(self.collection, document)
        except StoreFaultError as e:
            logger.error(
                f"Failed to create {self.entity}",
                extra={"entity": self.entity, "error": str(e)},
            )
            raise

        entity = self._to_wire(stored)
        logger.info(
            f"{self.entity.capitalize()} created",
            extra={"entity": self.entity, "entity_id": entity["id"]},
        )
        return entity

    async def get_entity(self, entity_id: str) -> dict[str, Any]:
        """
        Get entity by ID.

        Args:
            entity_id: Identifier as received on the wire

        Returns:
            dict: The entity

        Raises:
            MalformedIdentifierError: If entity_id is not well-formed
            EntityNotFoundError: If no entity has this id
            StoreFaultError: If the store fails
        """
        key = require_identifier(self.definition.id_policy, entity_id, self.entity)
        document = await self.store.find_by_id(self.collection, key)
        if document is None:
            raise EntityNotFoundError(self.entity, entity_id)
        return self._to_wire(document)

    async def list_entities(self) -> list[dict[str, Any]]:
        """
        Get the whole collection.

        Returns:
            list[dict]: All entities, empty if none exist

        Raises:
            StoreFaultError: If the store fails
        """
        documents = await self.store.find_all(self.collection)
        return [self._to_wire(document) for document in documents]

    async def update_entity(
        self,
        entity_id: str,
        payload: dict[str, Any],
    ) -> dict[str, Any]:
        """
        Overwrite the attributes present in payload.

        Never creates an entity. An empty payload returns the entity unchanged.

        Args:
            entity_id: Identifier as received on the wire
            payload: Attributes to overwrite (full or partial)

        Returns:
            dict: Updated entity

        Raises:
            MalformedIdentifierError: If entity_id is not well-formed
            EntityNotFoundError: If no entity has this id
            StoreFaultError: If the store fails
        """
        key = require_identifier(self.definition.id_policy, entity_id, self.entity)
        values = self._attributes(payload)

        if not values:
            document = await self.store.find_by_id(self.collection, key)
        else:
            document = await self.store.replace_by_id(self.collection, key, values)

        if document is None:
            raise EntityNotFoundError(self.entity, entity_id)

        logger.info(
            f"{self.entity.capitalize()} updated",
            extra={"entity": self.entity, "entity_id": entity_id, "updates": list(values)},
        )
        return self._to_wire(document)

    async def delete_entity(self, entity_id: str) -> str:
        """
        Remove entity by ID.

        Args:
            entity_id: Identifier as received on the wire

        Returns:
            str: Confirmation message

        Raises:
            MalformedIdentifierError: If entity_id is not well-formed
            EntityNotFoundError: If no entity has this id
            StoreFaultError: If the store fails
        """
        key = require_identifier(self.definition.id_policy, entity_id, self.entity)
        deleted = await self.store.delete_by_id(self.collection, key)
        if not deleted:
            raise EntityNotFoundError(self.entity, entity_id)

        logger.info(
            f"{self.entity.capitalize()} deleted",
            extra={"entity": self.entity, "entity_id": entity_id},
        )
        return f"Deleted {self.entity} {entity_id}"
