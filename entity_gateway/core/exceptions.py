"""
Exception hierarchy for the entity gateway.

Provides layered exception structure for gateway and store errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class GatewayError(Exception):
    """Base exception for all entity gateway errors."""

    error_code = "gateway_error"

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class EntityNotFoundError(GatewayError):
    """Raised when an identifier does not resolve to a stored entity."""

    error_code = "not_found"

    def __init__(
        self,
        entity: str,
        entity_id: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize entity not found error.

        Args:
            entity: Entity kind (book, user, ...)
            entity_id: Identifier as received on the wire
            details: Additional context
        """
        self.entity = entity
        self.entity_id = entity_id
        details = details or {}
        details.update({"entity": entity, "entity_id": entity_id})
        super().__init__(f"{entity.capitalize()} not found: {entity_id}", details)


class MalformedIdentifierError(EntityNotFoundError):
    """
    Raised when an identifier is not well-formed for the entity's id policy.

    Subclasses EntityNotFoundError so callers that only care about
    resolution treat both the same, while the error code stays distinct.
    """

    error_code = "malformed_identifier"

    def __init__(
        self,
        entity: str,
        entity_id: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(entity, entity_id, details)
        self.message = f"Malformed {entity} identifier: {entity_id!r}"


class StoreFaultError(GatewayError):
    """Raised when the store fails (connection loss, write or decode failure)."""

    error_code = "store_fault"

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize store fault.

        Args:
            message: Error message
            operation: Store primitive that failed (insert_one, find_by_id, ...)
            details: Additional context
        """
        details = details or {}
        if operation:
            details["operation"] = operation
        super().__init__(message, details)
