"""
Core domain layer: error taxonomy and identifier policies.
"""

from entity_gateway.core.exceptions import (
    EntityNotFoundError,
    GatewayError,
    MalformedIdentifierError,
    StoreFaultError,
)
from entity_gateway.core.identifiers import (
    GeneratedHexPolicy,
    IdentifierPolicy,
    StoreAssignedIntegerPolicy,
    require_identifier,
)

__all__ = [
    "GatewayError",
    "EntityNotFoundError",
    "MalformedIdentifierError",
    "StoreFaultError",
    "IdentifierPolicy",
    "StoreAssignedIntegerPolicy",
    "GeneratedHexPolicy",
    "require_identifier",
]
