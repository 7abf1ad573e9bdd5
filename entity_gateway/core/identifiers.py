"""
Identifier policies and the identifier guard.

Each entity kind either lets the store assign its identifier
(auto-increment) or has the gateway generate one at creation time.
The policy also knows what a well-formed identifier looks like, so
malformed ids are rejected before any store access.

Dependencies: secrets, re
System role: Identifier assignment and format validation
"""

import re
import secrets
from abc import ABC, abstractmethod
from typing import Any

from entity_gateway.core.exceptions import MalformedIdentifierError

_INT64_MAX = 2**63 - 1
_INT64_MAX_DIGITS = len(str(_INT64_MAX))


class IdentifierPolicy(ABC):
    """Assignment and validation rules for one entity kind's identifiers."""

    @abstractmethod
    def assign(self) -> Any | None:
        """Return a new identifier, or None when the store assigns it."""

    @abstractmethod
    def is_well_formed(self, raw: str) -> bool:
        """Check the wire form of an identifier without touching the store."""

    @abstractmethod
    def parse(self, raw: str) -> Any:
        """Convert a well-formed wire identifier to its stored form."""


class StoreAssignedIntegerPolicy(IdentifierPolicy):
    """Auto-increment integer keys assigned by the store."""

    _pattern = re.compile(r"[1-9][0-9]*")

    def assign(self) -> None:
        return None

    def is_well_formed(self, raw: str) -> bool:
        if len(raw) > _INT64_MAX_DIGITS or not self._pattern.fullmatch(raw):
            return False
        return int(raw) <= _INT64_MAX

    def parse(self, raw: str) -> int:
        return int(raw)


class GeneratedHexPolicy(IdentifierPolicy):
    """
    Hex tokens generated by the gateway at creation time.

    Tokens are 12 random bytes rendered as 24 hex characters, the same
    shape as a document-store object id.
    """

    _pattern = re.compile(r"[0-9a-fA-F]{24}")

    def assign(self) -> str:
        return secrets.token_hex(12)

    def is_well_formed(self, raw: str) -> bool:
        return bool(self._pattern.fullmatch(raw))

    def parse(self, raw: str) -> str:
        return raw.lower()


def require_identifier(policy: IdentifierPolicy, raw: str, entity: str) -> Any:
    """
    Guard applied before every identifier-taking operation.

    Args:
        policy: Identifier policy of the entity kind
        raw: Identifier as received on the wire
        entity: Entity kind, used in the error

    Returns:
        The parsed identifier in its stored form

    Raises:
        MalformedIdentifierError: If raw is not well-formed for the policy
    """
    if not isinstance(raw, str) or not policy.is_well_formed(raw):
        raise MalformedIdentifierError(entity, str(raw))
    return policy.parse(raw)
