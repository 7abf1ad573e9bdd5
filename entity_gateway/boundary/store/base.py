"""
Abstract entity store client.

The gateway only ever talks to a store through these primitives against
a named collection (a table for relational stores). Documents are plain
dicts keyed by attribute name, with the identifier under "id".

Dependencies: abc
System role: Store boundary contract
"""

from abc import ABC, abstractmethod
from typing import Any

Document = dict[str, Any]


class EntityStore(ABC):
    """Store connection shared by every request for the process lifetime."""

    async def open(self) -> None:
        """Prepare the store for use. Raises if the store is unreachable."""

    async def close(self) -> None:
        """Release connections held by the store."""

    async def ping(self) -> bool:
        """Return True if the store answers a trivial round-trip."""
        return True

    @abstractmethod
    async def insert_one(self, collection: str, document: Document) -> Document:
        """
        Insert a document and return it as stored.

        If the document carries no "id", the store assigns one.
        """

    @abstractmethod
    async def find_by_id(self, collection: str, id: Any) -> Document | None:
        """Return the document with this id, or None."""

    @abstractmethod
    async def find_all(self, collection: str) -> list[Document]:
        """Return every document in the collection."""

    @abstractmethod
    async def replace_by_id(
        self, collection: str, id: Any, values: Document
    ) -> Document | None:
        """Overwrite the given attributes; return the updated document or None."""

    @abstractmethod
    async def delete_by_id(self, collection: str, id: Any) -> bool:
        """Remove the document; return False if it did not exist."""
