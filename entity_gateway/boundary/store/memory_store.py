"""
Process-local entity store.

Keeps documents in dicts with a per-collection auto-increment counter.
Every primitive completes without awaiting, so concurrent requests on one
event loop never interleave inside it.

Dependencies: itertools
System role: Test double and dependency-free local backend
"""

import copy
import itertools
from collections import defaultdict
from typing import Any

from entity_gateway.boundary.store.base import Document, EntityStore


class InMemoryEntityStore(EntityStore):
    """Dict-backed store; contents are lost when the process exits."""

    def __init__(self) -> None:
        self._collections: dict[str, dict[Any, Document]] = defaultdict(dict)
        self._counters: dict[str, itertools.count] = defaultdict(
            lambda: itertools.count(1)
        )
        # primitive names in call order
        self.calls: list[str] = []

    async def insert_one(self, collection: str, document: Document) -> Document:
        self.calls.append("insert_one")
        stored = copy.deepcopy(document)
        if stored.get("id") is None:
            stored["id"] = next(self._counters[collection])
        self._collections[collection][stored["id"]] = stored
        return copy.deepcopy(stored)

    async def find_by_id(self, collection: str, id: Any) -> Document | None:
        self.calls.append("find_by_id")
        document = self._collections[collection].get(id)
        return copy.deepcopy(document) if document is not None else None

    async def find_all(self, collection: str) -> list[Document]:
        self.calls.append("find_all")
        return [copy.deepcopy(doc) for doc in self._collections[collection].values()]

    async def replace_by_id(
        self, collection: str, id: Any, values: Document
    ) -> Document | None:
        self.calls.append("replace_by_id")
        document = self._collections[collection].get(id)
        if document is None:
            return None
        document.update({k: v for k, v in values.items() if k != "id"})
        return copy.deepcopy(document)

    async def delete_by_id(self, collection: str, id: Any) -> bool:
        self.calls.append("delete_by_id")
        return self._collections[collection].pop(id, None) is not None
