"""
Test suite for EntityGateway.

Covers the CRUD contract over the in-memory store and a mocked store:
round-trips, not-found semantics, identifier guarding and store faults.

System role: Verification of the gateway use cases
"""

from unittest.mock import AsyncMock

import pytest

from entity_gateway.application.definitions import BOOK, USER
from entity_gateway.application.services import EntityGateway
from entity_gateway.boundary.store import EntityStore, InMemoryEntityStore
from entity_gateway.core.exceptions import (
    EntityNotFoundError,
    MalformedIdentifierError,
    StoreFaultError,
)


@pytest.fixture
def book_gateway(memory_store: InMemoryEntityStore) -> EntityGateway:
    """Provide a book gateway over the in-memory store."""
    return EntityGateway(store=memory_store, definition=BOOK)


@pytest.fixture
def user_gateway(memory_store: InMemoryEntityStore) -> EntityGateway:
    """Provide a user gateway over the in-memory store."""
    return EntityGateway(store=memory_store, definition=USER)


@pytest.fixture
def mock_store() -> AsyncMock:
    """Provide a mocked store client."""
    return AsyncMock(spec=EntityStore)


class TestCreate:
    """Test suite for EntityGateway.create_entity()."""

    @pytest.mark.asyncio
    async def test_create_should_return_entity_with_identifier(
        self, book_gateway: EntityGateway
    ) -> None:
        created = await book_gateway.create_entity({"title": "Dune"})

        assert created["id"]
        assert isinstance(created["id"], str)
        assert created["title"] == "Dune"

    @pytest.mark.asyncio
    async def test_create_should_ignore_client_supplied_id(
        self, book_gateway: EntityGateway, memory_store: InMemoryEntityStore
    ) -> None:
        created = await book_gateway.create_entity({"id": "999", "title": "Dune"})

        assert created["id"] == "1"
        assert await memory_store.find_by_id("books", 999) is None

    @pytest.mark.asyncio
    async def test_create_should_generate_hex_id_when_policy_requires(
        self, user_gateway: EntityGateway
    ) -> None:
        created = await user_gateway.create_entity({"name": "Ada", "age": 36})

        assert len(created["id"]) == 24
        assert USER.id_policy.is_well_formed(created["id"])

    @pytest.mark.asyncio
    async def test_create_should_not_send_id_for_store_assigned_policy(
        self, mock_store: AsyncMock
    ) -> None:
        # Arrange
        mock_store.insert_one.return_value = {"id": 3, "title": "Dune"}
        gateway = EntityGateway(store=mock_store, definition=BOOK)

        # Act
        await gateway.create_entity({"title": "Dune"})

        # Assert
        mock_store.insert_one.assert_awaited_once_with("books", {"title": "Dune"})

    @pytest.mark.asyncio
    async def test_create_should_propagate_store_fault(self, mock_store: AsyncMock) -> None:
        # Arrange
        mock_store.insert_one.side_effect = StoreFaultError("down", operation="insert_one")
        gateway = EntityGateway(store=mock_store, definition=BOOK)

        # Act / Assert
        with pytest.raises(StoreFaultError):
            await gateway.create_entity({"title": "Dune"})

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "payload",
        [
            {"title": "Dune"},
            {"title": "Emma", "author": "Jane Austen", "publication": "1815"},
            {"title": None, "author": None, "publication": None},
        ],
    )
    async def test_read_of_created_entity_equals_created_entity(
        self, book_gateway: EntityGateway, payload: dict
    ) -> None:
        created = await book_gateway.create_entity(payload)

        assert await book_gateway.get_entity(created["id"]) == created


class TestRead:
    """Test suite for EntityGateway.get_entity()."""

    @pytest.mark.asyncio
    async def test_read_should_raise_not_found_for_absent_id(
        self, book_gateway: EntityGateway
    ) -> None:
        with pytest.raises(EntityNotFoundError) as exc_info:
            await book_gateway.get_entity("41")

        assert not isinstance(exc_info.value, MalformedIdentifierError)

    @pytest.mark.asyncio
    async def test_read_malformed_id_should_not_touch_store(
        self, mock_store: AsyncMock
    ) -> None:
        gateway = EntityGateway(store=mock_store, definition=USER)

        with pytest.raises(MalformedIdentifierError):
            await gateway.get_entity("not-a-valid-id-format")

        mock_store.find_by_id.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_read_should_pass_parsed_id_to_store(self, mock_store: AsyncMock) -> None:
        # Arrange
        mock_store.find_by_id.return_value = {"id": 12, "title": "Dune"}
        gateway = EntityGateway(store=mock_store, definition=BOOK)

        # Act
        entity = await gateway.get_entity("12")

        # Assert
        mock_store.find_by_id.assert_awaited_once_with("books", 12)
        assert entity == {"id": "12", "title": "Dune"}


class TestList:
    """Test suite for EntityGateway.list_entities()."""

    @pytest.mark.asyncio
    async def test_list_should_be_empty_initially(self, book_gateway: EntityGateway) -> None:
        assert await book_gateway.list_entities() == []

    @pytest.mark.asyncio
    async def test_list_should_return_n_minus_m_entities(
        self, book_gateway: EntityGateway
    ) -> None:
        created = [await book_gateway.create_entity({"title": f"Book {i}"}) for i in range(5)]
        for entity in created[:2]:
            await book_gateway.delete_entity(entity["id"])

        remaining = await book_gateway.list_entities()

        assert len(remaining) == 3
        assert {e["id"] for e in remaining} == {e["id"] for e in created[2:]}


class TestUpdate:
    """Test suite for EntityGateway.update_entity()."""

    @pytest.mark.asyncio
    async def test_update_should_overwrite_only_given_attributes(
        self, book_gateway: EntityGateway
    ) -> None:
        created = await book_gateway.create_entity({"title": "Dune", "author": "Herbert"})

        updated = await book_gateway.update_entity(created["id"], {"title": "Dune Messiah"})

        assert updated == {**created, "title": "Dune Messiah"}

    @pytest.mark.asyncio
    async def test_update_should_never_change_identifier(
        self, book_gateway: EntityGateway
    ) -> None:
        created = await book_gateway.create_entity({"title": "Dune"})

        updated = await book_gateway.update_entity(created["id"], {"id": "77", "title": "X"})

        assert updated["id"] == created["id"]

    @pytest.mark.asyncio
    async def test_update_missing_should_raise_and_not_create(
        self, book_gateway: EntityGateway
    ) -> None:
        with pytest.raises(EntityNotFoundError):
            await book_gateway.update_entity("5", {"title": "Ghost"})

        assert await book_gateway.list_entities() == []

    @pytest.mark.asyncio
    async def test_update_with_empty_payload_returns_current_entity(
        self, book_gateway: EntityGateway
    ) -> None:
        created = await book_gateway.create_entity({"title": "Dune"})

        assert await book_gateway.update_entity(created["id"], {}) == created

    @pytest.mark.asyncio
    async def test_update_with_empty_payload_on_missing_raises(
        self, book_gateway: EntityGateway
    ) -> None:
        with pytest.raises(EntityNotFoundError):
            await book_gateway.update_entity("5", {})

    @pytest.mark.asyncio
    async def test_update_malformed_id_should_not_touch_store(
        self, mock_store: AsyncMock
    ) -> None:
        gateway = EntityGateway(store=mock_store, definition=BOOK)

        with pytest.raises(MalformedIdentifierError):
            await gateway.update_entity("abc", {"title": "X"})

        mock_store.replace_by_id.assert_not_awaited()
        mock_store.find_by_id.assert_not_awaited()


class TestDelete:
    """Test suite for EntityGateway.delete_entity()."""

    @pytest.mark.asyncio
    async def test_delete_should_return_confirmation(self, user_gateway: EntityGateway) -> None:
        created = await user_gateway.create_entity({"name": "Ada"})

        message = await user_gateway.delete_entity(created["id"])

        assert message == f"Deleted user {created['id']}"

    @pytest.mark.asyncio
    async def test_read_after_delete_should_raise_not_found(
        self, book_gateway: EntityGateway
    ) -> None:
        created = await book_gateway.create_entity({"title": "Dune"})
        await book_gateway.delete_entity(created["id"])

        with pytest.raises(EntityNotFoundError):
            await book_gateway.get_entity(created["id"])

    @pytest.mark.asyncio
    async def test_delete_missing_should_raise_not_found(
        self, book_gateway: EntityGateway
    ) -> None:
        with pytest.raises(EntityNotFoundError):
            await book_gateway.delete_entity("3")

    @pytest.mark.asyncio
    async def test_delete_malformed_id_should_not_touch_store(
        self, mock_store: AsyncMock
    ) -> None:
        gateway = EntityGateway(store=mock_store, definition=USER)

        with pytest.raises(MalformedIdentifierError):
            await gateway.delete_entity("1234")

        mock_store.delete_by_id.assert_not_awaited()


@pytest.mark.asyncio
async def test_dune_scenario(book_gateway: EntityGateway) -> None:
    """Create, list, delete, list again."""
    created = await book_gateway.create_entity({"title": "Dune"})
    assert created["id"] and created["title"] == "Dune"

    assert await book_gateway.list_entities() == [created]

    await book_gateway.delete_entity(created["id"])
    assert await book_gateway.list_entities() == []
