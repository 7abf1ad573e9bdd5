"""
Shared test fixtures and configuration for entire test suite.

Provides: store doubles, SQLite-backed store, settings, API client
Dependencies: pytest, sqlalchemy, aiosqlite, fastapi
System role: Test infrastructure and fixture management
"""

import pytest
from fastapi.testclient import TestClient

from entity_gateway.api.main import create_app
from entity_gateway.application.definitions import BOOK, STOCK, USER
from entity_gateway.boundary.store import InMemoryEntityStore, SQLAlchemyEntityStore
from entity_gateway.configs.database import DatabaseSettings
from entity_gateway.configs.server import ServerSettings
from entity_gateway.configs.settings import Settings
from entity_gateway.configs.store import StoreSettings


@pytest.fixture
def memory_store() -> InMemoryEntityStore:
    """Provide an empty in-memory store."""
    return InMemoryEntityStore()


@pytest.fixture
async def sql_store():
    """
    Create SQLAlchemy store over an in-memory SQLite database.

    Yields:
        SQLAlchemyEntityStore: Opened store with entity tables created
    """
    from sqlalchemy.ext.asyncio import create_async_engine
    from sqlalchemy.pool import StaticPool

    # One shared connection so every session sees the same in-memory database
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    store = SQLAlchemyEntityStore(
        engine=engine,
        models={d.collection: d.model for d in (BOOK, USER, STOCK)},
        create_tables=True,
    )
    await store.open()

    yield store

    await store.close()


@pytest.fixture
def settings() -> Settings:
    """Provide settings pointing at the in-memory backend."""
    return Settings(
        database=DatabaseSettings(),
        store=StoreSettings(backend="memory"),
        server=ServerSettings(entities=["book", "user", "stock"]),
    )


@pytest.fixture
def app(settings: Settings, memory_store: InMemoryEntityStore):
    """Provide the API application wired to the in-memory store."""
    return create_app(settings=settings, store=memory_store)


@pytest.fixture
def client(app) -> TestClient:
    """Provide a test client (lifespan not run; store injected on app.state)."""
    return TestClient(app)
