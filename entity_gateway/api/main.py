"""
FastAPI application with assembled routers.

Initializes FastAPI app with one CRUD router per enabled entity and opens
the shared store client for the process lifetime.

Dependencies: fastapi, uvicorn, entity_gateway.api.routers
System role: API entry point with router assembly and server launch
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from entity_gateway import __version__
from entity_gateway.application.definitions import get_definitions
from entity_gateway.boundary.store import EntityStore, create_entity_store
from entity_gateway.configs import Settings, get_settings
from entity_gateway.observability import configure_logging
from entity_gateway.observability.middleware import (
    CorrelationMiddleware,
    RequestLoggingMiddleware,
)
from .routers import build_entity_router, health_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Opens the store once at startup; failure is fatal. Closes it on shutdown.
    """
    store = getattr(app.state, "store", None)
    if store is None:
        store = create_entity_store(app.state.settings, app.state.definitions)

    logger.info("Opening entity store", extra={"store": type(store).__name__})
    try:
        await store.open()
    except Exception:
        logger.critical("Cannot open entity store, aborting startup", exc_info=True)
        await store.close()
        raise
    app.state.store = store
    logger.info("Entity store ready")

    yield

    await store.close()
    logger.info("Entity store closed")


def create_app(
    settings: Settings | None = None,
    store: EntityStore | None = None,
) -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Args:
        settings: Application settings (defaults to get_settings())
        store: Pre-built store client; built from settings at startup if None

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    settings = settings or get_settings()
    definitions = get_definitions(settings.server.entities)

    app = FastAPI(
        title="Entity Store Gateway",
        description="Generic CRUD API over a relational store",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.definitions = definitions
    if store is not None:
        app.state.store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Observability middleware; correlation is added last so it runs outermost
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    app.include_router(health_router)
    for definition in definitions:
        app.include_router(build_entity_router(definition))

    return app


app = create_app()


def run() -> None:
    """Run the API with uvicorn using server settings."""
    settings = get_settings()
    configure_logging(settings.log_level)
    uvicorn.run(
        "entity_gateway.api.main:app",
        host=settings.server.host,
        port=settings.server.port,
    )


if __name__ == "__main__":
    run()
