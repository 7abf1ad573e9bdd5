"""
Health check API endpoints.

Routes: GET /health, GET /health/db

Dependencies: fastapi, entity_gateway.boundary.store
System role: Health check HTTP API
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from entity_gateway.api.deps.dependencies import get_store
from entity_gateway.boundary.store.base import EntityStore


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    message: str


router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic health check."""
    return HealthResponse(status="healthy", message="Server Healthy")


@router.get("/db", response_model=HealthResponse, responses={503: {"model": HealthResponse}})
async def health_check_db(store: EntityStore = Depends(get_store)):
    """Store health check."""
    if await store.ping():
        return HealthResponse(status="healthy", message="Store connection OK")
    return JSONResponse(
        status_code=503,
        content={"status": "unhealthy", "message": "Store unreachable"},
    )
