"""
API routers.
"""

from .entities import build_entity_router
from .health import router as health_router

__all__ = ["build_entity_router", "health_router"]
