"""API-specific dependencies."""

from .dependencies import (
    gateway_dependency,
    get_store,
)

__all__ = [
    "gateway_dependency",
    "get_store",
]
