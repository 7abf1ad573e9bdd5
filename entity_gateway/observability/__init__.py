"""
Observability module.

Provides logging configuration, correlation ID tracking and
request logging middleware.
"""

from entity_gateway.observability.correlation import (
    clear_correlation_id,
    get_correlation_id,
    set_correlation_id,
)
from entity_gateway.observability.logger import configure_logging

__all__ = [
    "configure_logging",
    "set_correlation_id",
    "get_correlation_id",
    "clear_correlation_id",
]
