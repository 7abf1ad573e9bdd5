"""
Application services.
"""

from entity_gateway.application.services.entity_gateway import EntityGateway

__all__ = ["EntityGateway"]
