"""
Request/response schemas for the entity routes.
"""

from entity_gateway.models.book import BookResponse, CreateBookRequest, UpdateBookRequest
from entity_gateway.models.common import ErrorResponse
from entity_gateway.models.stock import CreateStockRequest, StockResponse, UpdateStockRequest
from entity_gateway.models.user import CreateUserRequest, UpdateUserRequest, UserResponse

__all__ = [
    "ErrorResponse",
    "CreateBookRequest",
    "UpdateBookRequest",
    "BookResponse",
    "CreateUserRequest",
    "UpdateUserRequest",
    "UserResponse",
    "CreateStockRequest",
    "UpdateStockRequest",
    "StockResponse",
]
