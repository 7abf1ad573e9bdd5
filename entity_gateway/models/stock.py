"""
Stock schemas.

Dependencies: pydantic
System role: Stock API contracts
"""

from pydantic import BaseModel, Field


class CreateStockRequest(BaseModel):
    """Request schema for creating a stock."""

    name: str | None = Field(None, description="Stock name")
    price: int | None = Field(None, description="Price in the smallest currency unit")
    company: str | None = Field(None, description="Issuing company")


class UpdateStockRequest(CreateStockRequest):
    """Request schema for updating a stock; only fields sent are overwritten."""


class StockResponse(BaseModel):
    """Response schema for stock operations."""

    id: str
    name: str | None = None
    price: int | None = None
    company: str | None = None
