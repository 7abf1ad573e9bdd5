"""
Book schemas.

Dependencies: pydantic
System role: Book API contracts
"""

from pydantic import BaseModel, Field


class CreateBookRequest(BaseModel):
    """Request schema for creating a book."""

    title: str | None = Field(None, description="Book title")
    author: str | None = Field(None, description="Author name")
    publication: str | None = Field(None, description="Publisher or publication year")


class UpdateBookRequest(CreateBookRequest):
    """Request schema for updating a book; only fields sent are overwritten."""


class BookResponse(BaseModel):
    """Response schema for book operations."""

    id: str
    title: str | None = None
    author: str | None = None
    publication: str | None = None
