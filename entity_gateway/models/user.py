"""
User schemas.

Dependencies: pydantic
System role: User API contracts
"""

from pydantic import BaseModel, Field


class CreateUserRequest(BaseModel):
    """Request schema for creating a user."""

    name: str | None = Field(None, description="Display name")
    email: str | None = Field(None, description="Email address")
    gender: str | None = Field(None, description="Gender")
    age: int | None = Field(None, description="Age in years")


class UpdateUserRequest(CreateUserRequest):
    """Request schema for updating a user; only fields sent are overwritten."""


class UserResponse(BaseModel):
    """Response schema for user operations."""

    id: str
    name: str | None = None
    email: str | None = None
    gender: str | None = None
    age: int | None = None
