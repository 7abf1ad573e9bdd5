"""
Common response models.

Dependencies: pydantic
System role: Common API response structures
"""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Error response schema."""

    detail: str = Field(description="Error message")
    error: str = Field(description="Error code: malformed_identifier, not_found or store_fault")
