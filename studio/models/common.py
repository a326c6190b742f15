"""
Common response models.

Error schema shared by the API's documented error responses.

Dependencies: pydantic
System role: Common API response structures
"""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Error response schema."""

    detail: str | dict = Field(description="Error message or structured error payload")
