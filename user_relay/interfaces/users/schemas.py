"""
Pydantic schemas for the users API.

These schemas define the API contract. No business logic belongs here.
"""

from pydantic import BaseModel, Field


class UserResponse(BaseModel):
    """Body of a successful user lookup. Field order is the wire order."""

    email: str = Field(..., description="The user's email address")
    name: str = Field(..., description="The user's display name")


class ErrorResponse(BaseModel):
    """Envelope returned for every non-2xx response."""

    error: str = Field(..., description="Human-readable error message")
    status_code: int = Field(..., description="HTTP status code of the response")


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str
    version: str
