"""
Pydantic schemas shared by every router.
"""

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str
    version: str
    environment: str


class ErrorResponse(BaseModel):
    """Standard error body returned by all error handlers."""

    message: str
