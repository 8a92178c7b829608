"""Pydantic schemas for API."""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Error middleware response body."""

    status: int = Field(description="HTTP status code")
    message: str = Field(description="Human readable error message")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str
