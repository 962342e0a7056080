"""Pydantic models for API request/response validation."""

from typing import Optional

from pydantic import BaseModel, Field


class BreachCheckRequest(BaseModel):
    """Request model for breach checks."""
    password: str = Field(..., min_length=1, max_length=1024, description="Password to check")


class BreachCountResponse(BaseModel):
    """Response model for breach count."""
    count: int = Field(..., ge=0)
    is_breached: bool


class BreachCheckResponse(BaseModel):
    """Response model for breach check.

    is_safe is None when the breach database could not be checked.
    """
    is_safe: Optional[bool]
    message: str


class ErrorResponse(BaseModel):
    """Error body for failed breach checks."""
    detail: str
    error: str


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    timestamp: str
    version: str
