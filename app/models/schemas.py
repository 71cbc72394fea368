"""Pydantic schemas for API models."""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field


class GreetingResponse(BaseModel):
    """Response for the greeting endpoint."""
    message: str
    timestamp: datetime
    version: str
    host: str = ""


class StatusResponse(BaseModel):
    """Response for liveness and readiness probes."""
    status: str = Field(..., description="'healthy' for liveness, 'ready' for readiness")
    timestamp: datetime


class ErrorResponse(BaseModel):
    """Standard error response."""
    error: str
    message: str
    request_id: Optional[str] = None
    timestamp: datetime
