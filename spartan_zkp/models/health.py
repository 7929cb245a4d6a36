from __future__ import annotations

"""
Health, preflight and error envelope models.
"""

from typing import List

from pydantic import BaseModel, Field

from ..errors import AVAILABLE_ENDPOINTS


class HealthResponse(BaseModel):
    status: str = Field("healthy", description="Always 'healthy' while the process serves requests.")
    service: str
    version: str
    timestamp: str = Field(..., description="RFC 3339 time of the response (UTC).")
    uptime: str = Field("online")
    uptime_seconds: float = Field(..., ge=0)
    endpoints: List[str] = Field(default_factory=lambda: list(AVAILABLE_ENDPOINTS))


class PreflightResponse(BaseModel):
    message: str = "CORS preflight successful"
    allowed_methods: List[str] = Field(default_factory=lambda: ["GET", "POST", "OPTIONS"])
    allowed_headers: List[str] = Field(default_factory=lambda: ["Content-Type", "Authorization"])


class ErrorResponse(BaseModel):
    success: bool = False
    error: str
    timestamp: str


__all__ = ["HealthResponse", "PreflightResponse", "ErrorResponse"]
