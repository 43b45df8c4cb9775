"""
Response models for the system information endpoints.
"""

from pydantic import BaseModel
from typing import Dict


class APIInfo(BaseModel):
    """Model for API information."""
    message: str
    version: str
    docs: str
    endpoints: Dict[str, str]


class HealthResponse(BaseModel):
    """Model for health check response."""
    status: str
    service: str
    upstream: str  # generation data provider base URL
