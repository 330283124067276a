"""
Pydantic models for response serialization.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from myapp.config import HEALTH_STATUS_OK


class InfoResponse(BaseModel):
    """Greeting payload with server time and build version."""

    model_config = ConfigDict(frozen=True)

    message: str
    timestamp: datetime
    version: str


class HealthResponse(BaseModel):
    """Liveness probe response."""

    model_config = ConfigDict(frozen=True)

    status: str = HEALTH_STATUS_OK
    time: str
