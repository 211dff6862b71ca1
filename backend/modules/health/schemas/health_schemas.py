"""
Health check schemas.
"""

from datetime import datetime

from core.schemas import CamelModel


class ServiceStatus(CamelModel):
    message: str
    environment: str
    timestamp: datetime


class DatabaseHealth(CamelModel):
    status: str
    response_time_ms: float
