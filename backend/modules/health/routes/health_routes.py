"""
Health check API endpoints.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from core.database import get_db

from ..schemas.health_schemas import DatabaseHealth, ServiceStatus
from ..services.health_service import HealthService

router = APIRouter(tags=["Health Monitoring"])


def get_health_service(db: Session = Depends(get_db)) -> HealthService:
    return HealthService(db)


@router.get("/", response_model=ServiceStatus)
async def read_root(service: HealthService = Depends(get_health_service)):
    return service.service_status()


@router.get("/api/health/db", response_model=DatabaseHealth)
async def database_health(service: HealthService = Depends(get_health_service)):
    """
    Database connectivity check.

    Returns 503 in the standard error format when the database is unreachable.
    """
    return service.check_database()
