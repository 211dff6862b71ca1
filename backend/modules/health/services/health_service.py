"""
Health check service.
"""

import logging
import time
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from core.config import Settings, get_settings
from core.exceptions import ServiceUnavailableError
from ..schemas.health_schemas import DatabaseHealth, ServiceStatus

logger = logging.getLogger(__name__)


class HealthService:
    """Service for health check operations"""

    def __init__(self, db: Session, settings: Optional[Settings] = None):
        self.db = db
        self.settings = settings or get_settings()

    def service_status(self) -> ServiceStatus:
        return ServiceStatus(
            message=f"{self.settings.app_name} is running",
            environment=self.settings.environment,
            timestamp=datetime.now(timezone.utc),
        )

    def check_database(self) -> DatabaseHealth:
        """Run `SELECT 1`; raises ServiceUnavailableError when it fails."""
        start = time.perf_counter()
        try:
            self.db.execute(text("SELECT 1")).fetchone()
        except SQLAlchemyError:
            logger.exception("Database health check failed")
            raise ServiceUnavailableError(
                "Database connection failed", error_code="DATABASE_UNAVAILABLE"
            )

        return DatabaseHealth(
            status="connected",
            response_time_ms=round((time.perf_counter() - start) * 1000, 2),
        )
