# backend/modules/analytics/routers/analytics_router.py

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from core.database import get_db

from ..schemas.analytics_schemas import DashboardAnalytics
from ..services.dashboard_service import DashboardService

router = APIRouter(prefix="/api/analytics", tags=["Analytics & Reporting"])


def get_dashboard_service(db: Session = Depends(get_db)) -> DashboardService:
    return DashboardService(db)


@router.get("", response_model=DashboardAnalytics)
async def get_dashboard_analytics(
    service: DashboardService = Depends(get_dashboard_service),
):
    """
    Order and reservation totals for the admin dashboard.

    Revenue and popular items leave out cancelled orders.
    """
    return service.get_dashboard()
