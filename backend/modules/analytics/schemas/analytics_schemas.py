# backend/modules/analytics/schemas/analytics_schemas.py

from typing import Dict, List

from core.schemas import CamelModel


class PopularItem(CamelModel):
    menu_item_id: int
    name: str
    quantity: int


class DashboardAnalytics(CamelModel):
    total_orders: int
    total_revenue: float
    orders_by_status: Dict[str, int]
    reservations_by_status: Dict[str, int]
    upcoming_reservations: int
    popular_items: List[PopularItem]
