# backend/modules/analytics/services/dashboard_service.py

import logging
from datetime import datetime
from typing import Callable, Dict, List, Optional

from sqlalchemy import desc, func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from core.exceptions import PersistenceError
from modules.menu.models.menu_models import MenuItem
from modules.orders.enums.order_enums import OrderStatus
from modules.orders.models.order_models import Order, OrderItem
from modules.reservations.models.reservation_models import ACTIVE_STATUSES, Reservation

from ..schemas.analytics_schemas import DashboardAnalytics, PopularItem

logger = logging.getLogger(__name__)

POPULAR_ITEMS_LIMIT = 5


class DashboardService:
    """Aggregates for the admin dashboard"""

    def __init__(self, db: Session, clock: Optional[Callable[[], datetime]] = None):
        self.db = db
        self.clock = clock or datetime.now

    def get_dashboard(self) -> DashboardAnalytics:
        try:
            orders_by_status = self._count_by_status(Order)
            reservations_by_status = self._count_by_status(Reservation)

            revenue = (
                self.db.query(func.coalesce(func.sum(Order.total_amount), 0))
                .filter(Order.status != OrderStatus.CANCELLED.value)
                .scalar()
            )

            upcoming = (
                self.db.query(func.count(Reservation.id))
                .filter(
                    Reservation.reservation_date >= self.clock().date(),
                    Reservation.status.in_(ACTIVE_STATUSES),
                )
                .scalar()
            )

            popular_items = self._popular_items()
        except SQLAlchemyError:
            logger.exception("Failed to compute dashboard analytics")
            raise PersistenceError()

        return DashboardAnalytics(
            total_orders=sum(orders_by_status.values()),
            total_revenue=round(float(revenue or 0), 2),
            orders_by_status=orders_by_status,
            reservations_by_status=reservations_by_status,
            upcoming_reservations=upcoming or 0,
            popular_items=popular_items,
        )

    def _count_by_status(self, model) -> Dict[str, int]:
        rows = (
            self.db.query(model.status, func.count(model.id))
            .group_by(model.status)
            .all()
        )
        return {status: count for status, count in rows}

    def _popular_items(self) -> List[PopularItem]:
        quantity = func.sum(OrderItem.quantity).label("quantity")
        rows = (
            self.db.query(MenuItem.id, MenuItem.name, quantity)
            .join(OrderItem, OrderItem.menu_item_id == MenuItem.id)
            .join(Order, OrderItem.order_id == Order.id)
            .filter(Order.status != OrderStatus.CANCELLED.value)
            .group_by(MenuItem.id, MenuItem.name)
            .order_by(desc("quantity"), MenuItem.name)
            .limit(POPULAR_ITEMS_LIMIT)
            .all()
        )
        return [
            PopularItem(menu_item_id=item_id, name=name, quantity=int(total))
            for item_id, name, total in rows
        ]
