"""
Imports every model module so SQLAlchemy can resolve string relationships
and `Base.metadata` knows all tables (app startup, alembic, tests).
"""

from modules.auth.models.user_models import User
from modules.menu.models.menu_models import Category, MenuItem
from modules.orders.models.order_models import Order, OrderItem
from modules.reservations.models.reservation_models import Reservation

__all__ = [
    "User",
    "Category",
    "MenuItem",
    "Order",
    "OrderItem",
    "Reservation",
]
