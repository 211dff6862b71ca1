# backend/modules/orders/services/order_service.py

import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, joinedload

from core.config import Settings, get_settings
from core.exceptions import InvalidInputError, NotFoundError, PersistenceError
from core.status_updater import StatusUpdater
from core.validators import normalize_email, optional_text
from modules.menu.models.menu_models import MenuItem

from ..enums.order_enums import ORDER_TRANSITIONS, OrderStatus, OrderType
from ..models.order_models import Order, OrderItem
from ..schemas.order_schemas import OrderCreate, OrderDetails, OrderItemOut

logger = logging.getLogger(__name__)

ORDER_TYPES = [order_type.value for order_type in OrderType]
CENTS = Decimal("0.01")


class OrderService:
    """Places orders and tracks them through the kitchen"""

    def __init__(self, db: Session, settings: Optional[Settings] = None):
        self.db = db
        self.settings = settings or get_settings()
        self.status_updater = StatusUpdater(
            db,
            Order,
            label="Order",
            transitions=ORDER_TRANSITIONS,
            enforce_transitions=self.settings.enforce_status_transitions,
        )

    def create_order(self, data: OrderCreate) -> Order:
        """
        Validate and store an order with its lines in one transaction.

        Unit prices are copied from the menu so later price changes do not
        rewrite order history.
        """
        order_type = self._validate_order_type(data.order_type)
        if not data.items:
            raise InvalidInputError("Order must contain at least one item")
        for line in data.items:
            if line.quantity < 1:
                raise InvalidInputError("Quantity must be at least 1")

        delivery_address = optional_text(data.delivery_address)
        if order_type == OrderType.DELIVERY.value and not delivery_address:
            raise InvalidInputError("Delivery address is required for delivery orders")

        customer_email = None
        if optional_text(data.customer_email):
            customer_email = normalize_email(data.customer_email)

        if data.user_id is not None:
            self._ensure_user_exists(data.user_id)

        menu_items = self._load_menu_items([line.menu_item_id for line in data.items])

        order_items = []
        summary_parts = []
        total = Decimal("0.00")
        for line in data.items:
            menu_item = menu_items[line.menu_item_id]
            unit_price = Decimal(str(menu_item.price)).quantize(CENTS, rounding=ROUND_HALF_UP)
            subtotal = (unit_price * line.quantity).quantize(CENTS, rounding=ROUND_HALF_UP)
            total += subtotal
            order_items.append(
                OrderItem(
                    menu_item_id=menu_item.id,
                    quantity=line.quantity,
                    price=unit_price,
                    subtotal=subtotal,
                )
            )
            summary_parts.append(f"{menu_item.name} ({line.quantity})")

        order = Order(
            user_id=data.user_id,
            customer_name=optional_text(data.customer_name),
            customer_email=customer_email,
            customer_phone=optional_text(data.customer_phone),
            order_type=order_type,
            delivery_address=delivery_address,
            status=OrderStatus.PENDING.value,
            total_amount=total.quantize(CENTS, rounding=ROUND_HALF_UP),
            items_summary=", ".join(summary_parts),
            order_items=order_items,
        )

        try:
            self.db.add(order)
            self.db.commit()
            self.db.refresh(order)
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("Failed to store order")
            raise PersistenceError()

        logger.info(
            f"Created order {order.id} ({order_type}) with {len(order_items)} lines, "
            f"total {order.total_amount:.2f}"
        )
        return order

    def list_orders(self) -> List[Order]:
        """All orders, newest first"""
        return (
            self.db.query(Order)
            .options(joinedload(Order.user))
            .order_by(Order.order_date.desc(), Order.id.desc())
            .all()
        )

    def get_order(self, order_id: int) -> Order:
        order = self.db.get(Order, order_id)
        if order is None:
            raise NotFoundError("Order not found", error_code="ORDER_NOT_FOUND")
        return order

    def get_order_details(self, order_id: int) -> OrderDetails:
        self.get_order(order_id)
        lines = (
            self.db.query(OrderItem)
            .options(joinedload(OrderItem.menu_item))
            .filter(OrderItem.order_id == order_id)
            .order_by(OrderItem.id)
            .all()
        )
        items = [OrderItemOut.model_validate(line) for line in lines]
        return OrderDetails(order_id=order_id, items=items, count=len(items))

    def update_status(
        self, order_id: int, status: Optional[str], estimated_time: Optional[int] = None
    ) -> None:
        self.status_updater.update(
            order_id,
            status.strip() if status else status,
            extra_values={"estimated_time": estimated_time},
        )

    def _validate_order_type(self, order_type: Optional[str]) -> str:
        value = optional_text(order_type)
        if value not in ORDER_TYPES:
            raise InvalidInputError(f"Order type must be one of: {', '.join(ORDER_TYPES)}")
        return value

    def _load_menu_items(self, item_ids: List[int]) -> Dict[int, MenuItem]:
        found = {
            item.id: item
            for item in self.db.query(MenuItem).filter(MenuItem.id.in_(list(set(item_ids)))).all()
        }
        for item_id in item_ids:
            item = found.get(item_id)
            if item is None:
                raise InvalidInputError(f"Menu item {item_id} does not exist")
            if not item.is_available:
                raise InvalidInputError(f"{item.name} is currently unavailable")
        return found

    def _ensure_user_exists(self, user_id: int) -> None:
        from modules.auth.models.user_models import User

        if self.db.get(User, user_id) is None:
            raise InvalidInputError("User account not found")
