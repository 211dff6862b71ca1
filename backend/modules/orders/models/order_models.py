from sqlalchemy import (Column, Integer, String, ForeignKey, DateTime,
                        Numeric, Text)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from core.database import Base
from core.mixins import TimestampMixin
from core.status_updater import STATUS_MAX_LENGTH
from ..enums.order_enums import OrderStatus


class Order(Base, TimestampMixin):
    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"),
                     nullable=True, index=True)

    # Guest checkout details, used when there is no account
    customer_name = Column(String(200), nullable=True)
    customer_email = Column(String(255), nullable=True)
    customer_phone = Column(String(50), nullable=True)

    order_type = Column(String(20), nullable=False)
    delivery_address = Column(Text, nullable=True)
    status = Column(String(STATUS_MAX_LENGTH), nullable=False, index=True,
                    default=OrderStatus.PENDING.value)
    total_amount = Column(Numeric(10, 2), nullable=False)
    estimated_time = Column(Integer, nullable=True)  # minutes
    items_summary = Column(Text, nullable=True)
    order_date = Column(DateTime, nullable=False, default=func.now(),
                        index=True)

    order_items = relationship("OrderItem", back_populates="order",
                               cascade="all, delete-orphan")
    user = relationship("User", back_populates="orders")

    @property
    def display_name(self) -> str:
        """Name shown on the dashboard, most specific first."""
        if self.user is not None and self.user.full_name:
            return self.user.full_name
        return self.customer_name or self.customer_email or "Walk-in Customer"

    def __repr__(self):
        return f"<Order(id={self.id}, status='{self.status}', total={self.total_amount})>"


class OrderItem(Base, TimestampMixin):
    __tablename__ = "order_items"

    id = Column(Integer, primary_key=True, index=True)
    order_id = Column(Integer, ForeignKey("orders.id"),
                      nullable=False, index=True)
    menu_item_id = Column(Integer, ForeignKey("menu_items.id"),
                          nullable=False, index=True)
    quantity = Column(Integer, nullable=False)
    # Unit price copied from the menu when the order was placed
    price = Column(Numeric(10, 2), nullable=False)
    subtotal = Column(Numeric(10, 2), nullable=False)

    order = relationship("Order", back_populates="order_items")
    menu_item = relationship("MenuItem")

    @property
    def item_name(self) -> str:
        if self.menu_item is not None:
            return self.menu_item.name
        return f"Menu Item #{self.menu_item_id}"

    @property
    def description(self):
        return self.menu_item.description if self.menu_item is not None else None
