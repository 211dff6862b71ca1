from .order_enums import ORDER_TRANSITIONS, OrderStatus, OrderType

__all__ = ["ORDER_TRANSITIONS", "OrderStatus", "OrderType"]
