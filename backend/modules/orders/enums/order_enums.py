from enum import Enum


class OrderStatus(str, Enum):
    PENDING = "Pending"
    PREPARING = "Preparing"
    READY = "Ready"
    DELIVERED = "Delivered"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"


class OrderType(str, Enum):
    DINE_IN = "Dine-in"
    PICKUP = "Pickup"
    DELIVERY = "Delivery"


# Used only when ENFORCE_STATUS_TRANSITIONS is on
ORDER_TRANSITIONS = {
    OrderStatus.PENDING.value: frozenset(
        {OrderStatus.PREPARING.value, OrderStatus.CANCELLED.value}
    ),
    OrderStatus.PREPARING.value: frozenset(
        {OrderStatus.READY.value, OrderStatus.CANCELLED.value}
    ),
    OrderStatus.READY.value: frozenset(
        {
            OrderStatus.DELIVERED.value,
            OrderStatus.COMPLETED.value,
            OrderStatus.CANCELLED.value,
        }
    ),
    OrderStatus.DELIVERED.value: frozenset({OrderStatus.COMPLETED.value}),
    OrderStatus.COMPLETED.value: frozenset(),
    OrderStatus.CANCELLED.value: frozenset(),
}
