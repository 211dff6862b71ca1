from typing import List, Optional
from datetime import datetime

from pydantic import Field

from core.schemas import CamelModel


class OrderItemIn(CamelModel):
    menu_item_id: int
    quantity: int = 1


class OrderCreate(CamelModel):
    user_id: Optional[int] = None
    customer_name: Optional[str] = Field(None, max_length=200)
    customer_email: Optional[str] = Field(None, max_length=255)
    customer_phone: Optional[str] = Field(None, max_length=50)
    order_type: Optional[str] = None
    delivery_address: Optional[str] = None
    items: List[OrderItemIn] = Field(default_factory=list)


class OrderCreated(CamelModel):
    order_id: int


class OrderStatusUpdate(CamelModel):
    status: Optional[str] = None
    estimated_time: Optional[int] = Field(None, ge=0)


class OrderOut(CamelModel):
    id: int
    user_id: Optional[int] = None
    display_name: str
    customer_email: Optional[str] = None
    customer_phone: Optional[str] = None
    order_type: str
    delivery_address: Optional[str] = None
    status: str
    total_amount: float
    estimated_time: Optional[int] = None
    items_summary: Optional[str] = None
    order_date: datetime


class OrderItemOut(CamelModel):
    id: int
    menu_item_id: int
    item_name: str
    description: Optional[str] = None
    quantity: int
    price: float
    subtotal: float


class OrderDetails(CamelModel):
    order_id: int
    items: List[OrderItemOut]
    count: int
