# backend/modules/orders/routes/order_routes.py

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from core.database import get_db
from core.schemas import MessageResponse

from ..schemas.order_schemas import (
    OrderCreate,
    OrderCreated,
    OrderDetails,
    OrderOut,
    OrderStatusUpdate,
)
from ..services.order_service import OrderService

router = APIRouter(prefix="/api/orders", tags=["Orders"])


def get_order_service(db: Session = Depends(get_db)) -> OrderService:
    return OrderService(db)


@router.get("", response_model=List[OrderOut])
async def list_orders(order_service: OrderService = Depends(get_order_service)):
    return order_service.list_orders()


@router.post("", response_model=OrderCreated, status_code=status.HTTP_201_CREATED)
async def create_order(
    order_data: OrderCreate,
    order_service: OrderService = Depends(get_order_service),
):
    """
    Place an order. Prices come from the current menu; client-side prices
    are not trusted.
    """
    order = order_service.create_order(order_data)
    return OrderCreated(order_id=order.id)


@router.get("/{order_id}/details", response_model=OrderDetails)
async def get_order_details(
    order_id: int,
    order_service: OrderService = Depends(get_order_service),
):
    return order_service.get_order_details(order_id)


@router.put("/{order_id}/status", response_model=MessageResponse)
async def update_order_status(
    order_id: int,
    status_update: OrderStatusUpdate,
    order_service: OrderService = Depends(get_order_service),
):
    order_service.update_status(order_id, status_update.status, status_update.estimated_time)
    return MessageResponse(message="Order status updated")
