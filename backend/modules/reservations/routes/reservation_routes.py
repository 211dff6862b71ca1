# backend/modules/reservations/routes/reservation_routes.py

"""
Reservation API routes.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from core.database import get_db
from core.exceptions import InvalidInputError
from core.schemas import MessageResponse

from ..schemas import (
    AvailableSlotsResponse,
    ReservationCreate,
    ReservationCreated,
    ReservationResponse,
    ReservationStatusUpdate,
)
from ..services import AvailabilityService, ReservationService

router = APIRouter(prefix="/api/reservations", tags=["Reservations"])


def get_reservation_service(db: Session = Depends(get_db)) -> ReservationService:
    return ReservationService(db)


def get_availability_service(db: Session = Depends(get_db)) -> AvailabilityService:
    return AvailabilityService(db)


@router.get("", response_model=List[ReservationResponse])
async def list_reservations(
    service: ReservationService = Depends(get_reservation_service),
):
    """Upcoming reservations for the dashboard, earliest first."""
    return service.list_upcoming()


@router.post("", response_model=ReservationCreated, status_code=status.HTTP_201_CREATED)
async def create_reservation(
    reservation_data: ReservationCreate,
    service: ReservationService = Depends(get_reservation_service),
):
    """
    Book a table.

    The slot is not re-checked against concurrent bookings, so use
    the availability endpoint first.
    """
    reservation = service.create_reservation(reservation_data)
    return ReservationCreated(reservation_id=reservation.id)


@router.get("/availability", response_model=AvailableSlotsResponse)
@router.get("/available-slots", response_model=AvailableSlotsResponse, include_in_schema=False)
async def get_available_slots(
    date: Optional[str] = Query(None, description="Reservation date, YYYY-MM-DD"),
    guests: Optional[str] = Query(None, description="Party size"),
    service: AvailabilityService = Depends(get_availability_service),
):
    """Times on `date` that can still seat `guests` people, as HH:MM."""
    if not date or not guests:
        raise InvalidInputError("Date and guests parameters are required")

    slots = service.get_available_slots(date, guests)
    return AvailableSlotsResponse(available_slots=[slot.strftime("%H:%M") for slot in slots])


@router.get("/{reservation_id}", response_model=ReservationResponse)
async def get_reservation(
    reservation_id: int,
    service: ReservationService = Depends(get_reservation_service),
):
    return service.get_reservation(reservation_id)


@router.put("/{reservation_id}/status", response_model=MessageResponse)
async def update_reservation_status(
    reservation_id: int,
    status_update: ReservationStatusUpdate,
    service: ReservationService = Depends(get_reservation_service),
):
    """Set the reservation status and, optionally, the assigned table."""
    service.update_status(reservation_id, status_update.status, status_update.table_number)
    return MessageResponse(message="Reservation status updated")
