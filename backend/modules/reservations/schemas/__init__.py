from .reservation_schemas import (
    AvailableSlotsResponse,
    ReservationCreate,
    ReservationCreated,
    ReservationResponse,
    ReservationStatusUpdate,
)

__all__ = [
    "AvailableSlotsResponse",
    "ReservationCreate",
    "ReservationCreated",
    "ReservationResponse",
    "ReservationStatusUpdate",
]
