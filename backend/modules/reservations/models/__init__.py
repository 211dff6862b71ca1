from .reservation_models import (
    ACTIVE_STATUSES,
    RESERVATION_TRANSITIONS,
    Reservation,
    ReservationStatus,
)

__all__ = [
    "ACTIVE_STATUSES",
    "RESERVATION_TRANSITIONS",
    "Reservation",
    "ReservationStatus",
]
