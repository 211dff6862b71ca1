from .availability_service import AvailabilityService
from .booking_ledger import BookingLedger
from .reservation_service import ReservationService
from .slot_catalog import SlotCatalog

__all__ = [
    "AvailabilityService",
    "BookingLedger",
    "ReservationService",
    "SlotCatalog",
]
