# backend/modules/reservations/services/availability_service.py

"""
Service for computing bookable time slots and remaining capacity.
"""

import logging
from datetime import date, datetime, time, timedelta
from typing import Any, Callable, List, Optional, Union

from sqlalchemy.orm import Session

from core.config import Settings, get_settings

from .booking_ledger import BookingLedger
from .booking_rules import is_within_booking_window, parse_date, parse_party_size
from .slot_catalog import SlotCatalog

logger = logging.getLogger(__name__)


class AvailabilityService:
    """Service for finding the slots that can still seat a party"""

    def __init__(
        self,
        db: Session,
        settings: Optional[Settings] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.db = db
        self.settings = settings or get_settings()
        self.clock = clock or datetime.now
        self.catalog = SlotCatalog(self.settings)
        self.ledger = BookingLedger(db)

    def get_available_slots(self, target_date: Union[date, str], party_size: Any) -> List[time]:
        """
        Slots on `target_date` where at least `party_size` seats remain.

        Closed days, dates outside the booking window and parties above the
        maximum party size give an empty list. On the current day, slots
        closer than the lead time are dropped.

        Raises:
            InvalidInputError: unparseable date or non-positive guest count
        """
        day = parse_date(target_date)
        guests = parse_party_size(party_size)

        now = self.clock()
        today = now.date()

        if guests > self.settings.max_party_size:
            logger.info(f"Party of {guests} is above the online booking limit")
            return []
        if not is_within_booking_window(day, today, self.settings.advance_booking_days):
            return []

        slots = self.catalog.slots_for_date(day)
        if not slots:
            return []

        booked = self.ledger.booked_headcount(day)
        capacity = self.settings.restaurant_capacity
        available = [slot for slot in slots if capacity - booked.get(slot, 0) >= guests]

        if day == today:
            cutoff = now + timedelta(minutes=self.settings.lead_time_minutes)
            available = [slot for slot in available if datetime.combine(day, slot) >= cutoff]

        logger.debug(f"{len(available)} of {len(slots)} slots open on {day} for {guests} guests")
        return available

