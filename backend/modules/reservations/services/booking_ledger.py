# backend/modules/reservations/services/booking_ledger.py

import logging
from datetime import date, time
from typing import Dict

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from core.exceptions import PersistenceError

from ..models.reservation_models import ACTIVE_STATUSES, Reservation

logger = logging.getLogger(__name__)


class BookingLedger:
    """Read-only seat occupancy per slot, from Pending and Approved reservations"""

    def __init__(self, db: Session):
        self.db = db

    def booked_headcount(self, day: date) -> Dict[time, int]:
        try:
            rows = (
                self.db.query(
                    Reservation.reservation_time,
                    func.sum(Reservation.party_size),
                )
                .filter(
                    Reservation.reservation_date == day,
                    Reservation.status.in_(ACTIVE_STATUSES),
                )
                .group_by(Reservation.reservation_time)
                .all()
            )
        except SQLAlchemyError:
            logger.exception(f"Failed to load bookings for {day}")
            raise PersistenceError()

        # Stored times may carry seconds; slots are matched on HH:MM
        booked: Dict[time, int] = {}
        for slot_time, guests in rows:
            key = slot_time.replace(second=0, microsecond=0)
            booked[key] = booked.get(key, 0) + int(guests or 0)
        return booked
