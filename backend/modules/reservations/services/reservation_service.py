# backend/modules/reservations/services/reservation_service.py

"""
Reservation booking and management.
"""

import logging
from datetime import datetime
from typing import Callable, List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from core.config import Settings, get_settings
from core.exceptions import InvalidInputError, NotFoundError, PersistenceError
from core.status_updater import StatusUpdater
from core.validators import normalize_email, optional_text, require_text

from ..models.reservation_models import (
    RESERVATION_TRANSITIONS,
    TABLE_NUMBER_MAX_LENGTH,
    Reservation,
    ReservationStatus,
)
from ..schemas.reservation_schemas import ReservationCreate
from .booking_rules import (
    check_booking_window,
    check_party_size,
    normalize_time,
    parse_date,
    parse_party_size,
)

logger = logging.getLogger(__name__)


class ReservationService:
    """Service for managing reservations"""

    def __init__(
        self,
        db: Session,
        settings: Optional[Settings] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.db = db
        self.settings = settings or get_settings()
        self.clock = clock or datetime.now
        self.status_updater = StatusUpdater(
            db,
            Reservation,
            label="Reservation",
            transitions=RESERVATION_TRANSITIONS,
            enforce_transitions=self.settings.enforce_status_transitions,
        )

    def create_reservation(self, data: ReservationCreate) -> Reservation:
        """
        Validate a booking request and store it as Pending.

        Capacity is not re-checked here: two concurrent requests for the same
        slot can both succeed.
        """
        today = self.clock().date()

        name = require_text(data.customer_name, "Customer name is required")
        email = normalize_email(data.customer_email)
        reservation_date = check_booking_window(
            parse_date(data.reservation_date), today, self.settings.advance_booking_days
        )
        reservation_time = normalize_time(data.reservation_time)
        if data.guests is None:
            raise InvalidInputError("Number of guests is required")
        party_size = check_party_size(
            parse_party_size(data.guests), self.settings.max_party_size
        )

        if data.user_id is not None:
            self._ensure_user_exists(data.user_id)

        reservation = Reservation(
            user_id=data.user_id,
            customer_name=name,
            customer_email=email,
            customer_phone=optional_text(data.customer_phone),
            reservation_date=reservation_date,
            reservation_time=reservation_time,
            party_size=party_size,
            special_requests=optional_text(data.special_requests),
            status=ReservationStatus.PENDING.value,
        )

        try:
            self.db.add(reservation)
            self.db.commit()
            self.db.refresh(reservation)
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("Failed to store reservation")
            raise PersistenceError()

        logger.info(
            f"Created reservation {reservation.id} for {party_size} guests "
            f"on {reservation_date} at {reservation_time.strftime('%H:%M')}"
        )
        return reservation

    def get_reservation(self, reservation_id: int) -> Reservation:
        reservation = self.db.get(Reservation, reservation_id)
        if reservation is None:
            raise NotFoundError("Reservation not found", error_code="RESERVATION_NOT_FOUND")
        return reservation

    def list_upcoming(self) -> List[Reservation]:
        """Reservations from today on, earliest first"""
        today = self.clock().date()
        return (
            self.db.query(Reservation)
            .filter(Reservation.reservation_date >= today)
            .order_by(Reservation.reservation_date, Reservation.reservation_time)
            .all()
        )

    def update_status(
        self, reservation_id: int, status: Optional[str], table_number: Optional[str] = None
    ) -> None:
        if table_number is not None and len(table_number) > TABLE_NUMBER_MAX_LENGTH:
            raise InvalidInputError(
                f"Table number must be at most {TABLE_NUMBER_MAX_LENGTH} characters"
            )
        self.status_updater.update(
            reservation_id,
            status.strip() if status else status,
            extra_values={"table_number": table_number},
        )

    def _ensure_user_exists(self, user_id: int) -> None:
        from modules.auth.models.user_models import User

        if self.db.get(User, user_id) is None:
            raise InvalidInputError("User account not found")
