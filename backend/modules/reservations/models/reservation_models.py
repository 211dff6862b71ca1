# backend/modules/reservations/models/reservation_models.py

"""
Reservation model and status vocabulary.
"""

import enum

from sqlalchemy import Column, Date, ForeignKey, Index, Integer, String, Text, Time
from sqlalchemy.orm import relationship

from core.database import Base
from core.mixins import TimestampMixin
from core.status_updater import STATUS_MAX_LENGTH


class ReservationStatus(str, enum.Enum):
    """Reservation status values used by the dashboard"""

    PENDING = "Pending"
    APPROVED = "Approved"
    CANCELLED = "Cancelled"
    COMPLETED = "Completed"


# Statuses that hold seats at a slot
ACTIVE_STATUSES = (ReservationStatus.PENDING.value, ReservationStatus.APPROVED.value)

TABLE_NUMBER_MAX_LENGTH = 20

# Used only when ENFORCE_STATUS_TRANSITIONS is on
RESERVATION_TRANSITIONS = {
    ReservationStatus.PENDING.value: frozenset(
        {ReservationStatus.APPROVED.value, ReservationStatus.CANCELLED.value}
    ),
    ReservationStatus.APPROVED.value: frozenset(
        {ReservationStatus.COMPLETED.value, ReservationStatus.CANCELLED.value}
    ),
    ReservationStatus.CANCELLED.value: frozenset(),
    ReservationStatus.COMPLETED.value: frozenset(),
}


class Reservation(Base, TimestampMixin):
    """A booking for one party at one slot. Never deleted; cancelling is a status."""

    __tablename__ = "reservations"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=True)

    customer_name = Column(String(200), nullable=False)
    customer_email = Column(String(255), nullable=False)
    customer_phone = Column(String(50), nullable=True)

    reservation_date = Column(Date, nullable=False, index=True)
    reservation_time = Column(Time, nullable=False)
    party_size = Column(Integer, nullable=False)

    # Plain string so the permissive status updater can store any value
    status = Column(String(STATUS_MAX_LENGTH), nullable=False, default=ReservationStatus.PENDING.value)
    special_requests = Column(Text, nullable=True)
    table_number = Column(String(TABLE_NUMBER_MAX_LENGTH), nullable=True)

    user = relationship("User", back_populates="reservations")

    __table_args__ = (
        Index("idx_reservation_slot_status", "reservation_date", "reservation_time", "status"),
    )

    def __repr__(self):
        return (
            f"<Reservation(id={self.id}, date={self.reservation_date}, "
            f"time={self.reservation_time}, party={self.party_size}, status={self.status})>"
        )
