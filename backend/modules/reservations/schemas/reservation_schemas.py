# backend/modules/reservations/schemas/reservation_schemas.py

"""
Pydantic schemas for reservations.
"""

from datetime import date, datetime, time
from typing import List, Optional, Union

from pydantic import AliasChoices, Field, field_validator

from core.schemas import CamelModel


class ReservationCreate(CamelModel):
    """
    Booking request as sent by the reservation form.

    Date, time and guest count are kept loose here; the reservation service
    validates them so every problem comes back with a readable message.
    """

    user_id: Optional[int] = None
    customer_name: Optional[str] = Field(None, max_length=200)
    customer_email: Optional[str] = Field(None, max_length=255)
    customer_phone: Optional[str] = Field(None, max_length=50)
    reservation_date: Optional[Union[date, str]] = Field(
        None, validation_alias=AliasChoices("date", "reservationDate", "reservation_date")
    )
    reservation_time: Optional[Union[time, str]] = Field(
        None, validation_alias=AliasChoices("time", "reservationTime", "reservation_time")
    )
    guests: Optional[Union[int, str]] = Field(
        None, validation_alias=AliasChoices("guests", "numberOfGuests", "partySize")
    )
    special_requests: Optional[str] = None


class ReservationCreated(CamelModel):
    reservation_id: int


class ReservationStatusUpdate(CamelModel):
    status: Optional[str] = None
    table_number: Optional[Union[int, str]] = None

    @field_validator("table_number")
    @classmethod
    def table_number_as_text(cls, v):
        return None if v is None else str(v).strip() or None


class AvailableSlotsResponse(CamelModel):
    available_slots: List[str]


class ReservationResponse(CamelModel):
    id: int
    user_id: Optional[int] = None
    customer_name: str
    customer_email: str
    customer_phone: Optional[str] = None
    reservation_date: date
    reservation_time: str
    party_size: int
    status: str
    special_requests: Optional[str] = None
    table_number: Optional[str] = None
    created_at: Optional[datetime] = None

    @field_validator("reservation_time", mode="before")
    @classmethod
    def format_time(cls, v):
        if isinstance(v, time):
            return v.strftime("%H:%M:%S")
        return v
