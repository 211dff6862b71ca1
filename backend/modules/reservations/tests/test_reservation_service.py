# backend/modules/reservations/tests/test_reservation_service.py

"""
Tests for reservation service.
"""

from datetime import date, datetime, time
from unittest.mock import patch

import pytest
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

from core.config import Settings
from core.exceptions import (
    InvalidInputError,
    NotFoundError,
    PersistenceError,
    StatusTransitionError,
)
from ..models.reservation_models import Reservation, ReservationStatus
from ..schemas.reservation_schemas import ReservationCreate, ReservationResponse
from ..services import ReservationService

NOW = datetime(2024, 6, 1, 9, 0)


def booking(**overrides) -> ReservationCreate:
    data = {
        "customerName": "Ada Lovelace",
        "customerEmail": "ada@bistro-mail.com",
        "customerPhone": "555-0100",
        "date": "2024-06-11",
        "time": "18:30",
        "guests": 4,
        "specialRequests": "Window seat",
    }
    data.update(overrides)
    return ReservationCreate.model_validate(data)


class TestReservationService:
    """Test reservation service functionality"""

    @pytest.fixture
    def service(self, db_session: Session, settings, frozen_clock):
        """Create service instance"""
        return ReservationService(db_session, settings=settings, clock=frozen_clock(NOW))

    def test_create_and_fetch_round_trip(self, service):
        created = service.create_reservation(booking())

        fetched = service.get_reservation(created.id)
        response = ReservationResponse.model_validate(fetched)

        assert response.reservation_date == date(2024, 6, 11)
        assert response.reservation_time == "18:30:00"
        assert response.party_size == 4
        assert response.status == ReservationStatus.PENDING.value
        assert response.customer_phone == "555-0100"
        assert response.special_requests == "Window seat"

    @pytest.mark.parametrize(
        "raw_time, stored",
        [("18:30", "18:30:00"), ("18:30:00", "18:30:00"), ("9:00", "09:00:00")],
    )
    def test_time_is_normalized(self, service, raw_time, stored):
        created = service.create_reservation(booking(time=raw_time))

        assert ReservationResponse.model_validate(created).reservation_time == stored

    def test_original_field_names_are_accepted(self, service):
        data = ReservationCreate.model_validate(
            {
                "customerName": "Grace Hopper",
                "customerEmail": "grace@bistro-mail.com",
                "reservationDate": "2024-06-12",
                "reservationTime": "12:00",
                "numberOfGuests": "2",
            }
        )

        created = service.create_reservation(data)

        assert created.reservation_date == date(2024, 6, 12)
        assert created.reservation_time == time(12, 0)
        assert created.party_size == 2

    def test_malformed_time_is_rejected_without_insert(self, service, db_session):
        with pytest.raises(InvalidInputError, match="Invalid time format"):
            service.create_reservation(booking(date="2024-06-10", time="18:5"))

        assert db_session.query(Reservation).count() == 0

    @pytest.mark.parametrize(
        "overrides, message",
        [
            ({"customerName": "  "}, "Customer name is required"),
            ({"customerName": None}, "Customer name is required"),
            ({"customerEmail": "not-an-email"}, "valid email"),
            ({"customerEmail": None}, "Email address is required"),
            ({"date": "2024-05-31"}, "Please select a future date"),
            ({"date": "2024-09-01"}, "60 days in advance"),
            ({"date": "31/06/2024"}, "Invalid date format"),
            ({"time": None}, "Time is required"),
            ({"guests": 0}, "positive whole number"),
            ({"guests": None}, "Number of guests is required"),
            ({"guests": 21}, "between 1 and 20"),
        ],
    )
    def test_validation_errors(self, service, db_session, overrides, message):
        with pytest.raises(InvalidInputError, match=message):
            service.create_reservation(booking(**overrides))

        assert db_session.query(Reservation).count() == 0

    def test_writer_does_not_recheck_capacity(self, service, add_reservation):
        add_reservation(date(2024, 6, 11), time(18, 30), 50)

        created = service.create_reservation(booking(guests=4))

        assert created.id is not None

    def test_links_registered_user(self, service, user):
        created = service.create_reservation(booking(userId=user.id))

        assert created.user_id == user.id
        assert created.user.email == user.email

    def test_unknown_user_is_rejected(self, service):
        with pytest.raises(InvalidInputError, match="User account not found"):
            service.create_reservation(booking(userId=999))

    def test_storage_failure_leaves_nothing_behind(self, service, db_session):
        with patch.object(
            db_session, "commit", side_effect=OperationalError("INSERT", {}, Exception("disk full"))
        ):
            with pytest.raises(PersistenceError) as exc_info:
                service.create_reservation(booking())

        assert "disk full" not in exc_info.value.detail
        assert db_session.query(Reservation).count() == 0

    def test_get_missing_reservation(self, service):
        with pytest.raises(NotFoundError):
            service.get_reservation(424242)

    def test_list_upcoming_is_ordered_and_skips_past(self, service, add_reservation):
        add_reservation(date(2024, 5, 30), time(18, 0), 2)
        late = add_reservation(date(2024, 6, 12), time(20, 0), 2)
        early = add_reservation(date(2024, 6, 12), time(12, 0), 2)
        today = add_reservation(date(2024, 6, 1), time(19, 0), 2, status="Cancelled")

        upcoming = service.list_upcoming()

        assert [r.id for r in upcoming] == [today.id, early.id, late.id]


class TestStatusUpdates:
    @pytest.fixture
    def service(self, db_session, settings, frozen_clock):
        return ReservationService(db_session, settings=settings, clock=frozen_clock(NOW))

    @pytest.fixture
    def reservation(self, add_reservation):
        return add_reservation(date(2024, 6, 11), time(18, 0), 4, status="Pending")

    def test_update_sets_status_and_table(self, service, db_session, reservation):
        service.update_status(reservation.id, "Approved", table_number="12")

        db_session.refresh(reservation)
        assert reservation.status == "Approved"
        assert reservation.table_number == "12"

    def test_update_is_idempotent(self, service, db_session, reservation):
        service.update_status(reservation.id, "Approved")
        db_session.refresh(reservation)
        after_first = (reservation.status, reservation.table_number)

        service.update_status(reservation.id, "Approved")
        db_session.refresh(reservation)

        assert (reservation.status, reservation.table_number) == after_first

    def test_missing_table_number_keeps_existing(self, service, db_session, reservation):
        service.update_status(reservation.id, "Approved", table_number="7")
        service.update_status(reservation.id, "Completed")

        db_session.refresh(reservation)
        assert reservation.table_number == "7"

    def test_nonexistent_reservation(self, service, db_session, reservation):
        with pytest.raises(NotFoundError) as exc_info:
            service.update_status(999999, "Approved")

        assert exc_info.value.status_code == 404
        db_session.refresh(reservation)
        assert reservation.status == "Pending"

    def test_permissive_mode_allows_any_transition(self, service, db_session, reservation):
        service.update_status(reservation.id, "Cancelled")
        service.update_status(reservation.id, "Approved")
        service.update_status(reservation.id, "Seated")

        db_session.refresh(reservation)
        assert reservation.status == "Seated"

    @pytest.mark.parametrize("status", [None, "", "   "])
    def test_blank_status_is_rejected(self, service, reservation, status):
        with pytest.raises(InvalidInputError, match="Status is required"):
            service.update_status(reservation.id, status)

    def test_update_failure_is_a_persistence_error(self, service, db_session, reservation):
        with patch.object(
            db_session, "commit", side_effect=OperationalError("UPDATE", {}, Exception("locked"))
        ):
            with pytest.raises(PersistenceError):
                service.update_status(reservation.id, "Approved")


class TestStrictStatusTransitions:
    @pytest.fixture
    def service(self, db_session, frozen_clock):
        settings = Settings(_env_file=None, enforce_status_transitions=True)
        return ReservationService(db_session, settings=settings, clock=frozen_clock(NOW))

    @pytest.fixture
    def reservation(self, add_reservation):
        return add_reservation(date(2024, 6, 11), time(18, 0), 4, status="Pending")

    def test_allowed_path(self, service, db_session, reservation):
        service.update_status(reservation.id, "Approved")
        service.update_status(reservation.id, "Completed")

        db_session.refresh(reservation)
        assert reservation.status == "Completed"

    def test_cancelled_cannot_be_reapproved(self, service, db_session, reservation):
        service.update_status(reservation.id, "Cancelled")

        with pytest.raises(StatusTransitionError) as exc_info:
            service.update_status(reservation.id, "Approved")

        assert exc_info.value.status_code == 409
        db_session.refresh(reservation)
        assert reservation.status == "Cancelled"

    def test_same_status_is_still_idempotent(self, service, db_session, reservation):
        service.update_status(reservation.id, "Cancelled")
        service.update_status(reservation.id, "Cancelled")

        db_session.refresh(reservation)
        assert reservation.status == "Cancelled"

    def test_unknown_status_is_rejected(self, service, reservation):
        with pytest.raises(InvalidInputError, match="Unknown status"):
            service.update_status(reservation.id, "Seated")

    def test_nonexistent_reservation(self, service):
        with pytest.raises(NotFoundError):
            service.update_status(999999, "Approved")
