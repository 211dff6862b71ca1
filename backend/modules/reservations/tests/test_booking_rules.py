# backend/modules/reservations/tests/test_booking_rules.py

from datetime import date, datetime, time

import pytest

from core.exceptions import InvalidInputError
from ..services.booking_rules import (
    check_booking_window,
    check_party_size,
    format_time,
    normalize_time,
    parse_date,
    parse_party_size,
)


class TestNormalizeTime:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("18:00", time(18, 0)),
            ("18:30:00", time(18, 30)),
            ("9:30", time(9, 30)),
            ("09:05", time(9, 5)),
            ("23:59:59", time(23, 59, 59)),
            (" 12:00 ", time(12, 0)),
            (time(19, 0, 0, 500), time(19, 0)),
        ],
    )
    def test_valid_times(self, raw, expected):
        assert normalize_time(raw) == expected

    @pytest.mark.parametrize(
        "raw", ["18:5", "24:00", "18:60", "18:00:60", "1800", "abc", "18-00", "18:00:00:00"]
    )
    def test_malformed_times(self, raw):
        with pytest.raises(InvalidInputError) as exc_info:
            normalize_time(raw)
        assert "Invalid time format" in exc_info.value.detail

    @pytest.mark.parametrize("raw", [None, "", "   "])
    def test_missing_time(self, raw):
        with pytest.raises(InvalidInputError, match="Time is required"):
            normalize_time(raw)

    def test_format_is_zero_padded(self):
        assert format_time(normalize_time("9:30")) == "09:30:00"


class TestParseDate:
    def test_iso_string(self):
        assert parse_date("2024-06-11") == date(2024, 6, 11)

    def test_date_and_datetime_objects(self):
        assert parse_date(date(2024, 6, 11)) == date(2024, 6, 11)
        assert parse_date(datetime(2024, 6, 11, 18, 0)) == date(2024, 6, 11)

    @pytest.mark.parametrize("raw", ["2024-13-01", "2024-02-30", "11/06/2024", "tomorrow"])
    def test_unparseable(self, raw):
        with pytest.raises(InvalidInputError, match="Invalid date format"):
            parse_date(raw)

    @pytest.mark.parametrize("raw", [None, ""])
    def test_missing(self, raw):
        with pytest.raises(InvalidInputError, match="Date is required"):
            parse_date(raw)


class TestPartySize:
    @pytest.mark.parametrize("raw, expected", [(1, 1), (4, 4), ("6", 6), (" 2 ", 2)])
    def test_valid(self, raw, expected):
        assert parse_party_size(raw) == expected

    @pytest.mark.parametrize("raw", [0, -3, "0", "-1", "2.5", "two", True, 2.5, None])
    def test_invalid(self, raw):
        with pytest.raises(InvalidInputError):
            parse_party_size(raw)

    def test_above_maximum(self):
        assert check_party_size(20, 20) == 20
        with pytest.raises(InvalidInputError, match="between 1 and 20"):
            check_party_size(21, 20)


class TestBookingWindow:
    today = date(2024, 6, 1)

    def test_today_and_last_day_are_allowed(self):
        assert check_booking_window(self.today, self.today, 60) == self.today
        assert check_booking_window(date(2024, 7, 31), self.today, 60) == date(2024, 7, 31)

    def test_past_date(self):
        with pytest.raises(InvalidInputError, match="Please select a future date"):
            check_booking_window(date(2024, 5, 31), self.today, 60)

    def test_too_far_ahead(self):
        with pytest.raises(InvalidInputError, match="up to 60 days in advance"):
            check_booking_window(date(2024, 8, 1), self.today, 60)
