# backend/modules/reservations/tests/test_slot_catalog.py

"""
Tests for the service time catalog.
"""

from datetime import date, time, timedelta

import pytest

from core.config import Settings
from ..services.slot_catalog import SlotCatalog


@pytest.fixture
def catalog(settings):
    return SlotCatalog(settings)


class TestSlotCatalog:
    def test_default_catalog_has_eighteen_slots(self, catalog):
        slots = catalog.all_slots()

        assert len(slots) == 18
        assert slots[0] == time(11, 0)
        assert slots[-1] == time(21, 30)

    def test_windows_include_both_ends(self, catalog):
        slots = catalog.all_slots()

        assert time(14, 30) in slots
        assert time(17, 0) in slots
        assert time(15, 0) not in slots
        assert time(16, 30) not in slots

    def test_slots_are_chronological_and_unique(self, catalog):
        slots = catalog.all_slots()
        assert slots == sorted(set(slots))

    def test_all_slots_returns_a_copy(self, catalog):
        catalog.all_slots().clear()
        assert len(catalog.all_slots()) == 18

    @pytest.mark.parametrize("offset_weeks", range(0, 8))
    def test_monday_is_closed(self, catalog, offset_weeks):
        monday = date(2024, 6, 10) + timedelta(weeks=offset_weeks)
        assert monday.weekday() == 0

        assert catalog.is_closed(monday)
        assert catalog.slots_for_date(monday) == []

    @pytest.mark.parametrize("day_offset", range(1, 7))
    def test_other_weekdays_are_open(self, catalog, day_offset):
        day = date(2024, 6, 10) + timedelta(days=day_offset)
        assert catalog.slots_for_date(day) == catalog.all_slots()

    def test_configurable_windows_and_closed_day(self):
        settings = Settings(
            _env_file=None,
            service_windows="12:00-13:00",
            slot_interval_minutes=15,
            closed_weekday="sunday",
        )
        catalog = SlotCatalog(settings)

        assert catalog.all_slots() == [
            time(12, 0), time(12, 15), time(12, 30), time(12, 45), time(13, 0)
        ]
        assert catalog.slots_for_date(date(2024, 6, 16)) == []
        assert len(catalog.slots_for_date(date(2024, 6, 10))) == 5

    @pytest.mark.parametrize("bad_windows", ["", "11:00", "14:00-11:00", "25:00-26:00"])
    def test_malformed_windows_are_rejected(self, bad_windows):
        with pytest.raises(ValueError):
            Settings(_env_file=None, service_windows=bad_windows)

    def test_unknown_closed_weekday_is_rejected(self):
        with pytest.raises(ValueError):
            Settings(_env_file=None, closed_weekday="funday")
