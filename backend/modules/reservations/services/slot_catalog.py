# backend/modules/reservations/services/slot_catalog.py

"""
Fixed list of bookable service times for one business day.
"""

from datetime import date, datetime, time, timedelta
from typing import List, Optional

from core.config import Settings, get_settings


class SlotCatalog:
    """Service times across the configured windows, closed on one weekday"""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self._slots = self._build_slots()

    def all_slots(self) -> List[time]:
        """Every slot, in chronological order. Both window ends are included."""
        return list(self._slots)

    def is_closed(self, day: date) -> bool:
        return day.weekday() == self.settings.closed_weekday_index

    def slots_for_date(self, day: date) -> List[time]:
        if self.is_closed(day):
            return []
        return self.all_slots()

    def _build_slots(self) -> List[time]:
        step = timedelta(minutes=self.settings.slot_interval_minutes)
        slots = []
        for start, end in self.settings.service_window_times:
            current = datetime.combine(date.min, start)
            last = datetime.combine(date.min, end)
            while current <= last:
                slots.append(current.time())
                current += step
        return sorted(set(slots))
