"""
Staffing query service.

Counts how many nurses of a unit and shift are already off on a given day.
A multi-day request loads the candidate events once through load_window()
and then counts every day of its span in memory.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date, timedelta
from typing import Optional

from vacation_planner.config import Settings
from vacation_planner.models.event import Event
from vacation_planner.services.store import VacationStore


class StaffingWindow:
    """Committed unit+shift events that can cover days from first_day to last_day."""

    def __init__(
        self,
        events: Sequence[Event],
        first_day: date,
        last_day: date,
        buffer_days: int,
        exclude_id: Optional[int] = None,
    ):
        self.events = list(events)
        self.first_day = first_day
        self.last_day = last_day
        self.buffer_days = buffer_days
        self.exclude_id = exclude_id

    def count_overlapping(self, day: date) -> int:
        """Number of events whose inclusive range contains `day`."""
        if not self.first_day <= day <= self.last_day:
            raise ValueError(f"{day} is outside the loaded staffing window ({self.first_day} to {self.last_day})")

        earliest_start = day - timedelta(days=self.buffer_days)
        count = 0
        for event in self.events:
            if self.exclude_id is not None and event.id == self.exclude_id:
                continue
            if event.start_at < earliest_start:
                continue
            if event.start_at <= day <= event.end_at:
                count += 1
        return count


class StaffingQueryService:
    """Answers "how many nurses are off that day" for a unit and shift."""

    def __init__(self, store: VacationStore, settings: Settings):
        self.store = store
        self.settings = settings

    async def load_window(
        self,
        unit_id: int,
        shift: str,
        start: date,
        end: date,
        exclude_id: Optional[int] = None,
    ) -> StaffingWindow:
        """Fetch every event that may cover a day between start and end."""
        buffer_days = self.settings.staffing_range_buffer_days
        events = await self.store.find_overlapping_unit_shift_requests(
            unit_id,
            shift,
            start - timedelta(days=buffer_days),
            end + timedelta(days=1),
            exclude_id,
        )
        return StaffingWindow(events, start, end, buffer_days, exclude_id)

    async def count_overlapping(
        self,
        day: date,
        shift: str,
        unit_id: int,
        exclude_id: Optional[int] = None,
    ) -> int:
        """Number of nurses of the unit+shift already off on `day`."""
        window = await self.load_window(unit_id, shift, day, day, exclude_id)
        return window.count_overlapping(day)
