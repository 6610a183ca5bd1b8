"""
Scheduling rules a vacation segment must satisfy.

Each rule is a plain function over already loaded data so it can be
evaluated (and tested) without a database. The order in which they run,
and which of them stop evaluation, lives in services/validator.py.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date
from enum import Enum
from typing import Any, Optional, Protocol

from vacation_planner.services.calendar import (
    HolidayWindow,
    is_holiday_window,
    iter_days,
    parse_date,
    rolling_month_bonus,
    segment_length,
)
from vacation_planner.services.staffing import StaffingWindow


class Segment(Protocol):
    """Anything with the date fields of a committed event."""

    start_at: date
    end_at: date
    pto: bool


class Violation(str, Enum):
    """Tags reported back for each broken rule."""

    FORMAT = "format"
    END_AT = "end_at"
    SEGS = "segs"
    OVERLAP = "overlap"
    ALLOWED = "allowed"
    MAX_DAY = "max_day"
    HOLIDAY = "holiday"
    PTO = "pto"
    YEAR = "year"


MESSAGES: dict[Violation, str] = {
    Violation.FORMAT: "Dates were not properly formatted",
    Violation.END_AT: "Segments must be at least 7 days long",
    Violation.SEGS: "You have more than 4 segments. Please add vacation days to an existing segment",
    Violation.OVERLAP: "Vacation weeks must not overlap",
    Violation.ALLOWED: "You have selected more vacation days than you have accrued",
    Violation.MAX_DAY: "You have selected a day that has no more availability",
    Violation.HOLIDAY: "There are no more availabilities for this day due to the holidays",
    Violation.PTO: "You have selected more than one week of PTO",
    Violation.YEAR: "Please select a vacation for the currently scheduled year",
}


# ---------------------------------------------------------
# Format and shape
# ---------------------------------------------------------


def check_format(start_raw: Any, end_raw: Any) -> Optional[tuple[date, date]]:
    """Parse both dates, returning None if either one is malformed."""
    try:
        return parse_date(start_raw), parse_date(end_raw)
    except (ValueError, TypeError, OverflowError):
        return None


def has_minimum_length(start: date, end: date, minimum: int = 7) -> bool:
    return segment_length(start, end) >= minimum


def within_segment_limit(other_events: Sequence[Segment], max_segments: int = 4) -> bool:
    """The segment being validated counts toward max_segments."""
    return len(other_events) <= max_segments - 1


# ---------------------------------------------------------
# Overlap
# ---------------------------------------------------------


def overlaps(start: date, end: date, other_events: Sequence[Segment]) -> bool:
    """Check the segment against the nurse's other segments."""
    for event in other_events:
        # start falls inside the other segment
        if event.start_at <= start <= event.end_at:
            return True
        # end falls inside the other segment
        if event.start_at <= end <= event.end_at:
            return True
        # other segment contains this one
        if event.start_at < start and end < event.end_at:
            return True
        # this segment contains the other one
        if event.start_at > start and end > event.end_at:
            return True
    return False


# ---------------------------------------------------------
# Quotas
# ---------------------------------------------------------


def within_allowance(
    start: date,
    end: date,
    other_events: Sequence[Segment],
    weeks_off: int,
    days_per_week: int = 7,
) -> bool:
    """Days already booked plus this segment must fit the entitlement."""
    days_allowed = weeks_off * days_per_week
    days_taken = sum(segment_length(e.start_at, e.end_at) for e in other_events)
    days_taken += segment_length(start, end)
    return days_taken <= days_allowed


def within_daily_capacity(
    start: date,
    end: date,
    staffing: StaffingWindow,
    yearly_max: int,
    months: Sequence[int],
) -> bool:
    """
    Every day of the segment must have a free spot.

    A day that is full under the yearly limit still passes when rolling
    windows cover its month; each covering window adds one spot. Days are
    scanned in calendar order and the first full day ends the scan.
    """
    for day in iter_days(start, end):
        num_off = staffing.count_overlapping(day)
        if num_off < yearly_max:
            continue
        if num_off < yearly_max + rolling_month_bonus(day, months):
            continue
        return False
    return True


def within_holiday_capacity(
    start: date,
    end: date,
    holiday_max: Optional[int],
    staffing: StaffingWindow,
    window: HolidayWindow,
) -> bool:
    """
    Holiday headcount cap, if the unit+shift has one.

    Only the first day of the segment is counted against the cap.
    """
    if holiday_max is None or not is_holiday_window(start, end, window):
        return True
    return staffing.count_overlapping(start) < holiday_max


# ---------------------------------------------------------
# Policies
# ---------------------------------------------------------


def valid_pto(
    start: date,
    end: date,
    pto: bool,
    other_events: Sequence[Segment],
    pto_days: int = 7,
) -> bool:
    """A nurse gets one PTO segment and it is exactly one week."""
    if not pto:
        return True
    if segment_length(start, end) != pto_days:
        return False
    return not any(e.pto for e in other_events)


def in_fiscal_year(start: date, end: date, year: int) -> bool:
    """Segment must fall inside March `year` through February `year + 1`."""
    # March through December of year, ending by February of next year
    if start.year == year and start.month >= 3:
        return end.year == year or (end.year == year + 1 and end.month < 3)
    # January or February of next year
    if start.year == year + 1 and start.month < 3:
        return end.year == year + 1 and end.month < 3
    return False
