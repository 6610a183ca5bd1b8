"""
Calendar helpers for vacation segments.

All arithmetic is done on calendar dates; any time-of-day component is
dropped before a value reaches these helpers.
"""

from collections.abc import Iterable, Iterator
from datetime import date, datetime, timedelta
from typing import Any, NamedTuple

from pydantic import TypeAdapter, ValidationError

from vacation_planner.config import Settings

_date_adapter = TypeAdapter(date)
_datetime_adapter = TypeAdapter(datetime)


class HolidayWindow(NamedTuple):
    """Inclusive holiday period that crosses the year boundary."""

    start: date
    end: date


def parse_date(value: Any) -> date:
    """
    Coerce a submitted value into a calendar date.

    Accepts date and datetime objects and ISO-8601 strings. A timestamp
    string is cut down to its date. Raises ValueError (pydantic's
    ValidationError included) or TypeError otherwise.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if value is None:
        raise ValueError("date is missing")
    if not isinstance(value, str):
        raise TypeError(f"cannot read a date from {type(value).__name__}")
    value = value.strip()
    try:
        return _date_adapter.validate_python(value)
    except ValidationError:
        return _datetime_adapter.validate_python(value).date()


def segment_length(start: date, end: date) -> int:
    """Inclusive number of days between start and end."""
    return (end - start).days + 1


def iter_days(start: date, end: date) -> Iterator[date]:
    """Yield every day from start to end inclusive, in calendar order."""
    day = start
    while day <= end:
        yield day
        day += timedelta(days=1)


def expand_rolling_months(start_months: Iterable[int] | None) -> list[int]:
    """
    Expand each start month into its three month rolling window.

    Duplicates are kept: a month covered by two windows appears twice and
    earns two extra spots.
    """
    months: list[int] = []
    for start in start_months or []:
        months.append(start)
        months.append((start + 1) % 12)
        months.append((start + 2) % 12)
    return months


def rolling_month_bonus(day: date, months: Iterable[int]) -> int:
    """Number of rolling windows covering the month of `day`."""
    # Window months live in 0-11, so December is 0
    month = day.month % 12
    return sum(1 for m in months if m == month)


def holiday_window(year: int, settings: Settings) -> HolidayWindow:
    """Holiday period starting in `year` and ending in `year + 1`."""
    return HolidayWindow(
        start=date(year, settings.holiday_start_month, settings.holiday_start_day),
        end=date(year + 1, settings.holiday_end_month, settings.holiday_end_day),
    )


def is_holiday_window(start: date, end: date, window: HolidayWindow) -> bool:
    """Check whether a segment touches the holiday window."""
    if window.start <= start <= window.end:
        return True
    if window.start <= end <= window.end:
        return True
    return start <= window.start and end >= window.end
