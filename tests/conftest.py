"""
Shared test fixtures for the vacation planner test suite.
"""

from datetime import date, datetime
from typing import Optional
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from vacation_planner.config import Settings
from vacation_planner.models import Event, Nurse
from vacation_planner.schemas.event import EventValidate
from vacation_planner.services.validator import VacationValidator

ANCHOR_YEAR = 2026


class InMemoryVacationStore:
    """VacationStore over plain lists, recording the queries it answers."""

    def __init__(self, current_year: int = ANCHOR_YEAR):
        self.nurses: dict[int, Nurse] = {}
        self.events: list[Event] = []
        self.unit_shifts: dict[tuple[int, str], dict] = {}
        self.current_year = current_year
        self.window_queries: list[tuple] = []
        self.locks: list[tuple[int, str]] = []
        self._next_event_id = 1

    # Setup helpers

    def add_nurse(self, nurse_id: int, shift: str = "day", unit_id: int = 1, weeks_off: int = 8) -> Nurse:
        nurse = Nurse(
            id=nurse_id,
            name=f"Nurse {nurse_id}",
            shift=shift,
            unit_id=unit_id,
            seniority=1,
            num_weeks_off=weeks_off,
        )
        self.nurses[nurse_id] = nurse
        return nurse

    def add_event(self, nurse_id: int, start: date, end: date, pto: bool = False) -> Event:
        event = Event(
            id=self._next_event_id,
            nurse_id=nurse_id,
            start_at=start,
            end_at=end,
            pto=pto,
            created_at=datetime(2026, 1, 5, 9, 30),
        )
        self._next_event_id += 1
        self.events.append(event)
        return event

    def configure(
        self,
        unit_id: int = 1,
        shift: str = "day",
        year: int = 2,
        holiday: Optional[int] = None,
        months: Optional[list[int]] = None,
    ) -> None:
        self.unit_shifts[(unit_id, shift)] = {
            "year": year,
            "holiday": holiday,
            "months": months or [],
        }

    # VacationStore

    async def get_nurse(self, nurse_id):
        return self.nurses.get(nurse_id)

    async def get_event(self, event_id):
        return next((e for e in self.events if e.id == event_id), None)

    async def find_other_requests(self, nurse_id, exclude_id):
        return [e for e in self.events if e.nurse_id == nurse_id and e.id != exclude_id]

    async def find_overlapping_unit_shift_requests(self, unit_id, shift, window_start, window_end, exclude_id):
        self.window_queries.append((unit_id, shift, window_start, window_end, exclude_id))
        found = []
        for event in self.events:
            nurse = self.nurses[event.nurse_id]
            if nurse.unit_id != unit_id or nurse.shift != shift:
                continue
            if event.id == exclude_id:
                continue
            if window_start <= event.start_at <= window_end:
                found.append(event)
        return found

    async def get_unit_shift_capacity(self, unit_id, shift):
        return self.unit_shifts.get((unit_id, shift), {}).get("year", 0)

    async def get_additional_months(self, unit_id, shift):
        return self.unit_shifts.get((unit_id, shift), {}).get("months", [])

    async def get_holiday_capacity(self, unit_id, shift):
        return self.unit_shifts.get((unit_id, shift), {}).get("holiday")

    async def get_current_year(self):
        return self.current_year

    async def lock_unit_shift(self, unit_id, shift):
        self.locks.append((unit_id, shift))


@pytest.fixture
def test_settings():
    """Settings configured for testing (no real DB connection needed)."""
    return Settings(
        db_host="localhost",
        db_port=5432,
        db_name="vacation_planner_test",
        db_user="test",
        db_password="test",
        debug=True,
    )


@pytest.fixture
def store():
    """Store with nurse 1 on the day shift of unit 1 and room for two off per day."""
    store = InMemoryVacationStore()
    store.add_nurse(1)
    store.configure(unit_id=1, shift="day", year=2)
    return store


@pytest.fixture
def validator(store, test_settings):
    return VacationValidator(store, test_settings)


@pytest.fixture
def make_request():
    """Build an EventValidate for nurse 1 unless told otherwise."""

    def _make(start, end, nurse_id=1, pto=False, event_id=None):
        return EventValidate(id=event_id, nurse_id=nurse_id, start_at=start, end_at=end, pto=pto)

    return _make


@pytest.fixture
def mock_db_session():
    """Create a mock async database session."""
    session = AsyncMock()
    session.add = MagicMock()
    session.execute = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()

    async def refresh(obj):
        # Fill the columns the database would have generated
        if getattr(obj, "id", None) is None:
            obj.id = 100
        if getattr(obj, "created_at", None) is None:
            obj.created_at = datetime(2026, 2, 1, 8, 0)

    session.refresh = AsyncMock(side_effect=refresh)
    return session


@pytest_asyncio.fixture
async def app_client(test_settings, mock_db_session, store):
    """Create a test client with the database and store replaced."""
    with patch("vacation_planner.config.get_settings", return_value=test_settings):
        from vacation_planner.main import create_app

        app = create_app()

        from vacation_planner.database import get_db
        from vacation_planner.routers.events import get_store

        app.dependency_overrides[get_db] = lambda: mock_db_session
        app.dependency_overrides[get_store] = lambda: store

        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            yield client

        app.dependency_overrides.clear()
