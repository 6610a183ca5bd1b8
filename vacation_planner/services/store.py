"""
Read access to committed vacation data.

VacationStore is what the validator depends on. SqlAlchemyVacationStore
is the PostgreSQL implementation used by the API; tests plug in their own.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Optional, Protocol, Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from vacation_planner.config import Settings, get_settings
from vacation_planner.models.current_year import CurrentYear
from vacation_planner.models.event import Event
from vacation_planner.models.nurse import Nurse
from vacation_planner.models.unit import UnitAndShift

logger = logging.getLogger(__name__)


class VacationStore(Protocol):
    """Queries the vacation validator runs against the data store."""

    async def get_nurse(self, nurse_id: int) -> Optional[Nurse]: ...

    async def get_event(self, event_id: int) -> Optional[Event]: ...

    async def find_other_requests(self, nurse_id: int, exclude_id: Optional[int]) -> Sequence[Event]: ...

    async def find_overlapping_unit_shift_requests(
        self,
        unit_id: int,
        shift: str,
        window_start: date,
        window_end: date,
        exclude_id: Optional[int],
    ) -> Sequence[Event]: ...

    async def get_unit_shift_capacity(self, unit_id: int, shift: str) -> int: ...

    async def get_additional_months(self, unit_id: int, shift: str) -> list[int]: ...

    async def get_holiday_capacity(self, unit_id: int, shift: str) -> Optional[int]: ...

    async def get_current_year(self) -> int: ...

    async def lock_unit_shift(self, unit_id: int, shift: str) -> None: ...


class SqlAlchemyVacationStore:
    """VacationStore backed by an async SQLAlchemy session."""

    def __init__(self, session: AsyncSession, settings: Settings | None = None):
        self.session = session
        self.settings = settings or get_settings()
        self._unit_shifts: dict[tuple[int, str], Optional[UnitAndShift]] = {}

    async def get_nurse(self, nurse_id: int) -> Optional[Nurse]:
        result = await self.session.execute(select(Nurse).where(Nurse.id == nurse_id))
        return result.scalar_one_or_none()

    async def get_event(self, event_id: int) -> Optional[Event]:
        result = await self.session.execute(select(Event).where(Event.id == event_id))
        return result.scalar_one_or_none()

    async def find_other_requests(self, nurse_id: int, exclude_id: Optional[int]) -> Sequence[Event]:
        query = select(Event).where(Event.nurse_id == nurse_id)
        if exclude_id is not None:
            query = query.where(Event.id != exclude_id)
        result = await self.session.execute(query.order_by(Event.start_at))
        return result.scalars().all()

    async def find_overlapping_unit_shift_requests(
        self,
        unit_id: int,
        shift: str,
        window_start: date,
        window_end: date,
        exclude_id: Optional[int],
    ) -> Sequence[Event]:
        """Events of the unit+shift whose start falls inside the window."""
        query = (
            select(Event)
            .join(Nurse, Event.nurse_id == Nurse.id)
            .where(
                Nurse.unit_id == unit_id,
                Nurse.shift == shift,
                Event.start_at.between(window_start, window_end),
            )
        )
        if exclude_id is not None:
            query = query.where(Event.id != exclude_id)
        result = await self.session.execute(query.order_by(Event.start_at))
        return result.scalars().all()

    async def _get_unit_shift(self, unit_id: int, shift: str) -> Optional[UnitAndShift]:
        key = (unit_id, shift)
        if key not in self._unit_shifts:
            result = await self.session.execute(
                select(UnitAndShift).where(
                    UnitAndShift.unit_id == unit_id,
                    UnitAndShift.shift == shift,
                )
            )
            self._unit_shifts[key] = result.scalar_one_or_none()
        return self._unit_shifts[key]

    async def get_unit_shift_capacity(self, unit_id: int, shift: str) -> int:
        config = await self._get_unit_shift(unit_id, shift)
        if config is None:
            logger.warning("No staffing limits configured for unit %s (%s shift)", unit_id, shift)
            return 0
        return config.year

    async def get_additional_months(self, unit_id: int, shift: str) -> list[int]:
        config = await self._get_unit_shift(unit_id, shift)
        return config.start_months if config else []

    async def get_holiday_capacity(self, unit_id: int, shift: str) -> Optional[int]:
        config = await self._get_unit_shift(unit_id, shift)
        return config.holiday if config else None

    async def get_current_year(self) -> int:
        result = await self.session.execute(select(CurrentYear).where(CurrentYear.id == 1))
        current = result.scalar_one_or_none()
        if current is not None:
            return current.year
        if self.settings.default_current_year is not None:
            return self.settings.default_current_year
        return date.today().year

    async def lock_unit_shift(self, unit_id: int, shift: str) -> None:
        """
        Lock the unit+shift staffing row until the transaction ends.

        Concurrent commits for the same unit and shift queue up behind
        this lock so capacity is never checked against stale counts.
        """
        result = await self.session.execute(
            select(UnitAndShift)
            .where(
                UnitAndShift.unit_id == unit_id,
                UnitAndShift.shift == shift,
            )
            .with_for_update()
        )
        self._unit_shifts[(unit_id, shift)] = result.scalar_one_or_none()
