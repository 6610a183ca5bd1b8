"""
Vacation request validation pipeline.

Rules run in a fixed order:

    format -> end_at -> segs -> overlap -> allowed -> max_day
        -> holiday -> pto -> year

The first six stop evaluation on failure, so the result then holds that
single violation. Later rules assume well-formed dates and a sane number
of segments, which is why malformed input never reaches the staffing
queries. holiday, pto and year always all run and each adds its own
violation.

The validator keeps no per-request state; everything one evaluation
needs travels in an EvaluationContext, so one instance can be shared.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date
from typing import Optional

from vacation_planner.config import Settings, get_settings
from vacation_planner.exceptions import NotFoundError
from vacation_planner.models.event import Event
from vacation_planner.models.nurse import Nurse
from vacation_planner.schemas.event import EventValidate, ValidationResult
from vacation_planner.services import rules
from vacation_planner.services.calendar import expand_rolling_months, holiday_window
from vacation_planner.services.rules import MESSAGES, Violation
from vacation_planner.services.staffing import StaffingQueryService, StaffingWindow
from vacation_planner.services.store import VacationStore

logger = logging.getLogger(__name__)


@dataclass
class EvaluationContext:
    """Values shared between the rules of a single evaluation."""

    request_id: Optional[int]
    nurse: Nurse
    start: date
    end: date
    pto: bool
    other_events: Sequence[Event]

    @property
    def unit_id(self) -> int:
        return self.nurse.unit_id

    @property
    def shift(self) -> str:
        return self.nurse.shift


class VacationValidator:
    """Checks one proposed segment against the committed schedule."""

    def __init__(self, store: VacationStore, settings: Settings | None = None):
        self.store = store
        self.settings = settings or get_settings()
        self.staffing = StaffingQueryService(store, self.settings)

    async def validate(self, request: EventValidate) -> ValidationResult:
        """Run every rule and return the violations found."""
        dates = rules.check_format(request.start_at, request.end_at)
        if dates is None:
            return self._halt(Violation.FORMAT, request)
        start, end = dates

        if not rules.has_minimum_length(start, end, self.settings.min_segment_days):
            return self._halt(Violation.END_AT, request)

        nurse = await self.store.get_nurse(request.nurse_id)
        if nurse is None:
            raise NotFoundError("Nurse", request.nurse_id)

        other_events = await self.store.find_other_requests(nurse.id, request.id)
        ctx = EvaluationContext(
            request_id=request.id,
            nurse=nurse,
            start=start,
            end=end,
            pto=request.pto,
            other_events=other_events,
        )

        if not rules.within_segment_limit(ctx.other_events, self.settings.max_segments):
            return self._halt(Violation.SEGS, request)

        if rules.overlaps(ctx.start, ctx.end, ctx.other_events):
            return self._halt(Violation.OVERLAP, request)

        if not rules.within_allowance(
            ctx.start,
            ctx.end,
            ctx.other_events,
            nurse.num_weeks_off,
            self.settings.days_per_week,
        ):
            return self._halt(Violation.ALLOWED, request)

        staffing = await self.staffing.load_window(ctx.unit_id, ctx.shift, ctx.start, ctx.end, ctx.request_id)
        if not await self._within_daily_capacity(ctx, staffing):
            return self._halt(Violation.MAX_DAY, request)

        errors: dict[str, str] = {}
        if not await self._within_holiday_capacity(ctx, staffing):
            errors[Violation.HOLIDAY.value] = MESSAGES[Violation.HOLIDAY]

        if not rules.valid_pto(ctx.start, ctx.end, ctx.pto, ctx.other_events, self.settings.pto_segment_days):
            errors[Violation.PTO.value] = MESSAGES[Violation.PTO]

        year = await self.store.get_current_year()
        if not rules.in_fiscal_year(ctx.start, ctx.end, year):
            errors[Violation.YEAR.value] = MESSAGES[Violation.YEAR]

        if errors:
            logger.debug("Nurse %s segment %s to %s broke: %s", nurse.id, start, end, ", ".join(errors))
        return ValidationResult(errors=errors)

    async def _within_daily_capacity(self, ctx: EvaluationContext, staffing: StaffingWindow) -> bool:
        yearly_max = await self.store.get_unit_shift_capacity(ctx.unit_id, ctx.shift)
        start_months = await self.store.get_additional_months(ctx.unit_id, ctx.shift)
        months = expand_rolling_months(start_months)
        return rules.within_daily_capacity(ctx.start, ctx.end, staffing, yearly_max, months)

    async def _within_holiday_capacity(self, ctx: EvaluationContext, staffing: StaffingWindow) -> bool:
        holiday_max = await self.store.get_holiday_capacity(ctx.unit_id, ctx.shift)
        if holiday_max is None:
            return True
        year = await self.store.get_current_year()
        window = holiday_window(year, self.settings)
        return rules.within_holiday_capacity(ctx.start, ctx.end, holiday_max, staffing, window)

    def _halt(self, violation: Violation, request: EventValidate) -> ValidationResult:
        logger.debug("Nurse %s request stopped at %s", request.nurse_id, violation.value)
        return ValidationResult(errors={violation.value: MESSAGES[violation]})
