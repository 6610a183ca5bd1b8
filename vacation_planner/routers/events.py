"""
Events API router.
Checks vacation segments against the scheduling rules and saves the ones
that pass.
"""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from vacation_planner.config import get_settings
from vacation_planner.database import get_db
from vacation_planner.exceptions import NotFoundError, RuleViolationError
from vacation_planner.models.event import Event
from vacation_planner.schemas.event import (
    EventCreate,
    EventResponse,
    EventUpdate,
    EventValidate,
    ValidationResult,
)
from vacation_planner.services.calendar import parse_date
from vacation_planner.services.store import SqlAlchemyVacationStore, VacationStore
from vacation_planner.services.validator import VacationValidator

logger = logging.getLogger(__name__)

router = APIRouter()


def get_store(db: AsyncSession = Depends(get_db)) -> VacationStore:
    """Data store bound to the request's session."""
    return SqlAlchemyVacationStore(db, get_settings())


def get_validator(store: VacationStore = Depends(get_store)) -> VacationValidator:
    return VacationValidator(store, get_settings())


async def validate_locked(
    request: EventValidate,
    store: VacationStore,
    validator: VacationValidator,
) -> None:
    """
    Validate a segment while holding the unit+shift lock.

    The lock is held until the surrounding transaction commits, so the
    segment is saved against the same counts it was checked against.
    """
    nurse = await store.get_nurse(request.nurse_id)
    if nurse is None:
        raise NotFoundError("Nurse", request.nurse_id)

    await store.lock_unit_shift(nurse.unit_id, nurse.shift)
    result = await validator.validate(request)
    if not result.valid:
        logger.info(
            "Rejected segment for nurse %s (%s to %s): %s",
            request.nurse_id,
            request.start_at,
            request.end_at,
            ", ".join(result.errors),
        )
        raise RuleViolationError(result.errors)


@router.post("/events/validate", response_model=ValidationResult)
async def validate_event(
    data: EventValidate,
    validator: VacationValidator = Depends(get_validator),
):
    """
    Check a segment without saving it.

    Violations are returned as data with a 200 status.
    """
    return await validator.validate(data)


@router.post("/events", response_model=EventResponse, status_code=201)
async def create_event(
    data: EventCreate,
    db: AsyncSession = Depends(get_db),
    store: VacationStore = Depends(get_store),
    validator: VacationValidator = Depends(get_validator),
):
    """
    Create a new event.

    Returns 422 with the violations if the segment breaks any rule.
    """
    request = EventValidate(
        nurse_id=data.nurse_id,
        start_at=data.start_at,
        end_at=data.end_at,
        pto=data.pto,
    )
    await validate_locked(request, store, validator)

    event = Event(
        nurse_id=data.nurse_id,
        start_at=parse_date(data.start_at),
        end_at=parse_date(data.end_at),
        pto=data.pto,
    )

    db.add(event)
    await db.commit()
    await db.refresh(event)

    return event


@router.put("/events/{event_id}", response_model=EventResponse)
async def update_event(
    event_id: int,
    data: EventUpdate,
    db: AsyncSession = Depends(get_db),
    store: VacationStore = Depends(get_store),
    validator: VacationValidator = Depends(get_validator),
):
    """
    Update an event.

    The updated segment is re-checked without comparing it to its own
    saved version.
    """
    event = await store.get_event(event_id)
    if event is None:
        raise NotFoundError("Event", event_id)

    request = EventValidate(
        id=event.id,
        nurse_id=event.nurse_id,
        start_at=data.start_at if data.start_at is not None else event.start_at,
        end_at=data.end_at if data.end_at is not None else event.end_at,
        pto=data.pto if data.pto is not None else event.pto,
    )
    await validate_locked(request, store, validator)

    event.start_at = parse_date(request.start_at)
    event.end_at = parse_date(request.end_at)
    event.pto = request.pto

    await db.commit()
    await db.refresh(event)

    return event
