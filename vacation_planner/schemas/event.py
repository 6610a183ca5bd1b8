"""
Pydantic schemas for vacation events.
"""

from typing import Any, Optional

from pydantic import BaseModel, computed_field

from vacation_planner.schemas.base import BaseSchema, DateSimple, DateTimeUTC

# Dates are accepted as submitted, whatever their JSON type, and parsed by
# the validator, so a malformed date is reported as a "format" violation
# instead of a 422.
RawDate = Optional[Any]


class EventResponse(BaseSchema):
    """Response model for events."""

    id: int
    nurse_id: int
    start_at: DateSimple
    end_at: DateSimple
    pto: bool = False
    created_at: DateTimeUTC


class EventValidate(BaseModel):
    """
    Request model for checking a segment without saving it.

    id is set when re-checking an event that is already saved, so the
    event is not compared against itself.
    """

    id: Optional[int] = None
    nurse_id: int
    start_at: RawDate = None
    end_at: RawDate = None
    pto: bool = False


class EventCreate(BaseModel):
    """Request model for creating an event."""

    nurse_id: int
    start_at: RawDate = None
    end_at: RawDate = None
    pto: bool = False


class EventUpdate(BaseModel):
    """Request model for updating an event."""

    start_at: RawDate = None
    end_at: RawDate = None
    pto: Optional[bool] = None


class ValidationResult(BaseModel):
    """Violations found for a segment, keyed by violation tag."""

    errors: dict[str, str] = {}

    @computed_field
    @property
    def valid(self) -> bool:
        return not self.errors
