"""
Pydantic schemas for request/response validation.
"""

from vacation_planner.schemas.event import (
    EventResponse,
    EventValidate,
    EventCreate,
    EventUpdate,
    ValidationResult,
)

__all__ = [
    # Events
    "EventResponse",
    "EventValidate",
    "EventCreate",
    "EventUpdate",
    "ValidationResult",
]
