"""
Base schema classes with custom serialization.

Event dates are calendar days, so they are always serialized as plain
YYYY-MM-DD strings with no time or timezone attached.
"""

from datetime import date, datetime
from typing import Annotated

from pydantic import BaseModel, ConfigDict, PlainSerializer


def serialize_date_simple(d: date | None) -> str | None:
    """Serialize date as simple ISO date string (YYYY-MM-DD)."""
    if d is None:
        return None
    return d.isoformat()


def serialize_datetime_utc(dt: datetime | None) -> str | None:
    """Serialize a naive UTC datetime with millisecond precision and Z suffix."""
    if dt is None:
        return None
    formatted = dt.strftime("%Y-%m-%dT%H:%M:%S")
    ms = dt.microsecond // 1000
    return f"{formatted}.{ms:03d}Z"


# Annotated types for Pydantic v2 serialization
DateSimple = Annotated[date, PlainSerializer(serialize_date_simple, return_type=str)]
DateTimeUTC = Annotated[datetime, PlainSerializer(serialize_datetime_utc, return_type=str)]


class BaseSchema(BaseModel):
    """
    Base schema class with standard configuration.
    Use DateSimple or DateTimeUTC types for fields.
    """

    model_config = ConfigDict(
        from_attributes=True,
    )
