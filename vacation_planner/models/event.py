"""
Event model for committed vacation segments.
Maps to the events table in PostgreSQL.
"""

from datetime import date, datetime
from typing import TYPE_CHECKING

from sqlalchemy import (
    Boolean,
    Date,
    DateTime,
    ForeignKey,
    Index,
    Integer,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from vacation_planner.database import Base

if TYPE_CHECKING:
    from vacation_planner.models.nurse import Nurse


class Event(Base):
    """Event model - one contiguous vacation segment of a nurse."""

    __tablename__ = "events"
    __table_args__ = (Index("ix_events_start_at", "start_at"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    nurse_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("nurses.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    start_at: Mapped[date] = mapped_column(Date, nullable=False)
    end_at: Mapped[date] = mapped_column(Date, nullable=False)
    pto: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow, nullable=False)

    # Relationships
    nurse: Mapped["Nurse"] = relationship("Nurse", back_populates="events")

    def __repr__(self) -> str:
        return f"<Event {self.nurse_id} ({self.start_at} to {self.end_at})>"
