"""
Nurse model.
Maps to the nurses table in PostgreSQL.
"""

from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import (
    CheckConstraint,
    ForeignKey,
    Integer,
    String,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from vacation_planner.database import Base

if TYPE_CHECKING:
    from vacation_planner.models.event import Event
    from vacation_planner.models.unit import Unit


class Nurse(Base):
    """Nurse model - staff member who books vacation segments."""

    __tablename__ = "nurses"
    __table_args__ = (CheckConstraint("num_weeks_off >= 0", name="nurses_num_weeks_off_check"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    shift: Mapped[str] = mapped_column(String(20), nullable=False)
    unit_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("units.id", ondelete="CASCADE"),
        nullable=False,
    )
    seniority: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    num_weeks_off: Mapped[int] = mapped_column(Integer, default=0, nullable=False)

    # Relationships
    unit: Mapped["Unit"] = relationship("Unit", back_populates="nurses")

    events: Mapped[List["Event"]] = relationship(
        "Event",
        back_populates="nurse",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        return f"<Nurse {self.name} ({self.shift})>"
