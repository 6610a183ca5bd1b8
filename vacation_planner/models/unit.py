"""
Unit, UnitAndShift and AdditionalMonth models.
Maps to the units, unit_and_shifts and additional_months tables in PostgreSQL.
"""

from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import (
    CheckConstraint,
    ForeignKey,
    Integer,
    String,
    UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from vacation_planner.database import Base

if TYPE_CHECKING:
    from vacation_planner.models.nurse import Nurse


class Unit(Base):
    """Unit model - a hospital unit that nurses belong to."""

    __tablename__ = "units"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)

    # Relationships
    nurses: Mapped[List["Nurse"]] = relationship("Nurse", back_populates="unit")

    shift_configs: Mapped[List["UnitAndShift"]] = relationship(
        "UnitAndShift",
        back_populates="unit",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        return f"<Unit {self.name}>"


class UnitAndShift(Base):
    """
    Staffing limits for one shift of a unit.

    year is the number of nurses allowed off on any single day.
    holiday, when set, caps the nurses off during the holiday window.
    """

    __tablename__ = "unit_and_shifts"
    __table_args__ = (
        UniqueConstraint("unit_id", "shift", name="unit_and_shifts_unique"),
        CheckConstraint("year >= 0", name="unit_and_shifts_year_check"),
        CheckConstraint("holiday IS NULL OR holiday >= 0", name="unit_and_shifts_holiday_check"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    unit_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("units.id", ondelete="CASCADE"),
        nullable=False,
    )
    shift: Mapped[str] = mapped_column(String(20), nullable=False)
    year: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    holiday: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)

    # Relationships
    unit: Mapped["Unit"] = relationship("Unit", back_populates="shift_configs")

    additional_months: Mapped[List["AdditionalMonth"]] = relationship(
        "AdditionalMonth",
        back_populates="unit_and_shift",
        cascade="all, delete-orphan",
        lazy="selectin",
    )

    @property
    def start_months(self) -> List[int]:
        """Start months of the rolling bonus windows."""
        return [m.month for m in self.additional_months]

    def __repr__(self) -> str:
        return f"<UnitAndShift unit={self.unit_id} {self.shift} year={self.year}>"


class AdditionalMonth(Base):
    """
    Start month of a three month window with one extra nurse allowed off.

    Months are stored 0-11 and compared modulo 12, so 0 is December and a
    window starting at 11 or 0 earns December a bonus. Reading 0 as a
    month that never matches would leave December without one.
    """

    __tablename__ = "additional_months"
    __table_args__ = (CheckConstraint("month >= 0 AND month <= 11", name="additional_months_month_check"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    unit_and_shift_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("unit_and_shifts.id", ondelete="CASCADE"),
        nullable=False,
    )
    month: Mapped[int] = mapped_column(Integer, nullable=False)

    # Relationships
    unit_and_shift: Mapped["UnitAndShift"] = relationship("UnitAndShift", back_populates="additional_months")

    def __repr__(self) -> str:
        return f"<AdditionalMonth {self.month}>"
