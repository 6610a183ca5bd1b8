"""
CurrentYear model.
Maps to the current_years table in PostgreSQL.
"""

from datetime import datetime

from sqlalchemy import CheckConstraint, DateTime, Integer
from sqlalchemy.orm import Mapped, mapped_column

from vacation_planner.database import Base


class CurrentYear(Base):
    """
    Scheduling year anchor.

    The scheduling year runs from March of `year` to February of `year + 1`.
    """

    __tablename__ = "current_years"
    __table_args__ = (CheckConstraint("id = 1", name="current_years_singleton"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, default=1)
    year: Mapped[int] = mapped_column(Integer, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False
    )

    def __repr__(self) -> str:
        return f"<CurrentYear {self.year}>"
