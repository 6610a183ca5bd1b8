"""
Services package for business logic.
"""

from vacation_planner.services.store import SqlAlchemyVacationStore, VacationStore
from vacation_planner.services.validator import VacationValidator

__all__ = [
    "SqlAlchemyVacationStore",
    "VacationStore",
    "VacationValidator",
]
