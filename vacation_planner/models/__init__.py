"""
SQLAlchemy models package.
All models inherit from the Base class defined in database.py.
"""

from vacation_planner.models.unit import Unit, UnitAndShift, AdditionalMonth
from vacation_planner.models.nurse import Nurse
from vacation_planner.models.event import Event
from vacation_planner.models.current_year import CurrentYear

__all__ = [
    "Unit",
    "UnitAndShift",
    "AdditionalMonth",
    "Nurse",
    "Event",
    "CurrentYear",
]
