"""
API routers package.
"""

from vacation_planner.routers import (
    health,
    events,
)

__all__ = [
    "health",
    "events",
]
