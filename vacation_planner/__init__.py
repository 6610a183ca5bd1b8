"""
Nurse vacation planner.
Validates vacation segments against unit staffing and scheduling rules.
"""

__version__ = "1.0.0"
