"""
Domain exceptions raised by the goal engine.
Only structurally invalid caller input raises; numeric edge cases return
empty or zero results.
"""
from datetime import date
from typing import Optional


class GoalEngineError(Exception):
    """Base class for goal engine failures"""


class InvalidRangeError(GoalEngineError):
    """Start date falls after end date"""

    def __init__(self, start_date: date, end_date: date):
        self.start_date = start_date
        self.end_date = end_date
        super().__init__(f"start_date {start_date} must be on or before end_date {end_date}")


class NotFoundError(GoalEngineError):
    """Referenced date is missing from the schedule, or has weight 0"""

    def __init__(self, missing_date: date, reason: Optional[str] = None):
        self.date = missing_date
        self.reason = reason or "not present in schedule"
        super().__init__(f"Date {missing_date} {self.reason}")
