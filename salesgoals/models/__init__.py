"""
Engine value objects
"""
from salesgoals.models.holiday import Holiday, HolidayRegistry
from salesgoals.models.calendar import DayDescriptor, DaySchedule
from salesgoals.models.goal import AllocatedGoal, DailyGoalRow, GoalTarget, RecordedResult
from salesgoals.models.metrics import PeriodSummary, Projection, ProjectionStatus, TargetProgress

__all__ = [
    "Holiday",
    "HolidayRegistry",
    "DayDescriptor",
    "DaySchedule",
    "AllocatedGoal",
    "DailyGoalRow",
    "GoalTarget",
    "RecordedResult",
    "PeriodSummary",
    "Projection",
    "ProjectionStatus",
    "TargetProgress",
]
