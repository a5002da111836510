"""
Work-day calendar models
"""
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Tuple

from salesgoals.constants import WEIGHT_NONE


@dataclass(frozen=True)
class DayDescriptor:
    """One classified calendar day. weight is derived from weekday + holiday lookup."""
    date: date
    weekday_name: str
    weekday_short_name: str
    is_weekend: bool
    is_saturday: bool
    is_sunday: bool
    is_holiday: bool
    holiday_worked: bool
    weight: Decimal

    @property
    def is_payable(self) -> bool:
        return self.weight > WEIGHT_NONE


# Ordered ascending by date
DaySchedule = Tuple[DayDescriptor, ...]
