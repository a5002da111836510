"""
Goal allocation models
"""
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Optional, Tuple

from salesgoals.constants import TARGET_MAX, TARGET_MIN, TARGET_SINGLE
from salesgoals.utils.money import Number, ZERO, to_amount, to_decimal


def _frozen_amounts(amounts: Mapping[str, Number]) -> Mapping[str, Decimal]:
    return MappingProxyType({kind: to_decimal(value) for kind, value in amounts.items()})


@dataclass(frozen=True)
class GoalTarget:
    """
    Aggregate amounts to distribute, keyed by target kind.

    Use GoalTarget.range() for the min/max aggregate case and
    GoalTarget.single() for a per-seller goal.
    """
    amounts: Mapping[str, Decimal]

    def __post_init__(self):
        if not self.amounts:
            raise ValueError("GoalTarget needs at least one amount")
        frozen = MappingProxyType({kind: to_amount(value) for kind, value in self.amounts.items()})
        for kind, amount in frozen.items():
            if amount < ZERO:
                raise ValueError(f"Target {kind} must be non-negative, got {amount}")
        object.__setattr__(self, "amounts", frozen)

    @classmethod
    def range(cls, min_goal: Number, max_goal: Number) -> "GoalTarget":
        return cls({TARGET_MIN: min_goal, TARGET_MAX: max_goal})

    @classmethod
    def single(cls, goal: Number) -> "GoalTarget":
        return cls({TARGET_SINGLE: goal})

    @property
    def kinds(self) -> Tuple[str, ...]:
        return tuple(self.amounts.keys())

    def items(self) -> Iterable[Tuple[str, Decimal]]:
        return self.amounts.items()

    def __getitem__(self, kind: str) -> Decimal:
        return self.amounts[kind]


@dataclass(frozen=True)
class AllocatedGoal:
    """Goal values for one payable day, rounded to cents."""
    date: date
    weekday_short_name: str
    goals: Mapping[str, Decimal]

    def __post_init__(self):
        object.__setattr__(self, "goals", _frozen_amounts(self.goals))

    @property
    def min_goal(self) -> Optional[Decimal]:
        return self.goals.get(TARGET_MIN)

    @property
    def max_goal(self) -> Optional[Decimal]:
        return self.goals.get(TARGET_MAX)

    @property
    def goal(self) -> Optional[Decimal]:
        return self.goals.get(TARGET_SINGLE)

    def as_dict(self) -> Dict[str, object]:
        data: Dict[str, object] = {
            "date": self.date,
            "weekday_short_name": self.weekday_short_name,
        }
        data.update(self.goals)
        return data


@dataclass(frozen=True)
class RecordedResult:
    """Actual result recorded by the caller for one day."""
    date: date
    amount: Decimal
    transaction_count: Optional[int] = None

    def __post_init__(self):
        object.__setattr__(self, "amount", to_amount(self.amount))

    @property
    def is_realized(self) -> bool:
        return self.amount > ZERO


@dataclass(frozen=True)
class DailyGoalRow:
    """One payable day of a generated period sheet."""
    date: date
    weekday_short_name: str
    weight: Decimal
    goals: Mapping[str, Decimal] = field(default_factory=dict)
    actual_amount: Decimal = ZERO
    transaction_count: Optional[int] = None

    def __post_init__(self):
        object.__setattr__(self, "goals", _frozen_amounts(self.goals))
