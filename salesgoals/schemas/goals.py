"""
Goal allocation and recalculation schemas.
Monetary fields accept numbers or numeric strings (at most 13 integer digits
and 2 decimals) and are returned as
decimal strings.
"""
from datetime import date as date_type
from decimal import Decimal
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from salesgoals.constants import (
    AMOUNT_DECIMAL_PLACES,
    AMOUNT_MAX_DIGITS,
    TARGET_MAX,
    TARGET_MIN,
    TARGET_SINGLE,
)
from salesgoals.models.goal import GoalTarget, RecordedResult
from salesgoals.schemas.calendar import PeriodRequest


class TargetsIn(BaseModel):
    """Period targets: min_goal and/or max_goal for a store, or goal for a seller"""
    min_goal: Optional[Decimal] = Field(
        None,
        ge=0,
        max_digits=AMOUNT_MAX_DIGITS,
        decimal_places=AMOUNT_DECIMAL_PLACES,
        description="Minimum period target"
    )
    max_goal: Optional[Decimal] = Field(
        None,
        ge=0,
        max_digits=AMOUNT_MAX_DIGITS,
        decimal_places=AMOUNT_DECIMAL_PLACES,
        description="Maximum period target"
    )
    goal: Optional[Decimal] = Field(
        None,
        ge=0,
        max_digits=AMOUNT_MAX_DIGITS,
        decimal_places=AMOUNT_DECIMAL_PLACES,
        description="Single (per-seller) period target"
    )

    @model_validator(mode="after")
    def validate_target_combination(self) -> "TargetsIn":
        """goal cannot be mixed with min_goal/max_goal, and at least one target is required"""
        has_range = self.min_goal is not None or self.max_goal is not None
        if self.goal is not None and has_range:
            raise ValueError("Use either goal or min_goal/max_goal, not both")
        if self.goal is None and not has_range:
            raise ValueError("At least one target (min_goal, max_goal or goal) is required")
        return self

    def to_model(self) -> GoalTarget:
        amounts: Dict[str, Decimal] = {}
        for kind, value in ((TARGET_MIN, self.min_goal), (TARGET_MAX, self.max_goal), (TARGET_SINGLE, self.goal)):
            if value is not None:
                amounts[kind] = value
        return GoalTarget(amounts)


class RecordedResultIn(BaseModel):
    """Schema for a recorded daily result"""
    date: date_type = Field(..., description="Day of the result")
    amount: Decimal = Field(
        ...,
        ge=0,
        max_digits=AMOUNT_MAX_DIGITS,
        decimal_places=AMOUNT_DECIMAL_PLACES,
        description="Actual sales amount"
    )
    transaction_count: Optional[int] = Field(None, ge=0, description="Number of transactions / customers")

    def to_model(self) -> RecordedResult:
        return RecordedResult(date=self.date, amount=self.amount, transaction_count=self.transaction_count)


class HistoryMixin(BaseModel):
    history: List[RecordedResultIn] = Field(default_factory=list, description="Results recorded so far")

    @field_validator("history")
    @classmethod
    def validate_unique_result_dates(cls, v: List[RecordedResultIn]) -> List[RecordedResultIn]:
        """One recorded result per date"""
        dates = [result.date for result in v]
        if len(dates) != len(set(dates)):
            raise ValueError("history contains more than one result for the same date")
        return v

    def to_results(self) -> List[RecordedResult]:
        return [result.to_model() for result in self.history]


class AllocateRequest(PeriodRequest):
    """Schema for splitting period targets"""
    targets: TargetsIn


class GoalSheetRequest(HistoryMixin, AllocateRequest):
    """Schema for generating a period sheet"""


class RecalculateRequest(HistoryMixin, AllocateRequest):
    """Schema for recalculating future goals after a result changes"""
    changed_date: date_type = Field(..., description="Day whose actual amount changed")
    new_amount: Decimal = Field(
        ...,
        ge=0,
        max_digits=AMOUNT_MAX_DIGITS,
        decimal_places=AMOUNT_DECIMAL_PLACES,
        description="New actual amount for changed_date"
    )


class AllocatedGoalOut(BaseModel):
    """Schema for one day's goals"""
    date: date_type
    weekday_short_name: str
    min_goal: Optional[Decimal] = None
    max_goal: Optional[Decimal] = None
    goal: Optional[Decimal] = None

    model_config = ConfigDict(from_attributes=True)


class UpdatedResultOut(BaseModel):
    date: date_type
    actual_amount: Decimal


class RecalculateResponse(BaseModel):
    """Changed day (actual amount only) plus the re-goaled future days"""
    updated: UpdatedResultOut
    goals: List[AllocatedGoalOut]


class DailyGoalRowOut(BaseModel):
    """Schema for one row of a period sheet"""
    date: date_type
    weekday_short_name: str
    weight: Decimal
    min_goal: Optional[Decimal] = None
    max_goal: Optional[Decimal] = None
    goal: Optional[Decimal] = None
    actual_amount: Decimal
    transaction_count: Optional[int] = None
