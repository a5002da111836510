"""
Derived metrics schemas
"""
from datetime import date as date_type
from decimal import Decimal
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from salesgoals.constants import AMOUNT_DECIMAL_PLACES, AMOUNT_MAX_DIGITS
from salesgoals.models.metrics import ProjectionStatus
from salesgoals.schemas.calendar import PeriodRequest
from salesgoals.schemas.goals import HistoryMixin, TargetsIn


class IdealTicketRequest(HistoryMixin):
    """Schema for an ideal ticket calculation"""
    day_goal: Decimal = Field(
        ...,
        ge=0,
        max_digits=AMOUNT_MAX_DIGITS,
        decimal_places=AMOUNT_DECIMAL_PLACES,
        description="Goal for the day"
    )
    transaction_count: Optional[int] = Field(None, ge=0, description="Expected transactions for the day")
    as_of: date_type = Field(..., description="Day being evaluated")


class IdealTicketOut(BaseModel):
    as_of: date_type
    ideal_ticket: Optional[Decimal] = Field(None, description="null when there is no transaction history")
    insufficient_data: bool


class DynamicGoalRequest(HistoryMixin, PeriodRequest):
    """Schema for the anticipatory goal of a single day"""
    target: Decimal = Field(
        ...,
        ge=0,
        max_digits=AMOUNT_MAX_DIGITS,
        decimal_places=AMOUNT_DECIMAL_PLACES,
        description="Period target"
    )
    as_of: Optional[date_type] = Field(None, description="Day being queried (defaults to today)")


class DynamicGoalOut(BaseModel):
    date: date_type
    goal: Decimal


class ProjectionRequest(HistoryMixin, PeriodRequest):
    """Schema for a period projection"""
    as_of: Optional[date_type] = Field(None, description="Reference date (defaults to today)")
    target: Optional[Decimal] = Field(
        None,
        ge=0,
        max_digits=AMOUNT_MAX_DIGITS,
        decimal_places=AMOUNT_DECIMAL_PLACES,
        description="Target to grade the projection against"
    )


class ProjectionOut(BaseModel):
    as_of: date_type
    realized_total: Decimal
    realized_days: int
    average_daily_realized: Decimal
    remaining_payable_days: int
    realistic: Decimal
    pessimistic: Decimal
    optimistic: Decimal
    target: Optional[Decimal] = None
    progress_pct: Optional[Decimal] = None
    status: Optional[ProjectionStatus] = None

    model_config = ConfigDict(from_attributes=True)


class SummaryRequest(HistoryMixin, PeriodRequest):
    """Schema for period-to-date summary"""
    targets: TargetsIn


class TargetProgressOut(BaseModel):
    target: Decimal
    progress_pct: Decimal
    remaining: Decimal
    reached: bool

    model_config = ConfigDict(from_attributes=True)


class SummaryOut(BaseModel):
    total_sold: Decimal
    days_with_sales: int
    average_daily_sales: Decimal
    highest_sale: Decimal
    lowest_sale: Decimal
    targets: Dict[str, TargetProgressOut]

    model_config = ConfigDict(from_attributes=True)
