"""
Derived metric models
"""
import enum
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict, Optional


class ProjectionStatus(str, enum.Enum):
    EXCEEDED = "exceeded"
    ON_TRACK = "on_track"
    HIGH_RISK = "high_risk"


@dataclass(frozen=True)
class Projection:
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


@dataclass(frozen=True)
class TargetProgress:
    target: Decimal
    progress_pct: Decimal
    remaining: Decimal
    reached: bool


@dataclass(frozen=True)
class PeriodSummary:
    total_sold: Decimal
    days_with_sales: int
    average_daily_sales: Decimal
    highest_sale: Decimal
    lowest_sale: Decimal
    targets: Dict[str, TargetProgress] = field(default_factory=dict)
