"""
Allocation service - proportional split of period targets over payable days
"""
import logging
from datetime import date
from decimal import Decimal
from typing import Dict, Iterable, List, Optional, Sequence

from salesgoals.models.calendar import DayDescriptor
from salesgoals.models.goal import AllocatedGoal, DailyGoalRow, GoalTarget, RecordedResult
from salesgoals.services.calendar_service import payable_days, total_weight
from salesgoals.services.history_service import amount_on, index_history
from salesgoals.utils.money import ZERO, non_negative, round_money, to_decimal

logger = logging.getLogger(__name__)


def split_amount(days: Sequence[DayDescriptor], amount: Decimal) -> Dict[date, Decimal]:
    """
    Split an amount over days proportionally to their weight

    Every day gets round_half_up(amount / W * weight, 2) except the last one,
    which absorbs the rounding drift (amount minus the other shares, floored
    at 0) so the shares add up to amount exactly.

    Args:
        days: Payable days in ascending date order
        amount: Amount to distribute

    Returns:
        Share per date; empty when days is empty or carries no weight
    """
    weight_sum = total_weight(days)
    if not days or weight_sum <= ZERO:
        return {}

    amount = to_decimal(amount)
    per_weight = amount / weight_sum
    shares: Dict[date, Decimal] = {}
    assigned = ZERO

    for day in days[:-1]:
        share = round_money(per_weight * day.weight)
        shares[day.date] = share
        assigned += share

    last_day = days[-1]
    shares[last_day.date] = round_money(non_negative(amount - assigned))
    return shares


def allocate_over(days: Sequence[DayDescriptor], targets: GoalTarget) -> List[AllocatedGoal]:
    """
    Allocate every target independently over an already-filtered day sequence

    Args:
        days: Payable days in ascending date order
        targets: Amounts to distribute, keyed by target kind

    Returns:
        One AllocatedGoal per day (empty when the days carry no weight)
    """
    splits = {kind: split_amount(days, amount) for kind, amount in targets.items()}
    if not all(splits.values()):
        return []

    return [
        AllocatedGoal(
            date=day.date,
            weekday_short_name=day.weekday_short_name,
            goals={kind: shares[day.date] for kind, shares in splits.items()},
        )
        for day in days
    ]


def allocate_goals(schedule: Iterable[DayDescriptor], targets: GoalTarget) -> List[AllocatedGoal]:
    """
    Split period targets across a schedule's payable days

    Args:
        schedule: Day schedule (see calendar_service.expand_period)
        targets: Aggregate amounts (min/max or a single seller goal)

    Returns:
        AllocatedGoal for each payable day, ascending by date. Weight-0 days
        are omitted; an all-zero schedule yields an empty list.
    """
    days = payable_days(schedule)
    allocated = allocate_over(days, targets)
    logger.debug(
        "Allocated %s over %d payable days (total weight %s)",
        dict(targets.items()), len(allocated), total_weight(days)
    )
    return allocated


def build_goal_sheet(
    schedule: Iterable[DayDescriptor],
    targets: GoalTarget,
    history: Optional[Iterable[RecordedResult]] = None
) -> List[DailyGoalRow]:
    """
    Generate the per-day sheet for a period

    Rows carry the initial allocation for every payable day together with any
    result already recorded for that date, which is what a caller persists
    when a period is (re)generated.

    Args:
        schedule: Day schedule
        targets: Aggregate amounts
        history: Results recorded so far (optional)

    Returns:
        One DailyGoalRow per payable day, ascending by date
    """
    days = payable_days(schedule)
    goals_by_date = {goal.date: goal.goals for goal in allocate_over(days, targets)}
    history_by_date = index_history(history or ())

    rows = []
    for day in days:
        recorded = history_by_date.get(day.date)
        rows.append(DailyGoalRow(
            date=day.date,
            weekday_short_name=day.weekday_short_name,
            weight=day.weight,
            goals=goals_by_date.get(day.date, {}),
            actual_amount=amount_on(history_by_date, day.date),
            transaction_count=recorded.transaction_count if recorded else None,
        ))
    return rows
