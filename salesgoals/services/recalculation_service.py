"""
Recalculation service - forward redistribution of the unrealized target.

When a day's actual result changes, every payable day up to and including
that day keeps the goal it already has; only the remainder of each target is
spread again over the payable days that follow, with the same weighting as
the initial split.
"""
import logging
from datetime import date
from decimal import Decimal
from typing import Iterable, List

from salesgoals.models.calendar import DayDescriptor
from salesgoals.models.goal import AllocatedGoal, GoalTarget, RecordedResult
from salesgoals.services.allocation_service import allocate_over
from salesgoals.services.calendar_service import payable_days, payable_index, total_weight
from salesgoals.services.history_service import index_history, realized_total
from salesgoals.utils.money import Number, ZERO, non_negative, to_amount

logger = logging.getLogger(__name__)


def remaining_targets(targets: GoalTarget, realized: Decimal) -> GoalTarget:
    """Per-target remainder after realized sales, floored at 0"""
    return GoalTarget({kind: non_negative(amount - realized) for kind, amount in targets.items()})


def recalculate_goals(
    schedule: Iterable[DayDescriptor],
    history: Iterable[RecordedResult],
    changed_date: date,
    new_amount: Number,
    targets: GoalTarget
) -> List[AllocatedGoal]:
    """
    Recompute future-day goals after the result for changed_date changes

    Args:
        schedule: Day schedule for the period, ascending by date
        history: Every result recorded for the period
        changed_date: Day whose actual amount was just recorded or edited
        new_amount: New actual amount for changed_date (replaces any
            recorded value for that date)
        targets: Aggregate amounts for the period

    Returns:
        AllocatedGoal for every payable day strictly after changed_date.
        Empty when there are no future days or they carry no weight.

    Raises:
        NotFoundError: If changed_date is not a payable day of the schedule
        ValueError: If new_amount is negative or out of range
    """
    new_amount = to_amount(new_amount)
    if new_amount < ZERO:
        raise ValueError(f"new_amount must be non-negative, got {new_amount}")

    days = payable_days(schedule)
    position = payable_index(days, changed_date)

    history_by_date = index_history(history)
    realized = realized_total(
        days[:position + 1],
        history_by_date,
        override_date=changed_date,
        override_amount=new_amount,
    )

    future_days = days[position + 1:]
    if not future_days or total_weight(future_days) <= ZERO:
        logger.debug("No future payable days after %s; nothing to redistribute", changed_date)
        return []

    remaining = remaining_targets(targets, realized)
    logger.debug(
        "Recalculating after %s: realized=%s remaining=%s over %d future days",
        changed_date, realized, dict(remaining.items()), len(future_days)
    )
    return allocate_over(future_days, remaining)
