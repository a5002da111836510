"""
Metrics service - ideal ticket, dynamic day goal, period projection and summary
"""
import logging
from datetime import date
from decimal import Decimal
from typing import Iterable, Optional

from salesgoals.constants import PROJECTION_EXCEEDED_PCT, PROJECTION_ON_TRACK_PCT
from salesgoals.models.calendar import DayDescriptor
from salesgoals.models.goal import GoalTarget, RecordedResult
from salesgoals.models.metrics import PeriodSummary, Projection, ProjectionStatus, TargetProgress
from salesgoals.services.allocation_service import split_amount
from salesgoals.services.calendar_service import find_day, payable_days, total_weight
from salesgoals.services.history_service import amount_on, index_history
from salesgoals.utils.money import Number, ZERO, non_negative, round_money, sum_money, to_amount, to_decimal

logger = logging.getLogger(__name__)

HUNDRED = Decimal("100")
DEFAULT_PESSIMISTIC_FACTOR = Decimal("0.8")
DEFAULT_OPTIMISTIC_FACTOR = Decimal("1.1")


def ideal_ticket(
    day_goal: Number,
    transaction_count: Optional[int],
    history: Iterable[RecordedResult],
    as_of: date
) -> Optional[Decimal]:
    """
    Average revenue per transaction needed to reach a day's goal

    Uses the day's own transaction count when positive, otherwise the average
    count over earlier days that recorded transactions.

    Args:
        day_goal: Goal for the day
        transaction_count: Expected transactions for the day (may be None/0)
        history: Recorded results for the period
        as_of: Day being evaluated; only earlier history is averaged

    Returns:
        Ticket rounded to cents, or None when there is no transaction history
        at all (insufficient data, not a zero ticket)
    """
    goal = to_amount(day_goal)
    if transaction_count and transaction_count > 0:
        return round_money(goal / Decimal(transaction_count))

    counts = [
        result.transaction_count
        for result in history
        if result.date < as_of and result.transaction_count and result.transaction_count > 0
    ]
    if not counts:
        return None

    average_count = Decimal(sum(counts)) / Decimal(len(counts))
    return round_money(goal / average_count)


def dynamic_day_goal(
    schedule: Iterable[DayDescriptor],
    target: Number,
    history: Iterable[RecordedResult],
    as_of: date
) -> Decimal:
    """
    Anticipatory goal for a single day

    Before any sale is recorded it is the static proportional share
    target / total_weight * weight. Once an earlier payable day has sales,
    the unsold remainder is split over the payable days from as_of onward
    and as_of's share is returned.

    Args:
        schedule: Day schedule for the period
        target: Aggregate target for the period
        history: Recorded results
        as_of: Day being queried

    Returns:
        Goal for as_of rounded to cents (0.00 on weight-0 days)

    Raises:
        NotFoundError: If as_of is not part of the schedule
    """
    schedule = tuple(schedule)
    current = find_day(schedule, as_of)
    if not current.is_payable:
        return round_money(ZERO)

    target = to_amount(target)
    days = payable_days(schedule)
    history_by_date = index_history(history)
    earlier = [day for day in days if day.date < as_of]
    sold_before = sum_money(amount_on(history_by_date, day.date) for day in earlier)

    if not any(amount_on(history_by_date, day.date) > ZERO for day in earlier):
        weight_sum = total_weight(days)
        return round_money(target / weight_sum * current.weight)

    upcoming = [day for day in days if day.date >= as_of]
    shares = split_amount(upcoming, non_negative(target - sold_before))
    return shares.get(as_of, round_money(ZERO))


def projection_status(progress_pct: Decimal) -> ProjectionStatus:
    if progress_pct >= PROJECTION_EXCEEDED_PCT:
        return ProjectionStatus.EXCEEDED
    if progress_pct >= PROJECTION_ON_TRACK_PCT:
        return ProjectionStatus.ON_TRACK
    return ProjectionStatus.HIGH_RISK


def _percent(part: Decimal, whole: Decimal) -> Decimal:
    if whole <= ZERO:
        return round_money(ZERO)
    return round_money(part / whole * HUNDRED)


def project_period(
    schedule: Iterable[DayDescriptor],
    history: Iterable[RecordedResult],
    as_of: date,
    target: Optional[Number] = None,
    pessimistic_factor: Number = DEFAULT_PESSIMISTIC_FACTOR,
    optimistic_factor: Number = DEFAULT_OPTIMISTIC_FACTOR
) -> Projection:
    """
    Linear projection of the period outcome

    realistic = realized_total + average_daily_realized * remaining days,
    where the average is taken over payable days with sales up to as_of and
    the remaining days are payable days after as_of.

    Args:
        schedule: Day schedule for the period
        history: Recorded results
        as_of: Reference date (explicit; the engine never reads the clock)
        target: Optional target to grade the projection against
        pessimistic_factor: Multiplier for the pessimistic band
        optimistic_factor: Multiplier for the optimistic band

    Returns:
        Projection with bands, plus progress and status when target is given
    """
    days = payable_days(schedule)
    history_by_date = index_history(history)

    amounts = [amount_on(history_by_date, day.date) for day in days if day.date <= as_of]
    realized = sum_money(amounts)
    realized_days = sum(1 for amount in amounts if amount > ZERO)
    average = realized / realized_days if realized_days else ZERO
    remaining_days = sum(1 for day in days if day.date > as_of)

    realistic = realized + average * remaining_days
    projection_kwargs = {}
    if target is not None:
        target = to_amount(target)
        progress = _percent(realistic, target)
        projection_kwargs = {
            "target": round_money(target),
            "progress_pct": progress,
            "status": projection_status(progress) if target > ZERO else None,
        }

    logger.debug(
        "Projection as of %s: realized=%s over %d days, %d days remaining",
        as_of, realized, realized_days, remaining_days
    )
    return Projection(
        realized_total=round_money(realized),
        realized_days=realized_days,
        average_daily_realized=round_money(average),
        remaining_payable_days=remaining_days,
        realistic=round_money(realistic),
        pessimistic=round_money(realistic * to_decimal(pessimistic_factor)),
        optimistic=round_money(realistic * to_decimal(optimistic_factor)),
        **projection_kwargs,
    )


def summarize_period(
    schedule: Iterable[DayDescriptor],
    history: Iterable[RecordedResult],
    targets: GoalTarget
) -> PeriodSummary:
    """
    Period-to-date totals and progress against each target

    Args:
        schedule: Day schedule for the period
        history: Recorded results
        targets: Aggregate amounts for the period

    Returns:
        PeriodSummary over the payable days of the schedule
    """
    history_by_date = index_history(history)
    amounts = [amount_on(history_by_date, day.date) for day in payable_days(schedule)]
    sold = [amount for amount in amounts if amount > ZERO]
    total = sum_money(sold)

    progress = {
        kind: TargetProgress(
            target=round_money(amount),
            progress_pct=_percent(total, amount),
            remaining=round_money(non_negative(amount - total)),
            reached=total >= amount,
        )
        for kind, amount in targets.items()
    }

    return PeriodSummary(
        total_sold=round_money(total),
        days_with_sales=len(sold),
        average_daily_sales=round_money(total / len(sold)) if sold else round_money(ZERO),
        highest_sale=round_money(max(sold)) if sold else round_money(ZERO),
        lowest_sale=round_money(min(sold)) if sold else round_money(ZERO),
        targets=progress,
    )
