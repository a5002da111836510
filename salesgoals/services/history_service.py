"""
Result history helpers shared by recalculation and metrics
"""
from datetime import date
from decimal import Decimal
from typing import Dict, Iterable, Optional

from salesgoals.models.calendar import DayDescriptor
from salesgoals.models.goal import RecordedResult
from salesgoals.utils.money import ZERO, sum_money


def index_history(history: Iterable[RecordedResult]) -> Dict[date, RecordedResult]:
    """Key recorded results by date; a repeated date keeps the last record"""
    return {result.date: result for result in history}


def amount_on(history_by_date: Dict[date, RecordedResult], day: date) -> Decimal:
    result = history_by_date.get(day)
    return result.amount if result is not None else ZERO


def realized_total(
    days: Iterable[DayDescriptor],
    history_by_date: Dict[date, RecordedResult],
    override_date: Optional[date] = None,
    override_amount: Optional[Decimal] = None
) -> Decimal:
    """
    Sum recorded amounts over the given days

    Args:
        days: Days to accumulate (usually payable days up to a cut-off)
        history_by_date: Recorded results keyed by date
        override_date: Date whose recorded amount is replaced
        override_amount: Amount used for override_date

    Returns:
        Total recorded amount
    """
    return sum_money(
        override_amount if (override_date is not None and day.date == override_date)
        else amount_on(history_by_date, day.date)
        for day in days
    )
