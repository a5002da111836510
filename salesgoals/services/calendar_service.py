"""
Calendar service - work-day classification and period expansion
"""
import logging
from datetime import date
from decimal import Decimal
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from salesgoals.constants import (
    DEFAULT_LOCALE,
    WEEKDAY_NAMES,
    WEEKDAY_SHORT_NAMES,
    WEIGHT_FULL,
    WEIGHT_HALF,
    WEIGHT_NONE,
)
from salesgoals.core.exceptions import InvalidRangeError, NotFoundError
from salesgoals.models.calendar import DayDescriptor, DaySchedule
from salesgoals.models.holiday import Holiday, HolidayRegistry
from salesgoals.utils.datetime_utils import days_inclusive, iter_dates

logger = logging.getLogger(__name__)

HolidaySource = Union[HolidayRegistry, Iterable[Holiday], None]

SATURDAY = 5
SUNDAY = 6


def is_saturday(check_date: date) -> bool:
    return check_date.weekday() == SATURDAY


def is_sunday(check_date: date) -> bool:
    """Check if a date is Sunday (weekly off)"""
    return check_date.weekday() == SUNDAY  # Monday=0, Sunday=6


def day_weight(check_date: date, holiday: Optional[Holiday]) -> Decimal:
    """
    Weight of a calendar day, in precedence order:
    Sunday -> 0; holiday -> 0.5 if worked else 0; Saturday -> 0.5; otherwise 1.
    """
    if is_sunday(check_date):
        return WEIGHT_NONE
    if holiday is not None:
        return WEIGHT_HALF if holiday.is_worked else WEIGHT_NONE
    if is_saturday(check_date):
        return WEIGHT_HALF
    return WEIGHT_FULL


def _weekday_names(locale: str) -> Tuple[Sequence[str], Sequence[str]]:
    if locale not in WEEKDAY_NAMES:
        raise ValueError(f"Unsupported weekday locale: {locale}")
    return WEEKDAY_NAMES[locale], WEEKDAY_SHORT_NAMES[locale]


def classify_day(
    check_date: date,
    holidays: HolidaySource = None,
    locale: str = DEFAULT_LOCALE
) -> DayDescriptor:
    """
    Classify a calendar date into a weighted work-day descriptor

    Args:
        check_date: Date to classify
        holidays: Holiday registry (or plain iterable of holidays)
        locale: Locale for weekday names

    Returns:
        DayDescriptor with the derived weight
    """
    registry = HolidayRegistry.of(holidays)
    names, short_names = _weekday_names(locale)
    holiday = registry.get(check_date)
    weekday = check_date.weekday()
    saturday = weekday == SATURDAY
    sunday = weekday == SUNDAY

    return DayDescriptor(
        date=check_date,
        weekday_name=names[weekday],
        weekday_short_name=short_names[weekday],
        is_weekend=saturday or sunday,
        is_saturday=saturday,
        is_sunday=sunday,
        is_holiday=holiday is not None,
        holiday_worked=bool(holiday and holiday.is_worked),
        weight=day_weight(check_date, holiday),
    )


def expand_period(
    start_date: date,
    end_date: date,
    holidays: HolidaySource = None,
    locale: str = DEFAULT_LOCALE
) -> DaySchedule:
    """
    Enumerate and classify every day in [start_date, end_date]

    Args:
        start_date: First day of the period (inclusive)
        end_date: Last day of the period (inclusive)
        holidays: Holiday registry (or plain iterable of holidays)
        locale: Locale for weekday names

    Returns:
        DaySchedule ordered ascending by date, one descriptor per calendar day

    Raises:
        InvalidRangeError: If start_date is after end_date
    """
    if start_date > end_date:
        raise InvalidRangeError(start_date, end_date)

    registry = HolidayRegistry.of(holidays)
    schedule = tuple(
        classify_day(current_date, registry, locale)
        for current_date in iter_dates(start_date, end_date)
    )
    logger.debug(
        "Expanded period %s..%s: %d days, %d holidays in registry",
        start_date, end_date, days_inclusive(start_date, end_date), len(registry)
    )
    return schedule


def payable_days(schedule: Iterable[DayDescriptor]) -> List[DayDescriptor]:
    """Days with weight > 0, ascending by date"""
    return sorted((day for day in schedule if day.is_payable), key=lambda day: day.date)


def total_weight(days: Iterable[DayDescriptor]) -> Decimal:
    """Sum of day weights"""
    return sum((day.weight for day in days), WEIGHT_NONE)


def find_day(schedule: Sequence[DayDescriptor], target_date: date) -> DayDescriptor:
    """
    Look up a date in a schedule

    Raises:
        NotFoundError: If the date is not part of the schedule
    """
    for day in schedule:
        if day.date == target_date:
            return day
    raise NotFoundError(target_date)


def payable_index(payable: Sequence[DayDescriptor], target_date: date) -> int:
    """
    Position of a date within a payable-only day sequence

    Raises:
        NotFoundError: If the date is absent or has weight 0
    """
    for index, day in enumerate(payable):
        if day.date == target_date:
            return index
    raise NotFoundError(target_date, "not present in schedule or has weight 0")
