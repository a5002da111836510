"""
Dependencies and request helpers for FastAPI endpoints
"""
from datetime import date
from typing import Optional

from salesgoals.core.config import Settings, settings
from salesgoals.models.calendar import DaySchedule
from salesgoals.schemas.calendar import PeriodRequest
from salesgoals.services.calendar_service import expand_period
from salesgoals.utils.datetime_utils import today


def get_settings() -> Settings:
    """Dependency returning the active settings (overridable in tests)"""
    return settings


def schedule_for(period: PeriodRequest, app_settings: Settings) -> DaySchedule:
    """
    Expand the period carried by a request

    Raises:
        InvalidRangeError: If start_date is after end_date
    """
    return expand_period(
        period.start_date,
        period.end_date,
        period.holiday_registry(),
        locale=period.locale or app_settings.WEEKDAY_LOCALE,
    )


def resolve_as_of(as_of: Optional[date], app_settings: Settings) -> date:
    """Reference date from the request, or today in APP_TIMEZONE"""
    return as_of if as_of is not None else today(app_settings.APP_TIMEZONE)
