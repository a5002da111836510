"""
Calendar endpoints
"""
from fastapi import APIRouter, Depends

from salesgoals.core.config import Settings
from salesgoals.core.deps import get_settings, schedule_for
from salesgoals.schemas.calendar import DayOut, PeriodRequest, ScheduleOut
from salesgoals.services.calendar_service import payable_days, total_weight

router = APIRouter()


@router.post("/expand", response_model=ScheduleOut)
async def expand_period_endpoint(
    period: PeriodRequest,
    app_settings: Settings = Depends(get_settings)
):
    """Classify every day of the period into its work-day weight"""
    schedule = schedule_for(period, app_settings)
    return ScheduleOut(
        start_date=period.start_date,
        end_date=period.end_date,
        total_days=len(schedule),
        payable_days=len(payable_days(schedule)),
        total_weight=total_weight(schedule),
        days=[DayOut.model_validate(day) for day in schedule],
    )
