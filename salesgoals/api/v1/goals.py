"""
Goal allocation endpoints (stateless: callers persist the returned goals)
"""
import logging
from typing import List

from fastapi import APIRouter, Depends

from salesgoals.core.config import Settings
from salesgoals.core.deps import get_settings, schedule_for
from salesgoals.models.goal import AllocatedGoal
from salesgoals.schemas.goals import (
    AllocateRequest,
    AllocatedGoalOut,
    DailyGoalRowOut,
    GoalSheetRequest,
    RecalculateRequest,
    RecalculateResponse,
    UpdatedResultOut,
)
from salesgoals.services.allocation_service import allocate_goals, build_goal_sheet
from salesgoals.services.recalculation_service import recalculate_goals
from salesgoals.utils.money import round_money

logger = logging.getLogger(__name__)

router = APIRouter()


def _goals_out(goals: List[AllocatedGoal]) -> List[AllocatedGoalOut]:
    return [AllocatedGoalOut(**goal.as_dict()) for goal in goals]


@router.post("/allocate", response_model=List[AllocatedGoalOut], response_model_exclude_none=True)
async def allocate_goals_endpoint(
    request: AllocateRequest,
    app_settings: Settings = Depends(get_settings)
):
    """Split the period targets over the payable days of the period"""
    schedule = schedule_for(request, app_settings)
    goals = allocate_goals(schedule, request.targets.to_model())
    logger.info(
        "Allocated goals for %s..%s across %d days", request.start_date, request.end_date, len(goals)
    )
    return _goals_out(goals)


@router.post("/recalculate", response_model=RecalculateResponse, response_model_exclude_none=True)
async def recalculate_goals_endpoint(
    request: RecalculateRequest,
    app_settings: Settings = Depends(get_settings)
):
    """
    Record a day's actual amount and redistribute the rest of the target

    Only days after changed_date are re-goaled; the changed day is echoed back
    with its new actual amount.
    """
    schedule = schedule_for(request, app_settings)
    goals = recalculate_goals(
        schedule,
        request.to_results(),
        request.changed_date,
        request.new_amount,
        request.targets.to_model(),
    )
    logger.info(
        "Recalculated %d future days after %s (new amount %s)",
        len(goals), request.changed_date, request.new_amount
    )
    return RecalculateResponse(
        updated=UpdatedResultOut(date=request.changed_date, actual_amount=round_money(request.new_amount)),
        goals=_goals_out(goals),
    )


@router.post("/sheet", response_model=List[DailyGoalRowOut], response_model_exclude_none=True)
async def goal_sheet_endpoint(
    request: GoalSheetRequest,
    app_settings: Settings = Depends(get_settings)
):
    """Generate the per-day sheet (initial goals plus recorded results) for a period"""
    schedule = schedule_for(request, app_settings)
    rows = build_goal_sheet(schedule, request.targets.to_model(), request.to_results())
    return [
        DailyGoalRowOut(
            date=row.date,
            weekday_short_name=row.weekday_short_name,
            weight=row.weight,
            actual_amount=round_money(row.actual_amount),
            transaction_count=row.transaction_count,
            **row.goals,
        )
        for row in rows
    ]
