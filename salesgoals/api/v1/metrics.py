"""
Derived metrics endpoints
"""
from dataclasses import asdict

from fastapi import APIRouter, Depends

from salesgoals.core.config import Settings
from salesgoals.core.deps import get_settings, resolve_as_of, schedule_for
from salesgoals.schemas.metrics import (
    DynamicGoalOut,
    DynamicGoalRequest,
    IdealTicketOut,
    IdealTicketRequest,
    ProjectionOut,
    ProjectionRequest,
    SummaryOut,
    SummaryRequest,
)
from salesgoals.services.metrics_service import (
    dynamic_day_goal,
    ideal_ticket,
    project_period,
    summarize_period,
)

router = APIRouter()


@router.post("/ideal-ticket", response_model=IdealTicketOut)
async def ideal_ticket_endpoint(request: IdealTicketRequest):
    """Average revenue per transaction needed to reach the day's goal"""
    ticket = ideal_ticket(
        request.day_goal,
        request.transaction_count,
        request.to_results(),
        request.as_of,
    )
    return IdealTicketOut(as_of=request.as_of, ideal_ticket=ticket, insufficient_data=ticket is None)


@router.post("/dynamic-goal", response_model=DynamicGoalOut)
async def dynamic_goal_endpoint(
    request: DynamicGoalRequest,
    app_settings: Settings = Depends(get_settings)
):
    """Anticipatory goal for a single day given the sales recorded before it"""
    as_of = resolve_as_of(request.as_of, app_settings)
    schedule = schedule_for(request, app_settings)
    goal = dynamic_day_goal(schedule, request.target, request.to_results(), as_of)
    return DynamicGoalOut(date=as_of, goal=goal)


@router.post("/projection", response_model=ProjectionOut, response_model_exclude_none=True)
async def projection_endpoint(
    request: ProjectionRequest,
    app_settings: Settings = Depends(get_settings)
):
    """Linear projection of the period outcome with pessimistic/optimistic bands"""
    as_of = resolve_as_of(request.as_of, app_settings)
    schedule = schedule_for(request, app_settings)
    projection = project_period(
        schedule,
        request.to_results(),
        as_of,
        target=request.target,
        pessimistic_factor=app_settings.PROJECTION_PESSIMISTIC_FACTOR,
        optimistic_factor=app_settings.PROJECTION_OPTIMISTIC_FACTOR,
    )
    return ProjectionOut(as_of=as_of, **asdict(projection))


@router.post("/summary", response_model=SummaryOut)
async def summary_endpoint(
    request: SummaryRequest,
    app_settings: Settings = Depends(get_settings)
):
    """Period-to-date totals and progress against each target"""
    schedule = schedule_for(request, app_settings)
    summary = summarize_period(schedule, request.to_results(), request.targets.to_model())
    return SummaryOut(**asdict(summary))
