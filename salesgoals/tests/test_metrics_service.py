"""
Tests for ideal ticket, dynamic goal, projection and period summary
"""
import pytest
from datetime import date
from decimal import Decimal

from salesgoals.constants import TARGET_MAX, TARGET_MIN
from salesgoals.core.exceptions import NotFoundError
from salesgoals.models.goal import GoalTarget
from salesgoals.models.metrics import ProjectionStatus
from salesgoals.services.metrics_service import (
    dynamic_day_goal,
    ideal_ticket,
    project_period,
    projection_status,
    summarize_period,
)


# Ideal ticket

def test_ideal_ticket_with_day_count():
    """Goal divided by the day's own transaction count"""
    assert ideal_ticket(200, 4, [], date(2024, 1, 3)) == Decimal("50.00")


def test_ideal_ticket_falls_back_to_history_average(result):
    """Zero count uses the average count of earlier days"""
    history = [result(1, 500, transaction_count=10), result(2, 900, transaction_count=30)]

    assert ideal_ticket(200, 0, history, date(2024, 1, 3)) == Decimal("10.00")


def test_ideal_ticket_ignores_later_and_empty_counts(result):
    """Only earlier days with a positive count are averaged"""
    history = [
        result(1, 500, transaction_count=20),
        result(2, 100, transaction_count=0),
        result(3, 100),
        result(5, 900, transaction_count=1000),
    ]

    assert ideal_ticket(200, None, history, date(2024, 1, 4)) == Decimal("10.00")


def test_ideal_ticket_without_history_is_insufficient(result):
    """No transaction history returns None rather than zero"""
    assert ideal_ticket(200, None, [], date(2024, 1, 3)) is None
    assert ideal_ticket(200, 0, [result(1, 100)], date(2024, 1, 3)) is None


# Dynamic day goal

def test_dynamic_goal_without_sales_is_static_share(first_week_2024):
    """Nothing sold yet: weight-proportional share of the whole target"""
    assert dynamic_day_goal(first_week_2024, 1100, [], date(2024, 1, 3)) == Decimal("200.00")
    assert dynamic_day_goal(first_week_2024, 1100, [], date(2024, 1, 6)) == Decimal("100.00")


def test_dynamic_goal_after_sales(first_week_2024, result):
    """Remaining 800 over Wed..Sat (weight 3.5)"""
    goal = dynamic_day_goal(first_week_2024, 1100, [result(1, 300)], date(2024, 1, 3))

    assert goal == Decimal("228.57")


def test_dynamic_goal_ignores_sales_on_or_after_day(first_week_2024, result):
    """Only sales before the queried day reduce the remainder"""
    history = [result(3, 1000), result(4, 1000)]

    assert dynamic_day_goal(first_week_2024, 1100, history, date(2024, 1, 3)) == Decimal("200.00")


def test_dynamic_goal_target_already_met(first_week_2024, result):
    """Over-achievement floors the day goal at zero"""
    goal = dynamic_day_goal(first_week_2024, 1100, [result(1, 1500)], date(2024, 1, 2))

    assert goal == Decimal("0.00")


def test_dynamic_goal_zero_weight_day(first_week_2024, result):
    """Sunday always gets 0.00"""
    assert dynamic_day_goal(first_week_2024, 1100, [result(1, 300)], date(2024, 1, 7)) == Decimal("0.00")


def test_dynamic_goal_day_outside_period(first_week_2024):
    """Dates outside the schedule raise NotFoundError"""
    with pytest.raises(NotFoundError):
        dynamic_day_goal(first_week_2024, 1100, [], date(2024, 1, 8))


# Projection

@pytest.fixture
def two_days_sold(result):
    return [result(1, 300), result(2, 500)]


def test_projection_bands(first_week_2024, two_days_sold):
    """800 over two days, four days left: 2400 realistic"""
    projection = project_period(first_week_2024, two_days_sold, date(2024, 1, 2))

    assert projection.realized_total == Decimal("800.00")
    assert projection.realized_days == 2
    assert projection.average_daily_realized == Decimal("400.00")
    assert projection.remaining_payable_days == 4
    assert projection.realistic == Decimal("2400.00")
    assert projection.pessimistic == Decimal("1920.00")
    assert projection.optimistic == Decimal("2640.00")
    assert projection.target is None
    assert projection.status is None


@pytest.mark.parametrize(
    "target,progress,status",
    [
        (2000, Decimal("120.00"), ProjectionStatus.EXCEEDED),
        (3000, Decimal("80.00"), ProjectionStatus.ON_TRACK),
        (4000, Decimal("60.00"), ProjectionStatus.HIGH_RISK),
    ],
)
def test_projection_status(first_week_2024, two_days_sold, target, progress, status):
    """Progress of the realistic projection grades the period"""
    projection = project_period(first_week_2024, two_days_sold, date(2024, 1, 2), target=target)

    assert projection.target == Decimal(target)
    assert projection.progress_pct == progress
    assert projection.status == status


def test_projection_custom_factors(first_week_2024, two_days_sold):
    """Band factors are configurable"""
    projection = project_period(
        first_week_2024, two_days_sold, date(2024, 1, 2),
        pessimistic_factor="0.5", optimistic_factor="1.5"
    )

    assert projection.pessimistic == Decimal("1200.00")
    assert projection.optimistic == Decimal("3600.00")


def test_projection_without_sales(first_week_2024):
    """No sales: everything projects to zero"""
    projection = project_period(first_week_2024, [], date(2024, 1, 3), target=1000)

    assert projection.realized_days == 0
    assert projection.realistic == Decimal("0.00")
    assert projection.progress_pct == Decimal("0.00")
    assert projection.status == ProjectionStatus.HIGH_RISK


def test_projection_zero_target_has_no_status(first_week_2024, two_days_sold):
    """A zero target cannot be graded"""
    projection = project_period(first_week_2024, two_days_sold, date(2024, 1, 2), target=0)

    assert projection.progress_pct == Decimal("0.00")
    assert projection.status is None


def test_projection_after_period_end(first_week_2024, two_days_sold):
    """Past the end date there are no remaining days"""
    projection = project_period(first_week_2024, two_days_sold, date(2024, 1, 31))

    assert projection.remaining_payable_days == 0
    assert projection.realistic == Decimal("800.00")


def test_projection_status_thresholds():
    """Boundaries are inclusive"""
    assert projection_status(Decimal("100")) == ProjectionStatus.EXCEEDED
    assert projection_status(Decimal("99.99")) == ProjectionStatus.ON_TRACK
    assert projection_status(Decimal("80")) == ProjectionStatus.ON_TRACK
    assert projection_status(Decimal("79.99")) == ProjectionStatus.HIGH_RISK


# Summary

def test_period_summary(first_week_2024, result):
    """Totals skip days without sales"""
    history = [result(1, 300), result(2, 500), result(3, 0)]

    summary = summarize_period(first_week_2024, history, GoalTarget.range(1000, 2000))

    assert summary.total_sold == Decimal("800.00")
    assert summary.days_with_sales == 2
    assert summary.average_daily_sales == Decimal("400.00")
    assert summary.highest_sale == Decimal("500.00")
    assert summary.lowest_sale == Decimal("300.00")

    min_progress = summary.targets[TARGET_MIN]
    assert min_progress.progress_pct == Decimal("80.00")
    assert min_progress.remaining == Decimal("200.00")
    assert not min_progress.reached

    max_progress = summary.targets[TARGET_MAX]
    assert max_progress.progress_pct == Decimal("40.00")
    assert max_progress.remaining == Decimal("1200.00")


def test_period_summary_target_reached(first_week_2024, result):
    """Reaching the target sets reached and zero remaining"""
    summary = summarize_period(first_week_2024, [result(1, 1200)], GoalTarget.single(1100))

    progress = summary.targets["goal"]
    assert progress.reached
    assert progress.remaining == Decimal("0.00")
    assert progress.progress_pct == Decimal("109.09")


def test_period_summary_empty_history(first_week_2024):
    """No sales yields zeros, not errors"""
    summary = summarize_period(first_week_2024, [], GoalTarget.single(1100))

    assert summary.total_sold == Decimal("0.00")
    assert summary.days_with_sales == 0
    assert summary.average_daily_sales == Decimal("0.00")
    assert summary.highest_sale == Decimal("0.00")
    assert summary.lowest_sale == Decimal("0.00")


def test_out_of_range_target_rejected(first_week_2024, two_days_sold):
    """Targets beyond the supported money range fail with ValueError"""
    with pytest.raises(ValueError):
        project_period(first_week_2024, two_days_sold, date(2024, 1, 2), target="1e30")
    with pytest.raises(ValueError):
        dynamic_day_goal(first_week_2024, "1e30", [], date(2024, 1, 3))
    with pytest.raises(ValueError):
        ideal_ticket("1e30", 4, [], date(2024, 1, 3))
