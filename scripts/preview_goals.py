"""
Print the daily goal split for a period without starting the API.

Usage:
  python scripts/preview_goals.py --start 2024-06-01 --end 2024-06-30 --min 80000 --max 100000
  python scripts/preview_goals.py --start 2024-06-01 --end 2024-06-30 --goal 25000 \
      --holiday 2024-06-20 --holiday 2024-06-21:worked
  python scripts/preview_goals.py --start 2024-06-01 --end 2024-06-30 --min 80000
"""
import argparse
import sys
from pathlib import Path

# Add project root so salesgoals is importable
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from salesgoals.constants import SUPPORTED_LOCALES, TARGET_MAX, TARGET_MIN
from salesgoals.core.exceptions import InvalidRangeError
from salesgoals.models.goal import GoalTarget
from salesgoals.models.holiday import Holiday
from salesgoals.services.allocation_service import allocate_goals
from salesgoals.services.calendar_service import expand_period, payable_days, total_weight
from salesgoals.utils.datetime_utils import parse_iso_date


def parse_holiday(value: str) -> Holiday:
    """DATE or DATE:worked"""
    day, _, flag = value.partition(":")
    return Holiday(date=parse_iso_date(day), name=f"Holiday {day}", is_worked=flag == "worked")


def main(argv=None):
    parser = argparse.ArgumentParser(description="Preview daily sales goals for a period")
    parser.add_argument("--start", required=True, help="First day (YYYY-MM-DD)")
    parser.add_argument("--end", required=True, help="Last day (YYYY-MM-DD)")
    parser.add_argument("--min", dest="min_goal", help="Minimum period target")
    parser.add_argument("--max", dest="max_goal", help="Maximum period target")
    parser.add_argument("--goal", help="Single (per-seller) period target")
    parser.add_argument("--holiday", action="append", default=[], help="Holiday date, optionally DATE:worked")
    parser.add_argument("--locale", default="en", choices=SUPPORTED_LOCALES)
    args = parser.parse_args(argv)

    bounds = {
        kind: value
        for kind, value in ((TARGET_MIN, args.min_goal), (TARGET_MAX, args.max_goal))
        if value is not None
    }
    if args.goal is not None and bounds:
        parser.error("--goal cannot be combined with --min/--max")
    if args.goal is None and not bounds:
        parser.error("pass --goal, --min or --max")

    try:
        targets = GoalTarget.single(args.goal) if args.goal is not None else GoalTarget(bounds)
        schedule = expand_period(
            parse_iso_date(args.start),
            parse_iso_date(args.end),
            [parse_holiday(h) for h in args.holiday],
            locale=args.locale,
        )
    except (InvalidRangeError, ValueError) as exc:
        parser.error(str(exc))
    goals = allocate_goals(schedule, targets)

    print(f"{len(schedule)} days, {len(payable_days(schedule))} payable, total weight {total_weight(schedule)}")
    for goal in goals:
        values = "  ".join(f"{kind}={amount}" for kind, amount in goal.goals.items())
        print(f"  {goal.date}  {goal.weekday_short_name:<4} {values}")
    for kind, amount in targets.items():
        print(f"Total {kind}: {sum(goal.goals[kind] for goal in goals)} (target {amount})")


if __name__ == "__main__":
    main()
