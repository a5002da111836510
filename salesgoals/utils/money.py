"""
Decimal helpers for monetary amounts.
All engine arithmetic runs on Decimal; floats are converted through str() so
binary drift never reaches a goal value.
"""
from decimal import Decimal, ROUND_HALF_UP, InvalidOperation
from typing import Iterable, Union

from salesgoals.constants import CENT, MAX_AMOUNT

Number = Union[Decimal, int, float, str]

ZERO = Decimal("0")


def to_decimal(value: Number) -> Decimal:
    """
    Convert a numeric value to Decimal

    Args:
        value: Decimal, int, float or numeric string

    Returns:
        Decimal value

    Raises:
        ValueError: If value is not numeric
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise ValueError(f"Not a monetary amount: {value!r}")
    try:
        return Decimal(str(value).strip())
    except (InvalidOperation, ValueError) as exc:
        raise ValueError(f"Not a monetary amount: {value!r}") from exc


def to_amount(value: Number) -> Decimal:
    """
    Convert a caller-supplied amount (target or actual) to Decimal

    Raises:
        ValueError: If value is not numeric, not finite, or larger in
            magnitude than MAX_AMOUNT
    """
    amount = to_decimal(value)
    if not amount.is_finite() or abs(amount) > MAX_AMOUNT:
        raise ValueError(f"Amount out of range (max {MAX_AMOUNT}): {value!r}")
    return amount


def round_money(value: Number) -> Decimal:
    """Round to cents using round-half-up."""
    return to_decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)


def sum_money(values: Iterable[Decimal]) -> Decimal:
    return sum(values, ZERO)


def non_negative(value: Decimal) -> Decimal:
    return value if value > ZERO else ZERO
