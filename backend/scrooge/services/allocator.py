"""
Per-trip budget allocation.
"""
from decimal import Decimal, ROUND_FLOOR, localcontext
from typing import Union

CENT = Decimal("0.01")


def to_decimal(value: Union[Decimal, int, float, str]) -> Decimal:
    """Convert a numeric value to Decimal without binary float artefacts."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(repr(value))
    return Decimal(value)


def compute_per_trip(remaining_budget: Union[Decimal, int, float], remaining_trips: int) -> Decimal:
    """
    Split the remaining budget evenly over the remaining trips.

    The share is truncated to whole cents (never rounded up). With no trips
    left the whole remaining budget is returned.
    """
    budget = to_decimal(remaining_budget)
    if remaining_trips <= 0:
        return budget
    with localcontext() as ctx:
        # Enough digits to keep every whole unit plus the cents of the share
        ctx.prec = max(28, budget.adjusted() + 6)
        ctx.rounding = ROUND_FLOOR
        return (budget / remaining_trips).quantize(CENT)
