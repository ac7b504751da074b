"""
Shopping trip calculator.

Counts the shopping days left in the current calendar month. Trips happen on
fixed weekdays (Wednesday and Saturday by default). Once the cutoff hour has
passed on a shopping day, that day's trip is treated as already taken.
"""
import calendar
from datetime import date, datetime, timedelta
from typing import Iterable

WEDNESDAY = calendar.WEDNESDAY
SATURDAY = calendar.SATURDAY

DEFAULT_SHOPPING_WEEKDAYS = (WEDNESDAY, SATURDAY)
DEFAULT_CUTOFF_HOUR = 17


def last_day_of_month(day: date) -> date:
    """Return the last calendar day of the month containing ``day``."""
    last = calendar.monthrange(day.year, day.month)[1]
    return day.replace(day=last)


def count_shopping_days(
    start: date,
    end: date,
    shopping_weekdays: Iterable[int] = DEFAULT_SHOPPING_WEEKDAYS
) -> int:
    """Count days from ``start`` to ``end`` inclusive that fall on a shopping weekday."""
    weekdays = frozenset(shopping_weekdays)
    trips = 0
    current = start
    while current <= end:
        if current.weekday() in weekdays:
            trips += 1
        current += timedelta(days=1)
    return trips


def compute_remaining_trips(
    now: datetime,
    shopping_weekdays: Iterable[int] = DEFAULT_SHOPPING_WEEKDAYS,
    cutoff_hour: int = DEFAULT_CUTOFF_HOUR
) -> int:
    """
    Return the number of shopping trips left between ``now`` and month end.

    Only the wall-clock date and hour of ``now`` are used; no timezone
    conversion is applied.

    Args:
        now: Current local date and time
        shopping_weekdays: Weekday numbers (Monday=0) on which trips happen
        cutoff_hour: Hour from which today's trip is considered done

    Returns:
        Non-negative trip count
    """
    weekdays = frozenset(shopping_weekdays)
    today = now.date()
    start = today
    if today.weekday() in weekdays and now.hour >= cutoff_hour:
        start = today + timedelta(days=1)

    return count_shopping_days(start, last_day_of_month(today), weekdays)
