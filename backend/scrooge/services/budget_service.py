"""
Budget service: reads and writes the budget record and derives trip figures.

Every read recomputes the remaining trips from the clock, so the per-trip
amount always reflects the current date and hour.
"""
import logging
import math
from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Callable, Iterable, Optional
from scrooge.core.config import settings
from scrooge.core.exceptions import InvalidAmount
from scrooge.db.store import BudgetStore
from scrooge.schemas.budget import BudgetState, BudgetSummary
from scrooge.services.allocator import CENT, compute_per_trip, to_decimal
from scrooge.services.trip_calculator import (
    DEFAULT_CUTOFF_HOUR,
    DEFAULT_SHOPPING_WEEKDAYS,
    compute_remaining_trips
)

logger = logging.getLogger(__name__)

# Largest amount the budget_state.remaining_budget Numeric(15, 2) column holds
MAX_BUDGET = Decimal("9999999999999.99")


def validate_amount(value: Any) -> Decimal:
    """
    Check a budget value before it is written.

    Raises:
        InvalidAmount: if the value is not a finite, non-negative number
            no larger than MAX_BUDGET

    Returns:
        The amount rounded to whole cents, as every store keeps it
    """
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        raise InvalidAmount(value)
    if isinstance(value, float) and not math.isfinite(value):
        raise InvalidAmount(value)
    amount = to_decimal(value)
    if not amount.is_finite() or amount < 0 or amount > MAX_BUDGET:
        raise InvalidAmount(value)
    return amount.quantize(CENT, rounding=ROUND_HALF_UP)


def summarize(
    state: BudgetState,
    now: datetime,
    shopping_weekdays: Iterable[int] = DEFAULT_SHOPPING_WEEKDAYS,
    cutoff_hour: int = DEFAULT_CUTOFF_HOUR
) -> BudgetSummary:
    """Derive remaining trips and the per-trip amount for a budget state."""
    remaining_trips = compute_remaining_trips(now, shopping_weekdays, cutoff_hour)
    return BudgetSummary(
        remaining_budget=state.remaining_budget,
        remaining_trips=remaining_trips,
        per_trip=compute_per_trip(state.remaining_budget, remaining_trips),
        last_updated=state.last_updated
    )


class BudgetService:
    """Budget operations over an injected store and clock."""

    def __init__(
        self,
        store: BudgetStore,
        clock: Callable[[], datetime] = datetime.now,
        default_budget: Any = settings.DEFAULT_BUDGET,
        shopping_weekdays: Iterable[int] = DEFAULT_SHOPPING_WEEKDAYS,
        cutoff_hour: int = DEFAULT_CUTOFF_HOUR
    ):
        self.store = store
        self.clock = clock
        self.default_budget = validate_amount(default_budget)
        self.shopping_weekdays = tuple(shopping_weekdays)
        self.cutoff_hour = cutoff_hour

    def get_state(self) -> BudgetState:
        """Return the stored record, creating the default one if none exists."""
        state = self.store.load()
        if state is None:
            logger.info(f"No budget record found, starting from default {self.default_budget}")
            state = self._write(self.default_budget)
        return state

    def get_summary(self, now: Optional[datetime] = None) -> BudgetSummary:
        return self._summarize(self.get_state(), now)

    def update(self, remaining_budget: Any) -> BudgetSummary:
        """Replace the remaining budget; rejects invalid values before anything is written."""
        amount = validate_amount(remaining_budget)
        return self._replace(amount)

    def reset(self) -> BudgetSummary:
        """Put the remaining budget back to the default amount."""
        logger.info(f"Resetting budget to {self.default_budget}")
        return self._replace(self.default_budget)

    def _write(self, amount: Decimal) -> BudgetState:
        state = BudgetState(remaining_budget=amount, last_updated=self.clock())
        return self.store.save(state)

    def _replace(self, amount: Decimal) -> BudgetSummary:
        # Nothing is saved unless the summary can be computed
        state = BudgetState(remaining_budget=amount, last_updated=self.clock())
        summary = self._summarize(state)
        self.store.save(state)
        return summary

    def _summarize(self, state: BudgetState, now: Optional[datetime] = None) -> BudgetSummary:
        return summarize(
            state,
            now or self.clock(),
            self.shopping_weekdays,
            self.cutoff_hour
        )
