"""
Tests for the budget service.
"""
import pytest
from datetime import datetime
from decimal import Decimal
from scrooge.core.config import settings
from scrooge.core.exceptions import InvalidAmount
from scrooge.schemas.budget import BudgetState
from scrooge.services.budget_service import MAX_BUDGET, BudgetService, summarize, validate_amount


class MemoryStore:
    """In-memory stand-in for a budget store."""

    def __init__(self, state=None):
        self.state = state
        self.saves = 0

    def load(self):
        return self.state

    def save(self, state):
        self.state = state
        self.saves += 1
        return state


@pytest.fixture
def memory_store():
    return MemoryStore()


@pytest.fixture
def service(memory_store, clock):
    return BudgetService(memory_store, clock=clock)


def test_first_read_creates_default_record(service, memory_store, clock):
    summary = service.get_summary()
    assert summary.remaining_budget == Decimal(600)
    assert summary.remaining_trips == 7
    assert summary.per_trip == Decimal("85.71")
    assert memory_store.saves == 1
    assert memory_store.state.last_updated == clock.now


def test_existing_record_is_not_rewritten_on_read(service, memory_store):
    memory_store.state = BudgetState(remaining_budget=Decimal("140"), last_updated=datetime(2024, 2, 1))
    summary = service.get_summary()
    assert summary.remaining_budget == Decimal("140")
    assert summary.per_trip == Decimal("20.00")
    assert summary.last_updated == datetime(2024, 2, 1)
    assert memory_store.saves == 0


def test_trips_are_recomputed_on_every_read(service, clock):
    assert service.get_summary().remaining_trips == 7
    clock.now = datetime(2024, 2, 10, 18, 0)
    assert service.get_summary().remaining_trips == 5


def test_update_replaces_budget(service, memory_store, clock):
    clock.now = datetime(2024, 2, 7, 11, 0)
    summary = service.update(350)
    assert summary.remaining_budget == Decimal(350)
    assert summary.per_trip == Decimal("50.00")
    assert memory_store.state.remaining_budget == Decimal(350)
    assert memory_store.state.last_updated == datetime(2024, 2, 7, 11, 0)


def test_update_accepts_floats(service):
    assert service.update(12.5).remaining_budget == Decimal("12.5")


@pytest.mark.parametrize("value", [-1, -0.01, "100", None, True, float("nan"), float("inf"), [100]])
def test_update_rejects_invalid_values(service, memory_store, value):
    with pytest.raises(InvalidAmount):
        service.update(value)
    assert memory_store.saves == 0


def test_reset_restores_default(service, memory_store):
    service.update(10)
    summary = service.reset()
    assert summary.remaining_budget == Decimal(600)
    assert memory_store.state.remaining_budget == Decimal(600)


def test_custom_default_and_schedule(memory_store, clock):
    service = BudgetService(
        memory_store,
        clock=clock,
        default_budget=100,
        shopping_weekdays=[2],
        cutoff_hour=9
    )
    # Wednesdays left after Feb 7 10:00 with a 9:00 cutoff: 14, 21, 28
    summary = service.reset()
    assert summary.remaining_trips == 3
    assert summary.per_trip == Decimal("33.33")


def test_negative_default_budget_is_rejected(memory_store):
    with pytest.raises(InvalidAmount):
        BudgetService(memory_store, default_budget=-5)


def test_summarize_with_no_trips_left_returns_whole_budget():
    state = BudgetState(remaining_budget=Decimal("42.50"), last_updated=datetime(2024, 8, 31, 17, 5))
    summary = summarize(state, datetime(2024, 8, 31, 17, 5))
    assert summary.remaining_trips == 0
    assert summary.per_trip == Decimal("42.50")


def test_validate_amount_returns_decimal():
    assert validate_amount(0) == Decimal(0)
    assert validate_amount(Decimal("7.25")) == Decimal("7.25")


def test_budget_state_rejects_negative_amount():
    with pytest.raises(ValueError):
        BudgetState(remaining_budget=Decimal("-1"), last_updated=datetime(2024, 1, 1))


def test_amounts_are_kept_to_cents(service, memory_store):
    summary = service.update(12.345)
    assert summary.remaining_budget == Decimal("12.35")
    assert memory_store.state.remaining_budget == Decimal("12.35")


def test_amount_above_maximum_is_rejected(service, memory_store):
    assert service.update(MAX_BUDGET).remaining_budget == MAX_BUDGET
    for value in (MAX_BUDGET + Decimal("0.01"), 10**27, 1e300):
        with pytest.raises(InvalidAmount):
            service.update(value)
    assert memory_store.state.remaining_budget == MAX_BUDGET


def test_failed_summary_leaves_record_unchanged(service, memory_store, monkeypatch):
    service.update(200)

    def broken_per_trip(remaining_budget, remaining_trips):
        raise ArithmeticError("cannot split")

    monkeypatch.setattr("scrooge.services.budget_service.compute_per_trip", broken_per_trip)
    with pytest.raises(ArithmeticError):
        service.update(300)
    assert memory_store.saves == 1
    assert memory_store.state.remaining_budget == Decimal(200)


def test_default_budget_comes_from_settings(service):
    assert service.default_budget == settings.DEFAULT_BUDGET
