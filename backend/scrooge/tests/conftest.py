"""
Shared fixtures for the budget tests.
"""
import pytest
from datetime import datetime
from fastapi.testclient import TestClient
from scrooge.main import app
from scrooge.api.dependencies import get_budget_store, get_clock
from scrooge.db.store import JsonFileBudgetStore

# Wednesday morning: Feb 2024 has 7 shopping days left from here
WEDNESDAY_MORNING = datetime(2024, 2, 7, 10, 0)


class Clock:
    """Settable clock standing in for datetime.now."""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture
def clock():
    return Clock(WEDNESDAY_MORNING)


@pytest.fixture
def store(tmp_path):
    return JsonFileBudgetStore(str(tmp_path / "data.json"))


@pytest.fixture
def client(store, clock):
    app.dependency_overrides[get_budget_store] = lambda: store
    app.dependency_overrides[get_clock] = lambda: clock
    yield TestClient(app)
    app.dependency_overrides.clear()
