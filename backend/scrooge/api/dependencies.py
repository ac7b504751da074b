"""
Shared FastAPI dependencies.
"""
from datetime import datetime
from functools import lru_cache
from typing import Callable
from fastapi import Depends
from scrooge.core.config import settings
from scrooge.db.store import BudgetStore, JsonFileBudgetStore
from scrooge.services.budget_service import BudgetService


@lru_cache
def get_budget_store() -> BudgetStore:
    """Build the configured store once per process."""
    if settings.STORE_BACKEND == "sql":
        from scrooge.db.session import make_engine
        from scrooge.db.sql_store import SqlBudgetStore
        return SqlBudgetStore(make_engine())
    return JsonFileBudgetStore(settings.data_file_path)


def get_clock() -> Callable[[], datetime]:
    """Local wall-clock time; overridden in tests."""
    return datetime.now


def get_budget_service(
    store: BudgetStore = Depends(get_budget_store),
    clock: Callable[[], datetime] = Depends(get_clock)
) -> BudgetService:
    return BudgetService(
        store,
        clock=clock,
        default_budget=settings.DEFAULT_BUDGET,
        shopping_weekdays=settings.SHOPPING_WEEKDAYS,
        cutoff_hour=settings.CUTOFF_HOUR
    )
