"""
SQL-backed budget state store.
"""
import logging
import threading
from typing import Optional
from sqlalchemy.engine import Engine
from scrooge.db.session import init_db, make_session_factory
from scrooge.models.budget import BudgetRecord
from scrooge.schemas.budget import BudgetState

logger = logging.getLogger(__name__)

RECORD_ID = 1


class SqlBudgetStore:
    """Keeps the budget record as the single row of the ``budget_state`` table."""

    def __init__(self, engine: Engine):
        self.engine = engine
        self.SessionLocal = make_session_factory(engine)
        self._lock = threading.Lock()
        init_db(engine)

    def load(self) -> Optional[BudgetState]:
        with self._lock:
            db = self.SessionLocal()
            try:
                record = db.get(BudgetRecord, RECORD_ID)
                if not record:
                    return None
                return BudgetState(
                    remaining_budget=record.remaining_budget,
                    last_updated=record.last_updated
                )
            finally:
                db.close()

    def save(self, state: BudgetState) -> BudgetState:
        with self._lock:
            db = self.SessionLocal()
            try:
                record = db.get(BudgetRecord, RECORD_ID)
                if record:
                    record.remaining_budget = state.remaining_budget
                    record.last_updated = state.last_updated
                else:
                    record = BudgetRecord(
                        id=RECORD_ID,
                        remaining_budget=state.remaining_budget,
                        last_updated=state.last_updated
                    )
                    db.add(record)
                db.commit()
            except Exception:
                db.rollback()
                raise
            finally:
                db.close()
        logger.info(f"Saved remaining budget {state.remaining_budget} to database")
        return state
