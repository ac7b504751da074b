"""
Budget state stores.

A store keeps exactly one ``BudgetState`` record. ``load`` returns ``None``
when nothing has been written yet; ``save`` replaces the record wholesale.
"""
import json
import logging
import os
import tempfile
import threading
from decimal import Decimal
from typing import Optional, Protocol
from scrooge.core.utils import parse_datetime, serialize_date
from scrooge.schemas.budget import BudgetState

logger = logging.getLogger(__name__)


class BudgetStore(Protocol):
    """Persistence gateway for the single budget record."""

    def load(self) -> Optional[BudgetState]:
        ...

    def save(self, state: BudgetState) -> BudgetState:
        ...


class JsonFileBudgetStore:
    """Keeps the budget record in a small JSON file."""

    def __init__(self, path: str):
        self.path = path
        self._lock = threading.Lock()

    def load(self) -> Optional[BudgetState]:
        with self._lock:
            if not os.path.exists(self.path):
                return None
            try:
                with open(self.path, "r", encoding="utf-8") as handle:
                    raw = json.load(handle, parse_float=Decimal)
                return BudgetState(
                    remaining_budget=raw["remainingBudget"],
                    last_updated=parse_datetime(raw["lastUpdated"])
                )
            except (OSError, ValueError, KeyError, TypeError) as e:
                logger.error(f"Error loading budget data from {self.path}: {e}", exc_info=True)
                return None

    def save(self, state: BudgetState) -> BudgetState:
        payload = {
            "remainingBudget": float(state.remaining_budget),
            "lastUpdated": serialize_date(state.last_updated)
        }
        directory = os.path.dirname(os.path.abspath(self.path))
        with self._lock:
            os.makedirs(directory, exist_ok=True)
            # Write beside the target, then swap it in so readers never see half a file
            fd, tmp_path = tempfile.mkstemp(dir=directory, prefix=".budget-", suffix=".json")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as handle:
                    json.dump(payload, handle, indent=2)
                os.replace(tmp_path, self.path)
            except OSError:
                if os.path.exists(tmp_path):
                    os.unlink(tmp_path)
                raise
        logger.info(f"Saved remaining budget {state.remaining_budget} to {self.path}")
        return state
