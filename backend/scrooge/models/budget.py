"""
Budget state model for the SQL store.
"""
from sqlalchemy import Column, DateTime, Numeric
from scrooge.db.base import BaseModel


class BudgetRecord(BaseModel):
    """Single-row table holding the current remaining budget."""
    __tablename__ = "budget_state"

    remaining_budget = Column(Numeric(15, 2), nullable=False)
    last_updated = Column(DateTime, nullable=False)
