"""Models package - Import all models for SQLAlchemy registration."""
from scrooge.models.budget import BudgetRecord

__all__ = [
    "BudgetRecord",
]
