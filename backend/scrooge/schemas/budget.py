"""
Pydantic schemas for the budget state and its derived summary.
"""
from pydantic import BaseModel, Field, PlainSerializer, StrictFloat, StrictInt
from pydantic.alias_generators import to_camel
from typing import Annotated, Union
from datetime import datetime
from decimal import Decimal

# Amounts travel as JSON numbers, the way the browser client expects them
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class BudgetState(BaseModel):
    """The single persisted budget record."""
    remaining_budget: Money = Field(ge=0)
    last_updated: datetime

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True
        frozen = True


class BudgetUpdate(BaseModel):
    """Schema for budget update."""
    remaining_budget: Union[StrictInt, StrictFloat]

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class BudgetSummary(BaseModel):
    """Schema for budget response with derived trip figures."""
    remaining_budget: Money
    remaining_trips: int = Field(ge=0)
    per_trip: Money  # Truncated to cents
    last_updated: datetime

    class Config:
        alias_generator = to_camel
        populate_by_name = True
