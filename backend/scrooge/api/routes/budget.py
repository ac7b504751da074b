"""
Budget routes.
"""
from fastapi import APIRouter, Depends
from scrooge.api.dependencies import get_budget_service
from scrooge.schemas.budget import BudgetSummary, BudgetUpdate
from scrooge.services.budget_service import BudgetService

router = APIRouter(tags=["budget"])


@router.get("/budget", response_model=BudgetSummary)
async def get_budget(service: BudgetService = Depends(get_budget_service)):
    """Get remaining budget, remaining trips and the per-trip amount."""
    return service.get_summary()


@router.put("/budget", response_model=BudgetSummary)
async def update_budget(
    budget_data: BudgetUpdate,
    service: BudgetService = Depends(get_budget_service)
):
    """Set the remaining budget, typically after a shopping trip."""
    return service.update(budget_data.remaining_budget)


@router.post("/reset", response_model=BudgetSummary)
async def reset_budget(service: BudgetService = Depends(get_budget_service)):
    """Reset the remaining budget to the default amount."""
    return service.reset()
