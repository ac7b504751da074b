"""
Main API router that includes all route modules.
"""
from fastapi import APIRouter
from scrooge.api.routes import budget

api_router = APIRouter()

# Include all route modules
api_router.include_router(budget.router)
