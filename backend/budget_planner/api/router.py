"""
Main API router.
"""

from fastapi import APIRouter
from budget_planner.api import expenses, income, goals, budget, onboarding, advice, chat, settings

api_router = APIRouter()

api_router.include_router(expenses.router)
api_router.include_router(income.router)
api_router.include_router(goals.router)
api_router.include_router(budget.router)
api_router.include_router(onboarding.router)
api_router.include_router(advice.router)
api_router.include_router(chat.router)
api_router.include_router(settings.router)
