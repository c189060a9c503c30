"""
Budget plan API endpoints.
"""

from fastapi import APIRouter, Depends

from budget_planner.dependencies import get_store, get_chat_session
from budget_planner.models.budget import BudgetPlan
from budget_planner.schemas.budget import (
    BudgetPlanResponse,
    SpendingPredictionResponse,
    SavingsGoalTargetUpdate,
)
from budget_planner.api.goals import to_goal_response
from budget_planner.services.chat_service import ChatSession
from budget_planner.services.record_store import RecordStore

router = APIRouter(prefix="/budget", tags=["budget"])


def to_plan_response(plan: BudgetPlan) -> BudgetPlanResponse:
    return BudgetPlanResponse(
        total_income=float(plan.total_income),
        total_expenses=float(plan.total_expenses),
        savings=float(plan.savings),
        savings_goal=float(plan.savings_goal_target),
        category_budgets={k: float(v) for k, v in plan.category_budgets.items()},
        recommendations=list(plan.recommendations),
        predictions=[
            SpendingPredictionResponse(
                category=p.category,
                predicted_amount=float(p.predicted_amount),
                trend=p.trend,
                alert=p.alert,
            )
            for p in plan.predictions
        ],
        goals=[to_goal_response(g, plan.total_income) for g in plan.goals],
    )


@router.get("/plan", response_model=BudgetPlanResponse)
def get_budget_plan(store: RecordStore = Depends(get_store)):
    """
    Derive the budget plan from the current records.
    Returns: totals, category_budgets, recommendations, predictions, goals
    """
    return to_plan_response(store.derive())


@router.put("/savings-goal", response_model=BudgetPlanResponse)
def set_savings_goal(
    update: SavingsGoalTargetUpdate,
    store: RecordStore = Depends(get_store)
):
    """Set the single monthly savings target and return the new plan."""
    store.set_savings_goal_target(update.value)
    return to_plan_response(store.derive())


@router.post("/reset", status_code=204)
def reset_budget(
    store: RecordStore = Depends(get_store),
    chat: ChatSession = Depends(get_chat_session)
):
    """Clear all records and the chat log."""
    store.reset()
    chat.reset()
    return None
