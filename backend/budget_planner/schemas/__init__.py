"""
Pydantic schemas package.
"""

from budget_planner.schemas.expense import (
    ExpenseCreate,
    ExpenseResponse,
    ExpenseList,
    ExpensesByCategory,
)
from budget_planner.schemas.income import (
    IncomeCreate,
    IncomeResponse,
    IncomeList,
)
from budget_planner.schemas.goal import (
    GoalCreate,
    ContributionCreate,
    GoalResponse,
    GoalProjectionResponse,
    GoalList,
)
from budget_planner.schemas.budget import (
    BudgetPlanResponse,
    SpendingPredictionResponse,
    SavingsGoalTargetUpdate,
)
from budget_planner.schemas.onboarding import OnboardingSnapshot

__all__ = [
    "ExpenseCreate",
    "ExpenseResponse",
    "ExpenseList",
    "ExpensesByCategory",
    "IncomeCreate",
    "IncomeResponse",
    "IncomeList",
    "GoalCreate",
    "ContributionCreate",
    "GoalResponse",
    "GoalProjectionResponse",
    "GoalList",
    "BudgetPlanResponse",
    "SpendingPredictionResponse",
    "SavingsGoalTargetUpdate",
    "OnboardingSnapshot",
]
