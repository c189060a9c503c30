"""
Budget plan schemas.
"""

from pydantic import BaseModel, Field
from typing import Dict, List, Optional
from decimal import Decimal

from budget_planner.models.budget import Trend
from budget_planner.models.expense import ExpenseCategory
from budget_planner.schemas.goal import GoalResponse


class SpendingPredictionResponse(BaseModel):
    category: ExpenseCategory
    predicted_amount: float
    trend: Trend
    alert: Optional[str] = None


class BudgetPlanResponse(BaseModel):
    total_income: float
    total_expenses: float
    savings: float
    savings_goal: float
    category_budgets: Dict[str, float]
    recommendations: List[str]
    predictions: List[SpendingPredictionResponse]
    goals: List[GoalResponse]


class SavingsGoalTargetUpdate(BaseModel):
    value: Decimal = Field(ge=0)
