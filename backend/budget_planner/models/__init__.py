"""
Domain models package.
"""

from budget_planner.models.expense import ExpenseRecord, ExpenseCategory, EXPENSE_CATEGORIES, SAVINGS_BUCKET
from budget_planner.models.income import IncomeRecord
from budget_planner.models.goal import SavingsGoal, GoalProjection
from budget_planner.models.budget import BudgetPlan, SpendingPrediction, Trend
from budget_planner.models.chat import ChatMessage, ChatRole, AgentType

__all__ = [
    "ExpenseRecord",
    "ExpenseCategory",
    "EXPENSE_CATEGORIES",
    "SAVINGS_BUCKET",
    "IncomeRecord",
    "SavingsGoal",
    "GoalProjection",
    "BudgetPlan",
    "SpendingPrediction",
    "Trend",
    "ChatMessage",
    "ChatRole",
    "AgentType",
]
