"""
Derived budget models.
"""

import enum
from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, Optional, Tuple

from budget_planner.models.expense import ExpenseCategory
from budget_planner.models.goal import SavingsGoal


class Trend(str, enum.Enum):
    """Spending trend enumeration."""
    up = "up"
    down = "down"
    stable = "stable"


@dataclass(frozen=True)
class SpendingPrediction:
    category: ExpenseCategory
    predicted_amount: Decimal
    trend: Trend
    alert: Optional[str] = None


@dataclass(frozen=True)
class BudgetPlan:
    """
    Summary derived from the record store.

    Never stored: rebuilt from scratch on every read. category_budgets holds
    every expense category plus the synthetic savings bucket.
    """

    total_income: Decimal
    total_expenses: Decimal
    savings: Decimal
    savings_goal_target: Decimal
    category_budgets: Dict[str, Decimal]
    recommendations: Tuple[str, ...]
    predictions: Tuple[SpendingPrediction, ...]
    goals: Tuple[SavingsGoal, ...]
