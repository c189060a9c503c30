"""
Savings goal models.
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal


@dataclass
class SavingsGoal:
    """
    A named target funded by a share of monthly income.

    current_saved only ever grows, through RecordStore.contribute_to_goal.
    """

    id: str
    name: str
    target_amount: Decimal
    monthly_percentage: Decimal
    current_saved: Decimal = Decimal("0")
    created_at: datetime = field(default_factory=datetime.utcnow)


@dataclass(frozen=True)
class GoalProjection:
    """Time-to-goal figures for one goal at the current income."""

    goal_id: str
    monthly_contribution: Decimal
    remaining: Decimal
    months_to_goal: int
    years: int
    remainder_months: int
    progress: Decimal
    achieved: bool
