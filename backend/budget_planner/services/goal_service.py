"""Savings goal projections: contribution, time to goal and progress."""

import math
from decimal import Decimal
from typing import Iterable, List

from budget_planner.models.goal import SavingsGoal, GoalProjection

ZERO = Decimal("0")
HUNDRED = Decimal("100")


def goal_progress(goal: SavingsGoal) -> Decimal:
    """Percent of the target already saved, capped at 100."""
    if goal.target_amount <= 0:
        return HUNDRED
    return min(HUNDRED, HUNDRED * goal.current_saved / goal.target_amount)


def project_goal(goal: SavingsGoal, total_income: Decimal) -> GoalProjection:
    """
    Project how long a goal takes at its share of the current income.

    Months are 0 when there is nothing left to save or no contribution to
    save it with. Achievement is decided by progress alone.
    """
    monthly_contribution = Decimal(total_income) * (goal.monthly_percentage / HUNDRED)
    remaining = max(ZERO, goal.target_amount - goal.current_saved)

    if monthly_contribution <= 0 or remaining <= 0:
        months = 0
    else:
        months = math.ceil(remaining / monthly_contribution)

    progress = goal_progress(goal)

    return GoalProjection(
        goal_id=goal.id,
        monthly_contribution=monthly_contribution,
        remaining=remaining,
        months_to_goal=months,
        years=months // 12,
        remainder_months=months % 12,
        progress=progress,
        achieved=progress >= HUNDRED,
    )


def project_goals(goals: Iterable[SavingsGoal], total_income: Decimal) -> List[GoalProjection]:
    return [project_goal(goal, total_income) for goal in goals]
