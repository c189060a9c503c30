"""API endpoints for savings goals."""

from decimal import Decimal
from fastapi import APIRouter, Depends, Response

from budget_planner.dependencies import get_store
from budget_planner.models.goal import SavingsGoal
from budget_planner.schemas.goal import (
    GoalCreate,
    ContributionCreate,
    GoalResponse,
    GoalProjectionResponse,
    GoalList,
)
from budget_planner.services import goal_service
from budget_planner.services.record_store import RecordStore

router = APIRouter(prefix="/goals", tags=["goals"])


def to_goal_response(goal: SavingsGoal, total_income: Decimal) -> GoalResponse:
    projection = goal_service.project_goal(goal, total_income)
    return GoalResponse(
        id=goal.id,
        name=goal.name,
        target_amount=float(goal.target_amount),
        monthly_percentage=float(goal.monthly_percentage),
        current_saved=float(goal.current_saved),
        created_at=goal.created_at,
        projection=GoalProjectionResponse(
            monthly_contribution=float(projection.monthly_contribution),
            remaining=float(projection.remaining),
            months_to_goal=projection.months_to_goal,
            years=projection.years,
            remainder_months=projection.remainder_months,
            progress=round(float(projection.progress), 2),
            achieved=projection.achieved,
        ),
    )


@router.get("", response_model=GoalList)
def list_goals(store: RecordStore = Depends(get_store)):
    """List goals with projections at the current total income."""
    total_income = store.derive().total_income
    return GoalList(
        items=[to_goal_response(g, total_income) for g in store.goals],
        total=len(store.goals),
        monthly_income=float(total_income),
    )


@router.post("", response_model=GoalResponse, status_code=201)
def create_goal(
    goal: GoalCreate,
    store: RecordStore = Depends(get_store)
):
    """Create a savings goal with nothing saved yet."""
    record = store.add_goal(
        name=goal.name,
        target_amount=goal.target_amount,
        monthly_percentage=goal.monthly_percentage,
    )
    return to_goal_response(record, store.derive().total_income)


@router.post("/{goal_id}/contributions", response_model=GoalResponse)
def contribute_to_goal(
    goal_id: str,
    contribution: ContributionCreate,
    store: RecordStore = Depends(get_store)
):
    """
    Add money to a goal. Unknown goals are ignored (204).

    Without an amount, the goal's projected monthly contribution at the
    current income is added.
    """
    amount = contribution.amount
    if amount is None:
        goal = store.get_goal(goal_id)
        if goal is None:
            return Response(status_code=204)
        amount = goal_service.project_goal(goal, store.derive().total_income).monthly_contribution

    goal = store.contribute_to_goal(goal_id, amount)
    if goal is None:
        return Response(status_code=204)
    return to_goal_response(goal, store.derive().total_income)


@router.delete("/{goal_id}", status_code=204)
def delete_goal(
    goal_id: str,
    store: RecordStore = Depends(get_store)
):
    """Remove a goal. Unknown ids are ignored."""
    store.remove_goal(goal_id)
    return None
