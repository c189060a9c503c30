"""
Onboarding API endpoint.
"""

from fastapi import APIRouter, Depends

from budget_planner.dependencies import get_store, get_chat_session
from budget_planner.schemas.budget import BudgetPlanResponse
from budget_planner.schemas.onboarding import OnboardingSnapshot
from budget_planner.api.budget import to_plan_response
from budget_planner.services.chat_service import ChatSession
from budget_planner.services.onboarding_service import import_onboarding
from budget_planner.services.record_store import RecordStore

router = APIRouter(prefix="/onboarding", tags=["onboarding"])


@router.post("", response_model=BudgetPlanResponse)
def complete_onboarding(
    snapshot: OnboardingSnapshot,
    store: RecordStore = Depends(get_store),
    chat: ChatSession = Depends(get_chat_session)
):
    """Replace all records with the wizard's answers and return the plan."""
    import_onboarding(store, snapshot)
    chat.reset()
    return to_plan_response(store.derive())
