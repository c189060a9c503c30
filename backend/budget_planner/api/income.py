"""
Income API endpoints.
"""

from datetime import date
from fastapi import APIRouter, Depends

from budget_planner.dependencies import get_store
from budget_planner.models.income import IncomeRecord
from budget_planner.schemas.income import IncomeCreate, IncomeResponse, IncomeList
from budget_planner.services.record_store import RecordStore

router = APIRouter(prefix="/income", tags=["income"])


def to_income_response(income: IncomeRecord) -> IncomeResponse:
    return IncomeResponse(
        id=income.id,
        source=income.source,
        amount=float(income.amount),
        date=income.date,
        is_recurring=income.is_recurring,
    )


@router.get("", response_model=IncomeList)
def list_income(store: RecordStore = Depends(get_store)):
    """List all income entries."""
    return IncomeList(
        items=[to_income_response(i) for i in store.incomes],
        total=len(store.incomes)
    )


@router.post("", response_model=IncomeResponse, status_code=201)
def create_income(
    income: IncomeCreate,
    store: RecordStore = Depends(get_store)
):
    """Add an income entry."""
    record = store.add_income(
        source=income.source,
        amount=income.amount,
        date=(income.date or date.today()).isoformat(),
        is_recurring=income.is_recurring,
    )
    return to_income_response(record)


@router.delete("/{income_id}", status_code=204)
def delete_income(
    income_id: str,
    store: RecordStore = Depends(get_store)
):
    """Remove an income entry. Unknown ids are ignored."""
    store.remove_income(income_id)
    return None
