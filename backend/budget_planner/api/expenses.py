"""
Expense API endpoints.
"""

from datetime import date
from fastapi import APIRouter, Depends

from budget_planner.dependencies import get_store
from budget_planner.models.expense import ExpenseRecord
from budget_planner.schemas.expense import (
    ExpenseCreate,
    ExpenseResponse,
    ExpenseList,
    ExpensesByCategory,
)
from budget_planner.services.record_store import RecordStore

router = APIRouter(prefix="/expenses", tags=["expenses"])


def to_expense_response(expense: ExpenseRecord) -> ExpenseResponse:
    return ExpenseResponse(
        id=expense.id,
        category=expense.category,
        amount=float(expense.amount),
        description=expense.description,
        date=expense.date,
        is_recurring=expense.is_recurring,
        is_loan_payment=expense.is_loan_payment,
    )


@router.get("", response_model=ExpenseList)
def list_expenses(store: RecordStore = Depends(get_store)):
    """List all expenses in insertion order."""
    return ExpenseList(
        items=[to_expense_response(e) for e in store.expenses],
        total=len(store.expenses)
    )


@router.get("/by-category", response_model=ExpensesByCategory)
def list_expenses_by_category(store: RecordStore = Depends(get_store)):
    """Expenses grouped by category. Categories without expenses are omitted."""
    return ExpensesByCategory(groups={
        category: [to_expense_response(e) for e in expenses]
        for category, expenses in store.expenses_by_category().items()
    })


@router.post("", response_model=ExpenseResponse, status_code=201)
def create_expense(
    expense: ExpenseCreate,
    store: RecordStore = Depends(get_store)
):
    """Add an expense."""
    record = store.add_expense(
        category=expense.category,
        amount=expense.amount,
        description=expense.description,
        date=(expense.date or date.today()).isoformat(),
        is_recurring=expense.is_recurring,
        is_loan_payment=expense.is_loan_payment,
    )
    return to_expense_response(record)


@router.delete("/{expense_id}", status_code=204)
def delete_expense(
    expense_id: str,
    store: RecordStore = Depends(get_store)
):
    """Remove an expense. Unknown ids are ignored."""
    store.remove_expense(expense_id)
    return None
