"""
Expense schemas.
"""

from pydantic import BaseModel, Field, field_validator
from typing import Dict, List, Optional
import datetime
from decimal import Decimal

from budget_planner.models.expense import ExpenseCategory


class ExpenseCreate(BaseModel):
    category: ExpenseCategory
    amount: Decimal = Field(gt=0)
    description: str = Field(max_length=200)
    date: Optional[datetime.date] = None
    is_recurring: bool = False
    is_loan_payment: bool = False

    @field_validator('description')
    @classmethod
    def description_not_blank(cls, v):
        v = v.strip()
        if not v:
            raise ValueError("Description is required")
        return v


class ExpenseResponse(BaseModel):
    id: str
    category: ExpenseCategory
    amount: float
    description: str
    date: str
    is_recurring: bool
    is_loan_payment: bool


class ExpenseList(BaseModel):
    items: List[ExpenseResponse]
    total: int


class ExpensesByCategory(BaseModel):
    groups: Dict[ExpenseCategory, List[ExpenseResponse]]
