"""Pydantic schemas for the onboarding wizard snapshot."""

from pydantic import Field, field_validator
from typing import List
from decimal import Decimal

from budget_planner.models.expense import ExpenseCategory
from budget_planner.schemas.base import CamelModel

MAX_AMOUNT = Decimal("10000000")
MAX_NAME_LENGTH = 50


class _NamedEntry(CamelModel):
    name: str

    @field_validator('name')
    @classmethod
    def name_not_blank(cls, v):
        v = v.strip()
        if not v:
            raise ValueError("Name is required")
        if len(v) > MAX_NAME_LENGTH:
            raise ValueError(f"Name must be at most {MAX_NAME_LENGTH} characters")
        return v


class OnboardingEmi(_NamedEntry):
    amount: Decimal = Field(ge=1, le=MAX_AMOUNT)


class OnboardingExpense(_NamedEntry):
    amount: Decimal = Field(ge=1, le=MAX_AMOUNT)
    category: ExpenseCategory = ExpenseCategory.other


class OnboardingGoal(_NamedEntry):
    target_amount: Decimal = Field(gt=0, le=MAX_AMOUNT)
    monthly_percentage: Decimal = Field(gt=0, le=100)


class OnboardingSnapshot(CamelModel):
    monthly_salary: Decimal = Field(ge=1, le=MAX_AMOUNT)
    other_income: Decimal = Field(default=Decimal("0"), ge=0, le=MAX_AMOUNT)
    emis: List[OnboardingEmi] = []
    expenses: List[OnboardingExpense] = []
    goals: List[OnboardingGoal] = []
