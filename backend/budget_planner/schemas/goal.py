"""Pydantic schemas for savings goals."""

from pydantic import BaseModel, Field, field_validator
from typing import List, Optional
from datetime import datetime
from decimal import Decimal

MAX_NAME_LENGTH = 50


class GoalCreate(BaseModel):
    name: str
    target_amount: Decimal = Field(gt=0)
    monthly_percentage: Decimal = Field(gt=0, le=100)

    @field_validator('name')
    @classmethod
    def name_not_blank(cls, v):
        v = v.strip()
        if not v:
            raise ValueError("Please enter a goal name")
        if len(v) > MAX_NAME_LENGTH:
            raise ValueError(f"Goal name must be at most {MAX_NAME_LENGTH} characters")
        return v


class ContributionCreate(BaseModel):
    """Omit amount to add this month's projected contribution."""
    amount: Optional[Decimal] = Field(default=None, gt=0)


class GoalProjectionResponse(BaseModel):
    monthly_contribution: float
    remaining: float
    months_to_goal: int
    years: int
    remainder_months: int
    progress: float
    achieved: bool


class GoalResponse(BaseModel):
    id: str
    name: str
    target_amount: float
    monthly_percentage: float
    current_saved: float
    created_at: datetime
    projection: GoalProjectionResponse


class GoalList(BaseModel):
    items: List[GoalResponse]
    total: int
    monthly_income: float
