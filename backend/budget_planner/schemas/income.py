"""
Income schemas.
"""

from pydantic import BaseModel, Field, field_validator
from typing import List, Optional
import datetime
from decimal import Decimal


class IncomeCreate(BaseModel):
    source: str = Field(max_length=100)
    amount: Decimal = Field(gt=0)
    date: Optional[datetime.date] = None
    is_recurring: bool = False

    @field_validator('source')
    @classmethod
    def source_not_blank(cls, v):
        v = v.strip()
        if not v:
            raise ValueError("Income source is required")
        return v


class IncomeResponse(BaseModel):
    id: str
    source: str
    amount: float
    date: str
    is_recurring: bool


class IncomeList(BaseModel):
    items: List[IncomeResponse]
    total: int
