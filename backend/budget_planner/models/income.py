"""
Income record model.
"""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class IncomeRecord:
    """Income model."""

    id: str
    source: str
    amount: Decimal
    date: str
    is_recurring: bool = False
