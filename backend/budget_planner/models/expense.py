"""
Expense record model.
"""

import enum
from dataclasses import dataclass
from decimal import Decimal


class ExpenseCategory(str, enum.Enum):
    """Expense category enumeration."""
    housing = "housing"
    food = "food"
    transportation = "transportation"
    utilities = "utilities"
    healthcare = "healthcare"
    entertainment = "entertainment"
    shopping = "shopping"
    other = "other"


EXPENSE_CATEGORIES = tuple(ExpenseCategory)

# Derived-only bucket, never a valid category on a record
SAVINGS_BUCKET = "savings"


@dataclass(frozen=True)
class ExpenseRecord:
    """A single expense. Replaced through remove + add, never edited."""

    id: str
    category: ExpenseCategory
    amount: Decimal
    description: str
    date: str
    is_recurring: bool = False
    is_loan_payment: bool = False  # EMI
