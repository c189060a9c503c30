"""
Seed script for demo budget data.
"""

import logging
from decimal import Decimal

from budget_planner.models.expense import ExpenseCategory
from budget_planner.services.record_store import RecordStore

logger = logging.getLogger(__name__)

DEMO_EXPENSES = [
    {"category": ExpenseCategory.housing, "amount": "800", "description": "Rent", "date": "2026-02-01", "is_recurring": True},
    {"category": ExpenseCategory.food, "amount": "320", "description": "Groceries", "date": "2026-02-05", "is_recurring": False},
    {"category": ExpenseCategory.utilities, "amount": "120", "description": "Electric & Internet", "date": "2026-02-03", "is_recurring": True},
    {"category": ExpenseCategory.transportation, "amount": "80", "description": "Bus pass", "date": "2026-02-01", "is_recurring": True},
    {"category": ExpenseCategory.entertainment, "amount": "45", "description": "Streaming services", "date": "2026-02-01", "is_recurring": True},
    {"category": ExpenseCategory.healthcare, "amount": "50", "description": "Pharmacy", "date": "2026-02-10", "is_recurring": False},
    {"category": ExpenseCategory.shopping, "amount": "75", "description": "Clothes", "date": "2026-02-08", "is_recurring": False},
]

DEMO_INCOME = [
    {"source": "Salary", "amount": "2200", "date": "2026-02-01", "is_recurring": True},
    {"source": "Freelance", "amount": "350", "date": "2026-02-15", "is_recurring": False},
]

DEMO_SAVINGS_GOAL_TARGET = Decimal("500")


def seed_demo_data(store: RecordStore) -> None:
    """Load the demo incomes and expenses into an empty store."""
    if store.expenses or store.incomes:
        logger.info(
            f"Store already has data ({len(store.incomes)} incomes, "
            f"{len(store.expenses)} expenses), skipping demo seed"
        )
        return

    for income in DEMO_INCOME:
        store.add_income(
            source=income["source"],
            amount=Decimal(income["amount"]),
            date=income["date"],
            is_recurring=income["is_recurring"],
        )

    for expense in DEMO_EXPENSES:
        store.add_expense(
            category=expense["category"],
            amount=Decimal(expense["amount"]),
            description=expense["description"],
            date=expense["date"],
            is_recurring=expense["is_recurring"],
        )

    store.set_savings_goal_target(DEMO_SAVINGS_GOAL_TARGET)
    logger.info(f"Seeded {len(DEMO_INCOME)} incomes and {len(DEMO_EXPENSES)} expenses")
