"""Translate the onboarding wizard snapshot into initial records."""

import logging
from datetime import date
from decimal import Decimal
from typing import Optional

from budget_planner.config import settings
from budget_planner.models.expense import ExpenseCategory
from budget_planner.schemas.onboarding import OnboardingSnapshot
from budget_planner.services.record_store import RecordStore

logger = logging.getLogger(__name__)

EMI_DESCRIPTION_PREFIX = "EMI: "


def import_onboarding(
    store: RecordStore,
    snapshot: OnboardingSnapshot,
    today: Optional[date] = None,
    savings_rate: Optional[Decimal] = None
) -> None:
    """
    Replace the store contents with the wizard's answers.

    The legacy savings target defaults to a share (20% unless configured)
    of the total onboarding income.
    """
    day = (today or date.today()).isoformat()
    rate = settings.onboarding_savings_rate if savings_rate is None else savings_rate

    store.reset()

    store.add_income(source="Monthly Salary", amount=snapshot.monthly_salary, date=day, is_recurring=True)
    if snapshot.other_income > 0:
        store.add_income(source="Other Income", amount=snapshot.other_income, date=day, is_recurring=True)

    for emi in snapshot.emis:
        store.add_expense(
            category=ExpenseCategory.other,
            amount=emi.amount,
            description=f"{EMI_DESCRIPTION_PREFIX}{emi.name}",
            date=day,
            is_recurring=True,
            is_loan_payment=True,
        )

    for expense in snapshot.expenses:
        store.add_expense(
            category=expense.category,
            amount=expense.amount,
            description=expense.name,
            date=day,
            is_recurring=True,
        )

    for goal in snapshot.goals:
        store.add_goal(
            name=goal.name,
            target_amount=goal.target_amount,
            monthly_percentage=goal.monthly_percentage,
        )

    total_income = snapshot.monthly_salary + snapshot.other_income
    store.set_savings_goal_target(total_income * Decimal(rate))

    logger.info(
        f"Onboarded {len(store.incomes)} incomes, {len(snapshot.emis)} EMIs, "
        f"{len(snapshot.expenses)} expenses, {len(store.goals)} goals"
    )
