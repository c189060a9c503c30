"""In-memory owner of income, expense and savings goal records."""

import logging
import uuid
from datetime import datetime
from decimal import Decimal
from typing import Dict, List, Optional

from budget_planner.models.budget import BudgetPlan
from budget_planner.models.expense import ExpenseRecord, ExpenseCategory
from budget_planner.models.goal import SavingsGoal
from budget_planner.models.income import IncomeRecord
from budget_planner.services import budget_service

logger = logging.getLogger(__name__)


def _new_id() -> str:
    return str(uuid.uuid4())


class RecordStore:
    """
    Single owner of all mutable budget state.

    Safe for sequential access only. Callers validate input before it gets
    here; operations on unknown ids are no-ops.
    """

    def __init__(self, savings_goal_target: Decimal = Decimal("0")):
        self.expenses: List[ExpenseRecord] = []
        self.incomes: List[IncomeRecord] = []
        self.goals: List[SavingsGoal] = []
        self.savings_goal_target = Decimal(savings_goal_target)

    # Expenses

    def add_expense(
        self,
        category: ExpenseCategory,
        amount: Decimal,
        description: str,
        date: str,
        is_recurring: bool = False,
        is_loan_payment: bool = False
    ) -> ExpenseRecord:
        expense = ExpenseRecord(
            id=_new_id(),
            category=ExpenseCategory(category),
            amount=Decimal(amount),
            description=description,
            date=date,
            is_recurring=is_recurring,
            is_loan_payment=is_loan_payment,
        )
        self.expenses.append(expense)
        return expense

    def remove_expense(self, expense_id: str) -> None:
        before = len(self.expenses)
        self.expenses = [e for e in self.expenses if e.id != expense_id]
        if len(self.expenses) == before:
            logger.debug(f"remove_expense: no expense with id {expense_id}")

    def expenses_by_category(self) -> Dict[ExpenseCategory, List[ExpenseRecord]]:
        grouped: Dict[ExpenseCategory, List[ExpenseRecord]] = {}
        for expense in self.expenses:
            grouped.setdefault(expense.category, []).append(expense)
        return grouped

    # Income

    def add_income(
        self,
        source: str,
        amount: Decimal,
        date: str,
        is_recurring: bool = False
    ) -> IncomeRecord:
        income = IncomeRecord(
            id=_new_id(),
            source=source,
            amount=Decimal(amount),
            date=date,
            is_recurring=is_recurring,
        )
        self.incomes.append(income)
        return income

    def remove_income(self, income_id: str) -> None:
        before = len(self.incomes)
        self.incomes = [i for i in self.incomes if i.id != income_id]
        if len(self.incomes) == before:
            logger.debug(f"remove_income: no income with id {income_id}")

    # Goals

    def get_goal(self, goal_id: str) -> Optional[SavingsGoal]:
        for goal in self.goals:
            if goal.id == goal_id:
                return goal
        return None

    def add_goal(
        self,
        name: str,
        target_amount: Decimal,
        monthly_percentage: Decimal
    ) -> SavingsGoal:
        goal = SavingsGoal(
            id=_new_id(),
            name=name,
            target_amount=Decimal(target_amount),
            monthly_percentage=Decimal(monthly_percentage),
            current_saved=Decimal("0"),
            created_at=datetime.utcnow(),
        )
        self.goals.append(goal)
        return goal

    def remove_goal(self, goal_id: str) -> None:
        before = len(self.goals)
        self.goals = [g for g in self.goals if g.id != goal_id]
        if len(self.goals) == before:
            logger.debug(f"remove_goal: no goal with id {goal_id}")

    def contribute_to_goal(self, goal_id: str, amount: Decimal) -> Optional[SavingsGoal]:
        """
        Add amount to a goal's saved total.

        Returns the goal, or None when the id is unknown. Negative amounts are
        ignored so current_saved never decreases.
        """
        goal = self.get_goal(goal_id)
        if goal is None:
            logger.debug(f"contribute_to_goal: no goal with id {goal_id}")
            return None

        amount = Decimal(amount)
        if amount < 0:
            logger.warning(f"Ignoring negative contribution {amount} to goal {goal_id}")
            return goal

        goal.current_saved += amount
        return goal

    # Plan

    def set_savings_goal_target(self, value: Decimal) -> None:
        self.savings_goal_target = Decimal(value)

    def derive(self) -> BudgetPlan:
        """Recompute the budget plan from the current records."""
        return budget_service.derive(
            expenses=self.expenses,
            incomes=self.incomes,
            savings_goal_target=self.savings_goal_target,
            goals=self.goals,
        )

    def reset(self) -> None:
        self.expenses = []
        self.incomes = []
        self.goals = []
        self.savings_goal_target = Decimal("0")
