"""Budget derivation: totals, category breakdown, recommendations and forecasts."""

from dataclasses import replace
from decimal import Decimal
from typing import Dict, Iterable, List, Optional, Sequence

from budget_planner.models.budget import BudgetPlan, SpendingPrediction, Trend
from budget_planner.models.expense import ExpenseRecord, EXPENSE_CATEGORIES, SAVINGS_BUCKET
from budget_planner.models.goal import SavingsGoal
from budget_planner.models.income import IncomeRecord

ZERO = Decimal("0")

# Recommendation thresholds, as ratios of total income
EMI_HIGH_RATIO = Decimal("0.50")
EMI_MODERATE_RATIO = Decimal("0.30")
ENTERTAINMENT_MAX_RATIO = Decimal("0.10")
HOUSING_MAX_RATIO = Decimal("0.35")

# Forecast constants
INFLATION_FACTOR = Decimal("1.02")
TREND_UP_THRESHOLD = Decimal("200")
HIGH_SPENDING_RATIO = Decimal("0.30")


def format_amount(value: Decimal) -> str:
    """Render a currency amount, dropping cents when they are zero."""
    if value == value.to_integral_value():
        return f"${int(value):,}"
    return f"${value:,.2f}"


def format_percent(ratio: Decimal) -> str:
    return f"{ratio * 100:.1f}%"


def compute_category_totals(expenses: Iterable[ExpenseRecord]) -> Dict[str, Decimal]:
    """Sum expenses per category. Every category is present, unused ones at 0."""
    totals = {category.value: ZERO for category in EXPENSE_CATEGORIES}
    for expense in expenses:
        totals[expense.category.value] += expense.amount
    return totals


def build_recommendations(
    total_income: Decimal,
    savings: Decimal,
    savings_goal_target: Decimal,
    category_budgets: Dict[str, Decimal],
    total_emi: Optional[Decimal] = None
) -> List[str]:
    """
    Apply the advisory rules in order.

    Ratio-based rules need a positive income and are skipped otherwise.
    total_emi is None when there are no loan payments at all.
    """
    recommendations = []

    if total_income > 0:
        if total_emi is not None:
            emi_ratio = total_emi / total_income
            if emi_ratio > EMI_HIGH_RATIO:
                recommendations.append(
                    f"Your EMI payments take {format_percent(emi_ratio)} of your income. "
                    f"That is a high debt burden; consider refinancing or consolidating loans."
                )
            elif emi_ratio > EMI_MODERATE_RATIO:
                recommendations.append(
                    f"EMIs use {format_percent(emi_ratio)} of your income. "
                    f"Paying off smaller loans first will free up monthly cash."
                )

        entertainment_ratio = category_budgets["entertainment"] / total_income
        if entertainment_ratio > ENTERTAINMENT_MAX_RATIO:
            recommendations.append(
                f"Entertainment spending is {format_percent(entertainment_ratio)} of income. "
                f"Try to keep it under 10%."
            )

        housing_ratio = category_budgets["housing"] / total_income
        if housing_ratio > HOUSING_MAX_RATIO:
            recommendations.append(
                f"Housing costs are {format_percent(housing_ratio)} of income. "
                f"The recommended max is 30-35%."
            )

    if savings < savings_goal_target:
        recommendations.append(
            f"You're {format_amount(savings_goal_target - savings)} short of your savings goal. "
            f"Consider reducing non-essential spending."
        )
    elif savings_goal_target > 0:
        recommendations.append(
            f"Great job! You're meeting your savings goal of {format_amount(savings_goal_target)}."
        )

    if savings < 0:
        recommendations.append(
            f"You're spending {format_amount(abs(savings))} more than you earn each month. "
            f"Cut back on expenses urgently."
        )

    return recommendations


def build_predictions(
    category_totals: Dict[str, Decimal],
    total_income: Decimal
) -> List[SpendingPrediction]:
    """Naive next-month forecast for every category with spending."""
    predictions = []
    for category in EXPENSE_CATEGORIES:
        amount = category_totals[category.value]
        if amount <= 0:
            continue

        alert = None
        if total_income > 0 and amount > total_income * HIGH_SPENDING_RATIO:
            alert = f"High spending in {category.value}"

        predictions.append(SpendingPrediction(
            category=category,
            predicted_amount=amount * INFLATION_FACTOR,
            trend=Trend.up if amount > TREND_UP_THRESHOLD else Trend.stable,
            alert=alert,
        ))
    return predictions


def derive(
    expenses: Sequence[ExpenseRecord],
    incomes: Sequence[IncomeRecord],
    savings_goal_target: Decimal,
    goals: Sequence[SavingsGoal]
) -> BudgetPlan:
    """
    Build a BudgetPlan from raw records.

    Pure: the inputs are not touched and the same inputs always give an
    equal plan. Goals are copied so later contributions don't leak into an
    already derived plan.
    """
    total_income = sum((i.amount for i in incomes), ZERO)
    total_expenses = sum((e.amount for e in expenses), ZERO)
    savings = total_income - total_expenses
    savings_goal_target = Decimal(savings_goal_target)

    category_budgets = compute_category_totals(expenses)
    category_totals = dict(category_budgets)
    category_budgets[SAVINGS_BUCKET] = max(ZERO, savings)

    loan_payments = [e.amount for e in expenses if e.is_loan_payment]
    total_emi = sum(loan_payments, ZERO) if loan_payments else None

    recommendations = build_recommendations(
        total_income=total_income,
        savings=savings,
        savings_goal_target=savings_goal_target,
        category_budgets=category_budgets,
        total_emi=total_emi,
    )
    predictions = build_predictions(category_totals, total_income)

    return BudgetPlan(
        total_income=total_income,
        total_expenses=total_expenses,
        savings=savings,
        savings_goal_target=savings_goal_target,
        category_budgets=category_budgets,
        recommendations=tuple(recommendations),
        predictions=tuple(predictions),
        goals=tuple(replace(g) for g in goals),
    )
