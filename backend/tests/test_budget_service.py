"""Tests for budget derivation: totals, buckets, recommendations and forecasts."""

import pytest
from decimal import Decimal

from budget_planner.models.budget import Trend
from budget_planner.models.expense import ExpenseCategory, EXPENSE_CATEGORIES, SAVINGS_BUCKET
from budget_planner.services.budget_service import (
    derive,
    build_recommendations,
    compute_category_totals,
    format_amount,
)
from budget_planner.services.record_store import RecordStore


def make_store(incomes=(), expenses=(), target="0"):
    store = RecordStore()
    for amount in incomes:
        store.add_income(source="Job", amount=Decimal(str(amount)), date="2026-02-01")
    for category, amount, *rest in expenses:
        store.add_expense(
            category=category,
            amount=Decimal(str(amount)),
            description=f"{category.value} bill",
            date="2026-02-01",
            is_loan_payment=bool(rest and rest[0]),
        )
    store.set_savings_goal_target(Decimal(target))
    return store


class TestTotals:
    """Test aggregated totals and the category breakdown."""

    def test_demo_scenario_totals(self, demo_store):
        """Demo data should total 2550 in, 1490 out."""
        plan = demo_store.derive()
        assert plan.total_income == Decimal("2550")
        assert plan.total_expenses == Decimal("1490")
        assert plan.savings == Decimal("1060")

    def test_category_buckets_sum_to_total_expenses(self, demo_store):
        """Expense buckets add up to total expenses, savings excluded."""
        plan = demo_store.derive()
        assert sum(plan.category_budgets[c.value] for c in EXPENSE_CATEGORIES) == plan.total_expenses

    def test_every_category_present(self):
        """Unused categories report 0 rather than being absent."""
        plan = make_store(incomes=[100], expenses=[(ExpenseCategory.food, 40)]).derive()
        assert set(plan.category_budgets) == {c.value for c in EXPENSE_CATEGORIES} | {SAVINGS_BUCKET}
        assert plan.category_budgets["housing"] == 0
        assert plan.category_budgets["food"] == Decimal("40")

    def test_savings_bucket_mirrors_positive_savings(self, demo_store):
        plan = demo_store.derive()
        assert plan.category_budgets[SAVINGS_BUCKET] == Decimal("1060")

    def test_negative_savings(self):
        """Savings may go negative, the savings bucket never does."""
        plan = make_store(incomes=[500], expenses=[(ExpenseCategory.housing, 800)]).derive()
        assert plan.savings == Decimal("-300")
        assert plan.category_budgets[SAVINGS_BUCKET] == 0

    def test_multiple_expenses_same_category(self):
        totals = compute_category_totals(
            make_store(expenses=[(ExpenseCategory.food, 10), (ExpenseCategory.food, 15.5)]).expenses
        )
        assert totals["food"] == Decimal("25.5")

    def test_derive_is_idempotent(self, demo_store):
        """Same inputs give an equal plan."""
        assert demo_store.derive() == demo_store.derive()

    def test_derive_does_not_touch_inputs(self, demo_store):
        expenses_before = list(demo_store.expenses)
        demo_store.derive()
        assert demo_store.expenses == expenses_before

    def test_goal_snapshot_is_a_copy(self, store, sample_goal):
        """Contributions after derivation don't change an older plan."""
        plan = store.derive()
        store.contribute_to_goal(sample_goal.id, Decimal("100"))
        assert plan.goals[0].current_saved == 0
        assert store.derive().goals[0].current_saved == Decimal("100")

    def test_empty_inputs(self):
        """All zeros give no recommendations and no predictions."""
        plan = derive(expenses=[], incomes=[], savings_goal_target=Decimal("0"), goals=[])
        assert plan.total_income == 0
        assert plan.recommendations == ()
        assert plan.predictions == ()


class TestRecommendations:
    """Test the rule-based advice strings."""

    def test_housing_ratio_over_limit(self):
        """40% of income on housing should trigger the housing note."""
        plan = make_store(incomes=[1000], expenses=[(ExpenseCategory.housing, 400)]).derive()
        assert any("Housing costs are 40.0% of income" in r for r in plan.recommendations)

    def test_housing_ratio_at_limit(self):
        plan = make_store(incomes=[1000], expenses=[(ExpenseCategory.housing, 350)]).derive()
        assert not any("Housing" in r for r in plan.recommendations)

    def test_entertainment_ratio(self):
        plan = make_store(incomes=[1000], expenses=[(ExpenseCategory.entertainment, 150)]).derive()
        assert any("Entertainment spending is 15.0%" in r for r in plan.recommendations)

    def test_high_emi_burden(self):
        plan = make_store(incomes=[1000], expenses=[(ExpenseCategory.other, 600, True)]).derive()
        assert "high debt burden" in plan.recommendations[0]

    def test_moderate_emi_burden(self):
        plan = make_store(incomes=[1000], expenses=[(ExpenseCategory.other, 400, True)]).derive()
        assert "smaller loans" in plan.recommendations[0]

    def test_emi_at_thirty_percent_is_fine(self):
        plan = make_store(incomes=[1000], expenses=[(ExpenseCategory.other, 300, True)]).derive()
        assert not any("EMI" in r for r in plan.recommendations)

    def test_non_loan_expense_not_counted_as_emi(self):
        """Only flagged loan payments count towards the EMI ratio."""
        plan = make_store(incomes=[1000], expenses=[(ExpenseCategory.other, 600)]).derive()
        assert not any("EMI" in r for r in plan.recommendations)

    def test_shortfall_quotes_deficit(self):
        plan = make_store(incomes=[1000], expenses=[(ExpenseCategory.food, 900)], target="200").derive()
        assert "You're $100 short of your savings goal" in plan.recommendations[0]

    def test_meeting_goal(self, demo_store):
        plan = demo_store.derive()
        assert plan.recommendations == ("Great job! You're meeting your savings goal of $500.",)

    def test_no_congratulations_without_target(self):
        plan = make_store(incomes=[1000], expenses=[(ExpenseCategory.food, 100)]).derive()
        assert plan.recommendations == ()

    def test_overspending(self):
        plan = make_store(incomes=[1000], expenses=[(ExpenseCategory.food, 1250)]).derive()
        assert any("$250 more than you earn" in r for r in plan.recommendations)

    def test_rule_order(self):
        """EMI, entertainment, housing, savings goal, overspending."""
        plan = make_store(
            incomes=[1000],
            expenses=[
                (ExpenseCategory.housing, 500),
                (ExpenseCategory.entertainment, 200),
                (ExpenseCategory.other, 600, True),
            ],
            target="100",
        ).derive()
        assert len(plan.recommendations) == 5
        assert "EMI" in plan.recommendations[0]
        assert "Entertainment" in plan.recommendations[1]
        assert "Housing" in plan.recommendations[2]
        assert "short of your savings goal" in plan.recommendations[3]
        assert "more than you earn" in plan.recommendations[4]

    def test_zero_income_skips_ratio_rules(self):
        """No income: no ratio rules and no division errors."""
        plan = make_store(
            expenses=[
                (ExpenseCategory.housing, 500),
                (ExpenseCategory.entertainment, 200),
                (ExpenseCategory.other, 100, True),
            ]
        ).derive()
        assert not any(word in r for r in plan.recommendations for word in ("EMI", "Entertainment", "Housing"))
        assert any("more than you earn" in r for r in plan.recommendations)

    def test_build_recommendations_directly(self):
        budgets = {c.value: Decimal("0") for c in EXPENSE_CATEGORIES}
        result = build_recommendations(
            total_income=Decimal("0"),
            savings=Decimal("0"),
            savings_goal_target=Decimal("0"),
            category_budgets=budgets,
        )
        assert result == []


class TestPredictions:
    """Test the naive next-month forecast."""

    def test_inflation_and_trend(self, demo_store):
        predictions = {p.category: p for p in demo_store.derive().predictions}
        housing = predictions[ExpenseCategory.housing]
        assert housing.predicted_amount == Decimal("816.00")
        assert housing.trend == Trend.up
        assert predictions[ExpenseCategory.utilities].trend == Trend.stable

    def test_only_categories_with_spending(self, demo_store):
        categories = [p.category for p in demo_store.derive().predictions]
        assert ExpenseCategory.other not in categories
        assert len(categories) == 7

    def test_high_spending_alert(self, demo_store):
        """800 > 30% of 2550 flags housing, food is fine."""
        predictions = {p.category: p for p in demo_store.derive().predictions}
        assert predictions[ExpenseCategory.housing].alert == "High spending in housing"
        assert predictions[ExpenseCategory.food].alert is None

    def test_no_alert_without_income(self):
        plan = make_store(expenses=[(ExpenseCategory.food, 500)]).derive()
        assert plan.predictions[0].alert is None


class TestFormatAmount:

    @pytest.mark.parametrize("value,expected", [
        (Decimal("100"), "$100"),
        (Decimal("100.00"), "$100"),
        (Decimal("1060.5"), "$1,060.50"),
    ])
    def test_format(self, value, expected):
        assert format_amount(value) == expected
