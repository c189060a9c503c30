from budget_planner.ai.prompts.budget_advice import (
    BUDGET_ADVICE_SYSTEM,
    BUDGET_SUMMARY,
)

__all__ = [
    "BUDGET_ADVICE_SYSTEM",
    "BUDGET_SUMMARY",
]
