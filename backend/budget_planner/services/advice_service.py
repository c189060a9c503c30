"""Advice round trip to the LLM gateway."""

import json
import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, List, Optional, Sequence

from budget_planner.ai.client import AIClient, AIServiceError
from budget_planner.ai.prompts import BUDGET_ADVICE_SYSTEM, BUDGET_SUMMARY
from budget_planner.config import settings
from budget_planner.models.budget import BudgetPlan
from budget_planner.models.chat import AgentType
from budget_planner.models.expense import ExpenseRecord
from budget_planner.schemas.advice import BudgetContext, HistoryMessage, RecentExpense
from budget_planner.services.budget_service import format_amount

logger = logging.getLogger(__name__)

DEFAULT_REPLY = "I'm here to help with your budget!"
FALLBACK_REPLY = "I'm having trouble connecting right now. Please try again in a moment."

# Checked in order, first match wins
_AGENT_KEYWORDS = [
    (AgentType.expense_analysis, ("expense analysis", "spending pattern")),
    (AgentType.budget_planning, ("budget plan", "recommend allocating")),
    (AgentType.prediction, ("predict", "forecast", "next month")),
    (AgentType.recommendation, ("recommend", "tip", "suggest")),
]


@dataclass(frozen=True)
class AdviceResult:
    response: str
    agent_type: AgentType


def classify_agent_type(text: str) -> AgentType:
    """
    Guess which advisor answered from keywords in the reply.

    Heuristic only. The label is cosmetic and nothing should branch on it.
    """
    lowered = text.lower()
    for agent_type, keywords in _AGENT_KEYWORDS:
        if any(keyword in lowered for keyword in keywords):
            return agent_type
    return AgentType.interaction


def build_budget_context(
    plan: BudgetPlan,
    expenses: Sequence[ExpenseRecord],
    recent_limit: Optional[int] = None
) -> BudgetContext:
    """Snapshot of the plan sent along with every advice request."""
    limit = settings.advice_recent_expenses_limit if recent_limit is None else recent_limit
    recent = list(expenses)[-limit:] if limit > 0 else []

    return BudgetContext(
        total_income=float(plan.total_income),
        total_expenses=float(plan.total_expenses),
        savings=float(plan.savings),
        savings_goal=float(plan.savings_goal_target),
        category_budgets={k: float(v) for k, v in plan.category_budgets.items()},
        recommendations=list(plan.recommendations),
        recent_expenses=[
            RecentExpense(category=e.category.value, amount=float(e.amount), description=e.description)
            for e in recent
        ],
    )


def _money(value: float) -> str:
    return format_amount(Decimal(str(value)))


def format_budget_summary(context: BudgetContext) -> str:
    category_lines = "\n".join(
        f"- {category}: {_money(amount)}"
        for category, amount in context.category_budgets.items()
        if amount > 0
    ) or "- none"
    expense_lines = "\n".join(
        f"- {e.description}: {_money(e.amount)} ({e.category})"
        for e in context.recent_expenses
    ) or "- none"
    recommendation_lines = "\n".join(f"- {r}" for r in context.recommendations) or "- none"

    return BUDGET_SUMMARY.format(
        total_income=_money(context.total_income),
        total_expenses=_money(context.total_expenses),
        savings=_money(context.savings),
        savings_goal=_money(context.savings_goal),
        category_lines=category_lines,
        expense_lines=expense_lines,
        recommendation_lines=recommendation_lines,
    )


def build_messages(
    message: str,
    context: BudgetContext,
    history: Sequence[HistoryMessage],
    history_limit: Optional[int] = None
) -> List[Dict[str, str]]:
    limit = settings.advice_history_limit if history_limit is None else history_limit
    recent_history = list(history)[-limit:] if limit > 0 else []

    messages = [
        {"role": "system", "content": BUDGET_ADVICE_SYSTEM},
        {"role": "system", "content": format_budget_summary(context)},
    ]
    messages.extend({"role": m.role.value, "content": m.content} for m in recent_history)
    messages.append({"role": "user", "content": message})
    return messages


def _strip_code_fence(text: str) -> str:
    cleaned = text.strip()
    if cleaned.startswith("```json"):
        cleaned = cleaned[7:]
    if cleaned.startswith("```"):
        cleaned = cleaned[3:]
    if cleaned.endswith("```"):
        cleaned = cleaned[:-3]
    return cleaned.strip()


def parse_advice(raw: str) -> AdviceResult:
    """
    Read the model's reply.

    Structured {"agent_type", "response"} answers are taken as-is. Anything
    else is treated as free text and labelled with classify_agent_type.
    """
    cleaned = _strip_code_fence(raw or "")
    if not cleaned:
        return AdviceResult(response=DEFAULT_REPLY, agent_type=AgentType.interaction)

    if cleaned.startswith("{"):
        try:
            data = json.loads(cleaned)
        except json.JSONDecodeError:
            data = None
        if isinstance(data, dict) and isinstance(data.get("response"), str) and data["response"].strip():
            text = data["response"].strip()
            try:
                agent_type = AgentType(data.get("agent_type"))
            except ValueError:
                agent_type = classify_agent_type(text)
            return AdviceResult(response=text, agent_type=agent_type)

    return AdviceResult(response=cleaned, agent_type=classify_agent_type(cleaned))


async def request_advice(
    client: AIClient,
    message: str,
    context: BudgetContext,
    history: Sequence[HistoryMessage] = ()
) -> AdviceResult:
    """
    Ask the gateway for advice on the user's message.

    Raises AIServiceError (or RateLimitedError / QuotaExceededError) when the
    gateway call fails. No retries.
    """
    if not settings.ai_advice_enabled:
        raise AIServiceError("AI advice is disabled", status_code=503)

    messages = build_messages(message, context, history)
    raw = await client.chat(
        messages,
        temperature=settings.advice_temperature,
        max_tokens=settings.advice_max_tokens,
    )
    result = parse_advice(raw)
    logger.info(f"Advice generated, agent: {result.agent_type.value}")
    return result
