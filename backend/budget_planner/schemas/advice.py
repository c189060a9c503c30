"""Pydantic schemas for the advice endpoint and chat."""

from pydantic import BaseModel, Field, field_validator
from typing import Dict, List, Optional
from datetime import datetime

from budget_planner.models.chat import AgentType, ChatRole
from budget_planner.schemas.base import CamelModel


class RecentExpense(CamelModel):
    category: str
    amount: float
    description: str


class BudgetContext(CamelModel):
    total_income: float
    total_expenses: float
    savings: float
    savings_goal: float
    category_budgets: Dict[str, float]
    recommendations: List[str] = []
    recent_expenses: List[RecentExpense] = []


class HistoryMessage(CamelModel):
    role: ChatRole
    content: str


class AdviceRequest(CamelModel):
    message: str = Field(min_length=1)
    budget_context: BudgetContext
    conversation_history: List[HistoryMessage] = []


class AdviceResponse(CamelModel):
    response: str
    agent_type: AgentType


class AdviceError(BaseModel):
    error: str


class ChatSendRequest(BaseModel):
    message: str = Field(min_length=1, max_length=2000)

    @field_validator('message')
    @classmethod
    def message_not_blank(cls, v):
        v = v.strip()
        if not v:
            raise ValueError("Message is empty")
        return v


class ChatMessageResponse(BaseModel):
    id: str
    role: ChatRole
    content: str
    timestamp: datetime
    agent_type: Optional[AgentType] = None


class ChatSendResponse(BaseModel):
    message: ChatMessageResponse
    notice: Optional[str] = None


class ChatHistoryResponse(BaseModel):
    items: List[ChatMessageResponse]
    total: int
    suggestions: List[str] = []
