"""
Chat message models.
"""

import enum
import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


class ChatRole(str, enum.Enum):
    user = "user"
    assistant = "assistant"


class AgentType(str, enum.Enum):
    """Cosmetic label for which advisor persona answered."""
    data_collection = "data-collection"
    expense_analysis = "expense-analysis"
    budget_planning = "budget-planning"
    prediction = "prediction"
    recommendation = "recommendation"
    interaction = "interaction"


@dataclass(frozen=True)
class ChatMessage:
    role: ChatRole
    content: str
    agent_type: Optional[AgentType] = None
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    timestamp: datetime = field(default_factory=datetime.utcnow)
