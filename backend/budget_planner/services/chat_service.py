"""In-memory advice chat built on top of the record store."""

import logging
from typing import List, Optional, Tuple

from budget_planner.ai.client import AIClient, AIServiceError
from budget_planner.models.chat import AgentType, ChatMessage, ChatRole
from budget_planner.schemas.advice import HistoryMessage
from budget_planner.services import advice_service
from budget_planner.services.record_store import RecordStore

logger = logging.getLogger(__name__)

GREETING = (
    "Hi! I'm your Budget Planning Assistant. Several advisors work together here:\n\n"
    "- Expense Analyst: I analyze your spending patterns\n"
    "- Budget Planner: I create optimized plans\n"
    "- Predictor: I forecast future expenses\n"
    "- Advisor: I give personalized tips\n\n"
    "Ask me anything about your budget!"
)

SUGGESTED_QUESTIONS = [
    "How can I save more?",
    "Analyze my spending",
    "Predict next month",
]


class ChatSession:
    """
    Conversation log for the advice chat.

    Reads the record store to build the budget context but never writes to
    it. A failed gateway call still ends with an assistant message.
    Replies that arrive after reset() are dropped.
    """

    def __init__(self):
        self.messages: List[ChatMessage] = []
        self.generation = 0
        self.reset()

    def reset(self) -> None:
        self.generation += 1
        self.messages = [
            ChatMessage(role=ChatRole.assistant, content=GREETING, agent_type=AgentType.interaction)
        ]

    def history(self) -> List[HistoryMessage]:
        return [HistoryMessage(role=m.role, content=m.content) for m in self.messages]

    async def send(
        self,
        client: AIClient,
        store: RecordStore,
        text: str
    ) -> Tuple[ChatMessage, Optional[str]]:
        """
        Append the user's message and the assistant's answer.

        Returns the assistant message and, when the gateway failed, a short
        notice for the user.
        """
        generation = self.generation
        history = self.history()
        self.messages.append(ChatMessage(role=ChatRole.user, content=text))

        context = advice_service.build_budget_context(store.derive(), store.expenses)

        notice = None
        try:
            result = await advice_service.request_advice(client, text, context, history)
            reply = ChatMessage(
                role=ChatRole.assistant,
                content=result.response,
                agent_type=result.agent_type,
            )
        except AIServiceError as e:
            logger.warning(f"Advice request failed ({e.status_code}), using fallback reply: {e}")
            notice = e.user_message
            reply = ChatMessage(
                role=ChatRole.assistant,
                content=advice_service.FALLBACK_REPLY,
                agent_type=AgentType.interaction,
            )

        if generation != self.generation:
            logger.info("Chat was reset while waiting for advice, dropping the reply")
            return reply, notice

        self.messages.append(reply)
        return reply, notice
