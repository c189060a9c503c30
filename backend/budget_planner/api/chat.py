"""API endpoints for the advice chat."""

from fastapi import APIRouter, Depends

from budget_planner.ai.client import AIClient
from budget_planner.dependencies import get_ai, get_chat_session, get_store
from budget_planner.models.chat import ChatMessage
from budget_planner.schemas.advice import (
    ChatSendRequest,
    ChatSendResponse,
    ChatMessageResponse,
    ChatHistoryResponse,
)
from budget_planner.services.chat_service import ChatSession, SUGGESTED_QUESTIONS
from budget_planner.services.record_store import RecordStore

router = APIRouter(prefix="/chat", tags=["chat"])


def to_message_response(message: ChatMessage) -> ChatMessageResponse:
    return ChatMessageResponse(
        id=message.id,
        role=message.role,
        content=message.content,
        timestamp=message.timestamp,
        agent_type=message.agent_type,
    )


@router.get("/messages", response_model=ChatHistoryResponse)
def get_messages(chat: ChatSession = Depends(get_chat_session)):
    """Get the conversation so far, oldest first."""
    return ChatHistoryResponse(
        items=[to_message_response(m) for m in chat.messages],
        total=len(chat.messages),
        suggestions=SUGGESTED_QUESTIONS,
    )


@router.post("/messages", response_model=ChatSendResponse)
async def send_message(
    request: ChatSendRequest,
    chat: ChatSession = Depends(get_chat_session),
    store: RecordStore = Depends(get_store),
    client: AIClient = Depends(get_ai)
):
    """Send a message. Gateway failures produce a fallback reply and a notice."""
    reply, notice = await chat.send(client, store, request.message.strip())
    return ChatSendResponse(message=to_message_response(reply), notice=notice)
