"""
FastAPI dependencies.
"""

from typing import Optional

from budget_planner.ai.client import AIClient, get_ai_client
from budget_planner.services.chat_service import ChatSession
from budget_planner.services.record_store import RecordStore

_store: Optional[RecordStore] = None
_chat_session: Optional[ChatSession] = None


def get_store() -> RecordStore:
    """
    Dependency for the process-wide record store.
    """
    global _store
    if _store is None:
        _store = RecordStore()
    return _store


def get_chat_session() -> ChatSession:
    global _chat_session
    if _chat_session is None:
        _chat_session = ChatSession()
    return _chat_session


def get_ai() -> AIClient:
    return get_ai_client()
