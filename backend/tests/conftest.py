"""Shared test fixtures."""

import pytest
from decimal import Decimal
from fastapi.testclient import TestClient

from budget_planner.main import app
from budget_planner.dependencies import get_store, get_chat_session, get_ai
from budget_planner.models.expense import ExpenseCategory
from budget_planner.seed import seed_demo_data
from budget_planner.services.chat_service import ChatSession
from budget_planner.services.record_store import RecordStore


class FakeAIClient:
    """Stands in for the gateway client. Records every message list it gets."""

    def __init__(self, reply: str = "", error: Exception = None):
        self.reply = reply
        self.error = error
        self.calls = []

    async def chat(self, messages, temperature=0.7, max_tokens=1000, json_mode=False):
        self.calls.append(messages)
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def store():
    """Create an empty record store."""
    return RecordStore()


@pytest.fixture
def demo_store(store):
    """Store loaded with the demo incomes and expenses."""
    seed_demo_data(store)
    return store


@pytest.fixture
def chat_session():
    return ChatSession()


@pytest.fixture
def fake_ai():
    return FakeAIClient(reply='{"agent_type": "recommendation", "response": "Cook at home more often."}')


@pytest.fixture(scope="function")
def client(store, chat_session, fake_ai):
    """Create a test client wired to the per-test store, chat and AI client."""
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_chat_session] = lambda: chat_session
    app.dependency_overrides[get_ai] = lambda: fake_ai
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def sample_goal(store):
    """Create a sample savings goal."""
    return store.add_goal(name="Emergency Fund", target_amount=Decimal("60000"), monthly_percentage=Decimal("20"))


@pytest.fixture
def sample_expense(store):
    return store.add_expense(
        category=ExpenseCategory.food,
        amount=Decimal("320"),
        description="Groceries",
        date="2026-02-05",
    )
