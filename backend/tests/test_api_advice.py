"""Tests for the advice and chat endpoints."""

from budget_planner.ai.client import AIServiceError, RateLimitedError, QuotaExceededError
from budget_planner.seed import seed_demo_data


ADVICE_REQUEST = {
    "message": "How can I save more?",
    "budgetContext": {
        "totalIncome": 2550,
        "totalExpenses": 1490,
        "savings": 1060,
        "savingsGoal": 500,
        "categoryBudgets": {"housing": 800, "food": 320, "savings": 1060},
        "recommendations": [],
        "recentExpenses": [{"category": "housing", "amount": 800, "description": "Rent"}],
    },
    "conversationHistory": [{"role": "assistant", "content": "Hi!"}],
}


class TestAdviceAPI:
    """Test the gateway contract."""

    def test_advice(self, client, fake_ai):
        response = client.post("/api/v1/advice", json=ADVICE_REQUEST)
        assert response.status_code == 200
        assert response.json() == {"response": "Cook at home more often.", "agentType": "recommendation"}
        assert "Total Income: $2,550" in fake_ai.calls[0][1]["content"]

    def test_rate_limited(self, client, fake_ai):
        fake_ai.error = RateLimitedError("too many requests")
        response = client.post("/api/v1/advice", json=ADVICE_REQUEST)
        assert response.status_code == 429
        assert "error" in response.json()

    def test_quota_exceeded(self, client, fake_ai):
        fake_ai.error = QuotaExceededError("payment required")
        response = client.post("/api/v1/advice", json=ADVICE_REQUEST)
        assert response.status_code == 402
        assert response.json() == {"error": "AI service quota exceeded. Please try again later."}

    def test_other_failure(self, client, fake_ai):
        fake_ai.error = AIServiceError("bad gateway", status_code=502)
        response = client.post("/api/v1/advice", json=ADVICE_REQUEST)
        assert response.status_code == 500

    def test_missing_context(self, client):
        response = client.post("/api/v1/advice", json={"message": "hi"})
        assert response.status_code == 422


class TestChatAPI:
    """Test the chat log built on the store."""

    def test_history_has_greeting(self, client):
        data = client.get("/api/v1/chat/messages").json()
        assert data["total"] == 1
        assert data["items"][0]["role"] == "assistant"
        assert "How can I save more?" in data["suggestions"]

    def test_send_message(self, client, store):
        seed_demo_data(store)
        response = client.post("/api/v1/chat/messages", json={"message": "Any tips?"})
        assert response.status_code == 200
        data = response.json()
        assert data["message"]["content"] == "Cook at home more often."
        assert data["message"]["agent_type"] == "recommendation"
        assert data["notice"] is None
        assert client.get("/api/v1/chat/messages").json()["total"] == 3

    def test_send_message_fallback(self, client, store, fake_ai):
        seed_demo_data(store)
        fake_ai.error = RateLimitedError("too many requests")
        response = client.post("/api/v1/chat/messages", json={"message": "Any tips?"})
        assert response.status_code == 200
        data = response.json()
        assert data["message"]["content"].startswith("I'm having trouble connecting")
        assert data["notice"].startswith("Rate limit exceeded")
        assert len(store.expenses) == 7

    def test_blank_message(self, client):
        response = client.post("/api/v1/chat/messages", json={"message": "   "})
        assert response.status_code == 422
