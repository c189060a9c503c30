"""Tests for AI settings endpoints."""

import pytest

from budget_planner.config import settings


@pytest.fixture
def restore_settings(monkeypatch):
    """Let the endpoints mutate global settings and put them back afterwards."""
    for name in ("ai_provider", "ai_model", "ai_advice_enabled", "advice_temperature", "advice_max_tokens"):
        monkeypatch.setattr(settings, name, getattr(settings, name))


class TestSettingsAPI:

    def test_get_settings(self, client):
        response = client.get("/api/v1/settings")
        assert response.status_code == 200
        data = response.json()
        assert data["ai"]["provider"] == settings.ai_provider
        assert {p["id"] for p in data["available_providers"]} == {"openrouter", "ollama", "anthropic", "openai"}

    def test_update_ai_settings(self, client, restore_settings):
        response = client.patch("/api/v1/settings/ai", json={"model": "gpt-4o-mini", "advice_enabled": False})
        assert response.status_code == 200
        assert response.json()["model"] == "gpt-4o-mini"
        assert settings.ai_advice_enabled is False

    def test_unknown_provider(self, client, restore_settings):
        response = client.patch("/api/v1/settings/ai", json={"provider": "carrier-pigeon"})
        assert response.status_code == 400
