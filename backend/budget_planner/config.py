"""
Application configuration using Pydantic settings.
"""

from decimal import Decimal
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    # App
    app_name: str = "Budget Planner"
    seed_demo_data: bool = False

    # Onboarding: share of total onboarding income used as the default savings target
    onboarding_savings_rate: Decimal = Decimal("0.20")

    # AI Provider
    ai_provider: str = "openrouter"  # openrouter, ollama, openai, anthropic
    ai_model: str = "google/gemini-flash-1.5"
    ai_base_url: Optional[str] = None  # For Ollama: http://localhost:11434

    # API Keys (optional based on provider)
    openrouter_api_key: Optional[str] = None
    openai_api_key: Optional[str] = None
    anthropic_api_key: Optional[str] = None

    # Advice chat
    ai_advice_enabled: bool = True
    advice_temperature: float = 0.7
    advice_max_tokens: int = 1000
    advice_history_limit: int = 6
    advice_recent_expenses_limit: int = 10

    # Server
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    frontend_url: str = "http://localhost:5173"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False
    )


# Global settings instance
settings = Settings()
