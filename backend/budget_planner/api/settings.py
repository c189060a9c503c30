from fastapi import APIRouter, HTTPException
from budget_planner.schemas.settings import (
    AISettings,
    AISettingsUpdate,
    SettingsResponse,
    AvailableProvider
)
from budget_planner.config import settings
from budget_planner.ai.client import get_ai_client, reset_ai_client, AIServiceError

router = APIRouter(prefix="/settings", tags=["settings"])

AVAILABLE_PROVIDERS = [
    AvailableProvider(
        id="openrouter",
        name="OpenRouter",
        requires_key=True,
        models=[
            "google/gemini-flash-1.5",
            "anthropic/claude-3-haiku",
            "openai/gpt-4o-mini",
            "meta-llama/llama-3.1-8b-instruct",
        ]
    ),
    AvailableProvider(
        id="ollama",
        name="Ollama (Local)",
        requires_key=False,
        models=[
            "llama3.1:8b",
            "mistral:7b",
        ]
    ),
    AvailableProvider(
        id="anthropic",
        name="Anthropic",
        requires_key=True,
        models=[
            "claude-3-haiku-20240307",
            "claude-3-sonnet-20240229",
        ]
    ),
    AvailableProvider(
        id="openai",
        name="OpenAI",
        requires_key=True,
        models=[
            "gpt-4o-mini",
            "gpt-4o",
        ]
    ),
]

PROVIDER_IDS = {p.id for p in AVAILABLE_PROVIDERS}


def _current_ai_settings() -> AISettings:
    return AISettings(
        provider=settings.ai_provider,
        model=settings.ai_model,
        advice_enabled=settings.ai_advice_enabled,
        temperature=settings.advice_temperature,
        max_tokens=settings.advice_max_tokens,
    )


@router.get("", response_model=SettingsResponse)
def get_settings():
    return SettingsResponse(
        ai=_current_ai_settings(),
        available_providers=AVAILABLE_PROVIDERS
    )


@router.patch("/ai", response_model=AISettings)
def update_ai_settings(update: AISettingsUpdate):
    if update.provider is not None:
        if update.provider not in PROVIDER_IDS:
            raise HTTPException(status_code=400, detail=f"Unknown AI provider: {update.provider}")
        settings.ai_provider = update.provider
    if update.model is not None:
        settings.ai_model = update.model
    if update.advice_enabled is not None:
        settings.ai_advice_enabled = update.advice_enabled
    if update.temperature is not None:
        settings.advice_temperature = update.temperature
    if update.max_tokens is not None:
        settings.advice_max_tokens = update.max_tokens

    reset_ai_client()

    return _current_ai_settings()


@router.post("/ai/test")
async def test_ai_connection():
    try:
        client = get_ai_client()
        response = await client.complete(
            system_prompt="You are a helpful assistant.",
            user_prompt="Say 'OK' if you can hear me.",
            max_tokens=10
        )
        return {"status": "ok", "response": response.strip()}
    except AIServiceError as e:
        raise HTTPException(status_code=500, detail=f"AI connection failed: {str(e)}")
