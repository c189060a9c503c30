import logging
import os
import litellm
from typing import Optional, Dict, Any, List

from budget_planner.config import settings

logger = logging.getLogger(__name__)

litellm.drop_params = True

_PROVIDER_ENV_KEYS = {
    "openrouter": "OPENROUTER_API_KEY",
    "anthropic": "ANTHROPIC_API_KEY",
    "openai": "OPENAI_API_KEY",
}


class AIServiceError(Exception):
    """The LLM gateway call failed."""

    status_code = 500
    user_message = "Failed to get response"

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        if status_code is not None:
            self.status_code = status_code


class RateLimitedError(AIServiceError):
    status_code = 429
    user_message = "Rate limit exceeded. Please try again in a moment."


class QuotaExceededError(AIServiceError):
    status_code = 402
    user_message = "AI service quota exceeded. Please try again later."


def translate_error(exc: Exception) -> AIServiceError:
    """Map a provider exception onto the gateway error hierarchy."""
    if isinstance(exc, AIServiceError):
        return exc
    status = getattr(exc, "status_code", None)
    if isinstance(exc, litellm.RateLimitError) or status == 429:
        return RateLimitedError(str(exc))
    if status == 402:
        return QuotaExceededError(str(exc))
    return AIServiceError(str(exc), status_code=status if isinstance(status, int) else None)


class AIClient:

    def __init__(self):
        self.provider = settings.ai_provider
        self.model = self._get_model_string()
        self._configure_provider()

    def _get_model_string(self) -> str:
        model = settings.ai_model

        if self.provider == "openrouter":
            if not model.startswith("openrouter/"):
                return f"openrouter/{model}"
            return model
        elif self.provider == "ollama":
            if not model.startswith("ollama/"):
                return f"ollama/{model}"
            return model
        else:
            return model

    def _configure_provider(self):
        if self.provider == "openrouter":
            litellm.api_key = settings.openrouter_api_key
            litellm.api_base = "https://openrouter.ai/api/v1"
        elif self.provider == "ollama":
            litellm.api_base = settings.ai_base_url or "http://localhost:11434"
        elif self.provider == "anthropic":
            litellm.api_key = settings.anthropic_api_key
        elif self.provider == "openai":
            litellm.api_key = settings.openai_api_key

    def _api_key(self) -> Optional[str]:
        return {
            "openrouter": settings.openrouter_api_key,
            "anthropic": settings.anthropic_api_key,
            "openai": settings.openai_api_key,
        }.get(self.provider)

    async def chat(
        self,
        messages: List[Dict[str, str]],
        temperature: float = 0.7,
        max_tokens: int = 1000,
        json_mode: bool = False
    ) -> str:
        """Send a full message list and return the reply text."""
        kwargs: Dict[str, Any] = {
            "model": self.model,
            "messages": messages,
            "temperature": temperature,
            "max_tokens": max_tokens,
        }

        if json_mode:
            kwargs["response_format"] = {"type": "json_object"}

        env_name = _PROVIDER_ENV_KEYS.get(self.provider)
        env_key = self._api_key()

        try:
            if env_name and env_key:
                os.environ[env_name] = env_key

            response = await litellm.acompletion(**kwargs)
            return response.choices[0].message.content or ""
        except Exception as e:
            logger.error(f"AI completion error: {e}")
            raise translate_error(e) from e
        finally:
            if env_name and env_key:
                os.environ.pop(env_name, None)

    async def complete(
        self,
        system_prompt: str,
        user_prompt: str,
        temperature: float = 0.1,
        max_tokens: int = 1000,
        json_mode: bool = False
    ) -> str:
        messages = [
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": user_prompt}
        ]
        return await self.chat(
            messages,
            temperature=temperature,
            max_tokens=max_tokens,
            json_mode=json_mode
        )


_ai_client: Optional[AIClient] = None

def get_ai_client() -> AIClient:
    global _ai_client
    if _ai_client is None:
        _ai_client = AIClient()
    return _ai_client


def reset_ai_client() -> None:
    """Drop the cached client so the next call picks up new settings."""
    global _ai_client
    _ai_client = None
