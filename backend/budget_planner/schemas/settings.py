from pydantic import BaseModel
from typing import Optional, List


class AISettings(BaseModel):
    provider: str
    model: str
    advice_enabled: bool
    temperature: float
    max_tokens: int


class AISettingsUpdate(BaseModel):
    provider: Optional[str] = None
    model: Optional[str] = None
    advice_enabled: Optional[bool] = None
    temperature: Optional[float] = None
    max_tokens: Optional[int] = None


class AvailableProvider(BaseModel):
    id: str
    name: str
    requires_key: bool
    models: List[str]


class SettingsResponse(BaseModel):
    ai: AISettings
    available_providers: List[AvailableProvider]
