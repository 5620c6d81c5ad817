"""LLM Configuration"""

from dataclasses import dataclass, field
from typing import Literal, Optional

from backend.app.core.config import settings


@dataclass
class LLMConfig:
    """LLM 설정"""

    # Endpoint (OpenAI-compatible chat completions)
    base_url: str = field(default_factory=lambda: settings.LLM_BASE_URL)
    api_key: Optional[str] = field(default_factory=lambda: settings.GROQ_API_KEY)

    # Model
    model: str = field(default_factory=lambda: settings.LLM_MODEL)

    # Generation params
    temperature: float = field(default_factory=lambda: settings.LLM_TEMPERATURE)
    max_tokens: Optional[int] = None
    tool_choice: Literal["auto", "required", "none"] = "auto"

    # Timeout
    timeout_sec: float = field(default_factory=lambda: settings.LLM_TIMEOUT_SEC)

    # No automatic retries; the caller resubmits a refined prompt
    max_retries: int = 0
