"""LLM Manager - LLM 클라이언트 및 설정 관리"""

from .client import LLMClient, get_llm_client, tool_result_message
from .config import LLMConfig
from .prompts import SITE_BUILDER_SYSTEM_PROMPT, format_build_messages

__all__ = [
    # Client
    "LLMClient",
    "get_llm_client",
    "tool_result_message",
    # Config
    "LLMConfig",
    # Prompts
    "SITE_BUILDER_SYSTEM_PROMPT",
    "format_build_messages",
]
