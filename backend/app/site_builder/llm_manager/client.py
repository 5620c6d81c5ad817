"""LLM Client

OpenAI 호환 chat.completions 엔드포인트 (기본값: Groq) 클라이언트
"""

import json
from typing import Any, Optional

import openai
from openai import AsyncOpenAI

from backend.app.core.errors import ErrorCode, UpstreamError
from backend.app.core.logging import get_logger
from backend.app.site_builder.llm_manager.config import LLMConfig
from backend.app.site_builder.models import ModelReply, ToolCall, ToolResult

logger = get_logger(__name__)


class LLMClient:
    """LLM 클라이언트"""

    def __init__(self, config: Optional[LLMConfig] = None, client: Optional[AsyncOpenAI] = None):
        self.config = config or LLMConfig()
        self._openai: Optional[AsyncOpenAI] = client

    @property
    def openai(self) -> AsyncOpenAI:
        if self._openai is None:
            self._openai = AsyncOpenAI(
                api_key=self.config.api_key,
                base_url=self.config.base_url,
                timeout=self.config.timeout_sec,
                max_retries=self.config.max_retries,
            )
        return self._openai

    @property
    def is_configured(self) -> bool:
        return self._openai is not None or bool(self.config.api_key)

    async def complete(
        self,
        messages: list[dict[str, Any]],
        tools: Optional[list[dict[str, Any]]] = None,
    ) -> ModelReply:
        """채팅 완성 호출

        Args:
            messages: OpenAI 형식 메시지 목록
            tools: 함수 호출 카탈로그 (없으면 텍스트 응답만)

        Returns:
            메시지 내용과 요청된 ToolCall 목록

        Raises:
            UpstreamError: API 호출 실패
        """
        params: dict[str, Any] = {
            "model": self.config.model,
            "messages": messages,
            "temperature": self.config.temperature,
        }
        if self.config.max_tokens:
            params["max_tokens"] = self.config.max_tokens
        if tools:
            params["tools"] = tools
            params["tool_choice"] = self.config.tool_choice

        logger.debug(
            "LLM complete",
            model=self.config.model,
            message_count=len(messages),
            tool_count=len(tools or []),
        )

        try:
            response = await self.openai.chat.completions.create(**params)
        except openai.APITimeoutError as e:
            raise UpstreamError(ErrorCode.LLM_TIMEOUT, f"Language model request timed out: {e}") from e
        except openai.OpenAIError as e:
            raise UpstreamError(ErrorCode.LLM_API_ERROR, f"Language model request failed: {e}") from e

        if not response.choices:
            raise UpstreamError(ErrorCode.LLM_API_ERROR, "Language model returned no choices")

        message = response.choices[0].message
        tool_calls = [
            ToolCall(
                id=call.id or "",
                name=call.function.name,
                arguments=call.function.arguments or "{}",
            )
            for call in (message.tool_calls or [])
        ]

        logger.debug("LLM reply", has_content=bool(message.content), tool_calls=len(tool_calls))
        return ModelReply(content=message.content, tool_calls=tool_calls)

    async def report_tool_result(
        self,
        messages: list[dict[str, Any]],
        reply: ModelReply,
        call: ToolCall,
        result: ToolResult,
    ) -> Optional[str]:
        """실행 결과를 모델에 알리는 후속 호출

        응답 내용은 이후 실행을 제어하지 않는다.
        """
        follow_up = messages + [
            reply.to_assistant_message(),
            tool_result_message(call, result),
        ]
        followed = await self.complete(follow_up)
        return followed.content


def tool_result_message(call: ToolCall, result: ToolResult) -> dict[str, Any]:
    """role=tool 메시지"""
    return {
        "role": "tool",
        "tool_call_id": call.id,
        "name": call.name,
        "content": json.dumps(result.model_dump(mode="json"), ensure_ascii=False),
    }


# 기본 클라이언트
_default_client: Optional[LLMClient] = None


def get_llm_client() -> LLMClient:
    """LLMClient 싱글톤 반환"""
    global _default_client

    if _default_client is None:
        _default_client = LLMClient()

    return _default_client
