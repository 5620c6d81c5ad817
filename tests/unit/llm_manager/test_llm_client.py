"""LLM Client 테스트"""

import json
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import httpx
import openai
import pytest

from backend.app.core.errors import ErrorCode, UpstreamError
from backend.app.site_builder.llm_manager import LLMClient, format_build_messages
from backend.app.site_builder.llm_manager.client import tool_result_message
from backend.app.site_builder.llm_manager.config import LLMConfig
from backend.app.site_builder.models import ModelReply, ToolResult
from backend.app.site_builder.tools import openai_tools
from tests.helpers import make_call


def _completion(content=None, tool_calls=None):
    message = SimpleNamespace(content=content, tool_calls=tool_calls)
    return SimpleNamespace(choices=[SimpleNamespace(message=message)])


def _tool_call(call_id, name, arguments):
    return SimpleNamespace(id=call_id, function=SimpleNamespace(name=name, arguments=arguments))


@pytest.fixture
def openai_client():
    client = MagicMock()
    client.chat.completions.create = AsyncMock(return_value=_completion(content="Hello"))
    return client


@pytest.fixture
def llm(openai_client):
    return LLMClient(config=LLMConfig(api_key="test-key", model="test-model"), client=openai_client)


class TestComplete:
    """complete() 테스트"""

    async def test_text_reply(self, llm):
        reply = await llm.complete(format_build_messages("hi"))

        assert reply.content == "Hello"
        assert reply.tool_calls == []

    async def test_tool_calls_parsed(self, llm, openai_client):
        openai_client.chat.completions.create.return_value = _completion(
            tool_calls=[
                _tool_call("c1", "WriteFile", '{"path": "index.html", "content": "x"}'),
                _tool_call("c2", "ListDirectory", None),
            ]
        )

        reply = await llm.complete(format_build_messages("hi"), tools=openai_tools())

        assert [c.name for c in reply.tool_calls] == ["WriteFile", "ListDirectory"]
        assert json.loads(reply.tool_calls[0].arguments) == {"path": "index.html", "content": "x"}
        assert reply.tool_calls[1].arguments == "{}"

    async def test_request_params(self, llm, openai_client):
        tools = openai_tools()
        await llm.complete([{"role": "user", "content": "hi"}], tools=tools)

        kwargs = openai_client.chat.completions.create.await_args.kwargs
        assert kwargs["model"] == "test-model"
        assert kwargs["tools"] == tools
        assert kwargs["tool_choice"] == "auto"
        assert "max_tokens" not in kwargs

    async def test_no_tools_no_tool_choice(self, llm, openai_client):
        await llm.complete([{"role": "user", "content": "hi"}])

        assert "tool_choice" not in openai_client.chat.completions.create.await_args.kwargs

    async def test_timeout(self, llm, openai_client):
        request = httpx.Request("POST", "https://api.groq.com/openai/v1/chat/completions")
        openai_client.chat.completions.create.side_effect = openai.APITimeoutError(request=request)

        with pytest.raises(UpstreamError) as exc_info:
            await llm.complete([{"role": "user", "content": "hi"}])
        assert exc_info.value.code == ErrorCode.LLM_TIMEOUT

    async def test_api_error(self, llm, openai_client):
        request = httpx.Request("POST", "https://api.groq.com/openai/v1/chat/completions")
        openai_client.chat.completions.create.side_effect = openai.APIConnectionError(request=request)

        with pytest.raises(UpstreamError) as exc_info:
            await llm.complete([{"role": "user", "content": "hi"}])
        assert exc_info.value.code == ErrorCode.LLM_API_ERROR

    async def test_empty_choices(self, llm, openai_client):
        openai_client.chat.completions.create.return_value = SimpleNamespace(choices=[])

        with pytest.raises(UpstreamError) as exc_info:
            await llm.complete([{"role": "user", "content": "hi"}])
        assert exc_info.value.code == ErrorCode.LLM_API_ERROR


class TestToolResultReporting:
    """결과 보고 테스트"""

    def test_tool_result_message(self):
        call = make_call("ReadFile", call_id="c9", path="a.txt")
        message = tool_result_message(call, ToolResult(success=False, error="File does not exist: a.txt"))

        assert message["role"] == "tool"
        assert message["tool_call_id"] == "c9"
        assert json.loads(message["content"]) == {"success": False, "error": "File does not exist: a.txt"}

    async def test_report_appends_assistant_and_tool_messages(self, llm, openai_client):
        call = make_call("ListDirectory", call_id="c1")
        reply = ModelReply(tool_calls=[call])
        base = format_build_messages("hi")

        content = await llm.report_tool_result(base, reply, call, ToolResult(success=True, count=0))

        sent = openai_client.chat.completions.create.await_args.kwargs["messages"]
        assert content == "Hello"
        assert [m["role"] for m in sent] == ["system", "user", "assistant", "tool"]
        assert len(base) == 2


class TestConfiguration:

    def test_is_configured(self):
        assert LLMClient(config=LLMConfig(api_key="k")).is_configured is True
        assert LLMClient(config=LLMConfig(api_key=None)).is_configured is False

    def test_lazy_openai_client_has_no_retries(self):
        client = LLMClient(config=LLMConfig(api_key="k", base_url="https://example.test/v1"))
        assert client.openai.max_retries == 0
        assert str(client.openai.base_url).startswith("https://example.test/v1")
