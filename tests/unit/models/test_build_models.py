"""Build/Tool 모델 테스트"""

import re

from backend.app.site_builder.models import (
    BuildResponse,
    BuildStats,
    ExecutionRecord,
    ModelReply,
    ToolName,
    ToolResult,
    format_elapsed,
    utc_now_iso,
)
from backend.app.site_builder.tools import TOOL_CATALOGUE, get_tool_spec, openai_tools
from tests.helpers import make_call


class TestToolResult:
    """ToolResult 직렬화 테스트"""

    def test_drops_unset_fields(self):
        result = ToolResult(success=True, output="hello", command="echo hello")
        assert result.model_dump() == {"success": True, "output": "hello", "command": "echo hello"}

    def test_nested_in_record(self):
        record = ExecutionRecord(
            tool="ReadFile",
            args={"path": "a.txt"},
            result=ToolResult(success=False, error="File does not exist: a.txt"),
        )
        assert record.model_dump(mode="json") == {
            "tool": "ReadFile",
            "args": {"path": "a.txt"},
            "result": {"success": False, "error": "File does not exist: a.txt"},
        }


class TestBuildResponse:
    """BuildResponse 테스트"""

    def test_camel_case_wire_format(self):
        response = BuildResponse(
            message="Done",
            project_id="website_1_abcdef",
            execution_results=[],
            stats=BuildStats(tool_calls_executed=0, execution_time="12ms", has_index_file=False),
        )
        data = response.model_dump(by_alias=True, mode="json")

        assert data["projectId"] == "website_1_abcdef"
        assert data["previewUrl"] is None
        assert data["executionResults"] == []
        assert data["stats"]["toolCallsExecuted"] == 0
        assert data["stats"]["executionTime"] == "12ms"
        assert data["stats"]["hasIndexFile"] is False

    def test_timestamp_format(self):
        assert re.match(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z$", utc_now_iso())

    def test_format_elapsed(self):
        assert format_elapsed(0) == "0ms"
        assert format_elapsed(1534) == "1534ms"


class TestModelReply:
    """ModelReply 테스트"""

    def test_assistant_message_with_tool_calls(self):
        reply = ModelReply(content=None, tool_calls=[make_call("ListDirectory", call_id="c1")])
        message = reply.to_assistant_message()

        assert message["role"] == "assistant"
        assert message["tool_calls"][0]["id"] == "c1"
        assert message["tool_calls"][0]["function"]["name"] == "ListDirectory"

    def test_assistant_message_without_tool_calls(self):
        assert "tool_calls" not in ModelReply(content="hi").to_assistant_message()


class TestCatalogue:
    """액션 카탈로그 테스트"""

    def test_four_actions(self):
        assert [spec.name for spec in TOOL_CATALOGUE] == [
            ToolName.EXECUTE_COMMAND,
            ToolName.WRITE_FILE,
            ToolName.READ_FILE,
            ToolName.LIST_DIRECTORY,
        ]

    def test_no_project_id_parameter(self):
        for spec in TOOL_CATALOGUE:
            assert all("project" not in p.name.lower() for p in spec.parameters)

    def test_openai_schema(self):
        write_file = next(t for t in openai_tools() if t["function"]["name"] == "WriteFile")

        assert write_file["type"] == "function"
        assert write_file["function"]["parameters"]["required"] == ["path", "content"]

    def test_list_directory_path_optional(self):
        assert get_tool_spec("ListDirectory").get_required_params() == []
        assert get_tool_spec("Nope") is None
