"""Build Models - 모델 응답과 빌드 결과"""

from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from backend.app.site_builder.models.tool import ExecutionRecord, ToolCall


def utc_now_iso() -> str:
    """ISO-8601 UTC 타임스탬프 (밀리초, Z 접미사)"""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def format_elapsed(elapsed_ms: int) -> str:
    return f"{elapsed_ms}ms"


class ModelReply(BaseModel):
    """LLM 1회 호출 결과"""

    content: Optional[str] = None
    tool_calls: list[ToolCall] = Field(default_factory=list)

    def to_assistant_message(self) -> dict[str, Any]:
        message: dict[str, Any] = {"role": "assistant", "content": self.content}
        if self.tool_calls:
            message["tool_calls"] = [c.to_openai_message() for c in self.tool_calls]
        return message


class BuildStats(BaseModel):
    """빌드 통계"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    tool_calls_executed: int
    execution_time: str
    timestamp: str = Field(default_factory=utc_now_iso)
    has_index_file: bool


class BuildResponse(BaseModel):
    """POST /api/build 성공 응답"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    success: bool = True
    message: Optional[str] = None
    project_id: str
    preview_url: Optional[str] = None
    execution_results: list[ExecutionRecord] = Field(default_factory=list)
    stats: BuildStats
