"""Tool Models

액션 카탈로그 명세, 모델이 요청한 ToolCall, 실행 결과 ToolResult
"""

from typing import Any, Optional

from pydantic import BaseModel, Field, model_serializer

from backend.app.site_builder.models.enums import EntryType, ToolName, ToolParameterType


class ToolParameter(BaseModel):
    """도구 파라미터 정의"""

    name: str
    type: ToolParameterType = ToolParameterType.STRING
    required: bool = False
    description: str = ""


class ToolSpec(BaseModel):
    """도구 명세"""

    name: ToolName
    description: str
    parameters: list[ToolParameter] = Field(default_factory=list)

    def get_required_params(self) -> list[ToolParameter]:
        return [p for p in self.parameters if p.required]

    def to_openai_schema(self) -> dict[str, Any]:
        """OpenAI function-calling 스키마로 변환"""
        return {
            "type": "function",
            "function": {
                "name": self.name.value,
                "description": self.description,
                "parameters": {
                    "type": "object",
                    "properties": {
                        p.name: {"type": p.type.value, "description": p.description}
                        for p in self.parameters
                    },
                    "required": [p.name for p in self.get_required_params()],
                },
            },
        }


class ToolCall(BaseModel):
    """모델이 요청한 단일 액션

    arguments는 모델이 보낸 원본 JSON 문자열 그대로 보관한다.
    """

    id: str = ""
    name: str
    arguments: str = "{}"

    def to_openai_message(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "type": "function",
            "function": {"name": self.name, "arguments": self.arguments},
        }


class DirectoryEntry(BaseModel):
    """ListDirectory 결과 항목"""

    name: str
    type: EntryType
    path: str


class ToolResult(BaseModel):
    """액션 실행 결과

    설정되지 않은 필드(None)는 직렬화에서 제외된다.
    """

    success: bool
    output: Optional[str] = None
    content: Optional[str] = None
    files: Optional[list[DirectoryEntry]] = None
    message: Optional[str] = None
    error: Optional[str] = None
    code: Optional[str] = None
    command: Optional[str] = None
    path: Optional[str] = None
    size: Optional[int] = None
    count: Optional[int] = None

    @model_serializer(mode="wrap")
    def _drop_unset(self, handler: Any) -> dict[str, Any]:
        data = handler(self)
        return {k: v for k, v in data.items() if v is not None}


class ExecutionRecord(BaseModel):
    """(ToolCall, ToolResult) 쌍

    args는 arguments JSON 파싱에 실패한 경우 None.
    """

    tool: str
    args: Optional[dict[str, Any]] = None
    result: ToolResult
