"""Action Catalogue

모델에 노출되는 고정 액션 목록. 프로젝트 ID 파라미터는 없다;
모든 경로는 빌드 컨텍스트의 프로젝트 디렉토리 기준이다.
"""

from typing import Any, Optional

from backend.app.site_builder.models import ToolName, ToolParameter, ToolSpec

TOOL_CATALOGUE: list[ToolSpec] = [
    ToolSpec(
        name=ToolName.EXECUTE_COMMAND,
        description=(
            "Execute safe terminal/shell commands for website building. "
            "Supports mkdir, touch, echo, ls, etc."
        ),
        parameters=[
            ToolParameter(
                name="command",
                required=True,
                description="The terminal command to execute. Example: 'mkdir css', 'touch index.html'",
            ),
        ],
    ),
    ToolSpec(
        name=ToolName.WRITE_FILE,
        description="Write content to a file. Perfect for creating HTML, CSS, JS files.",
        parameters=[
            ToolParameter(
                name="path",
                required=True,
                description="Relative path to the file (e.g., 'index.html', 'css/style.css')",
            ),
            ToolParameter(
                name="content",
                required=True,
                description="Complete file content to write",
            ),
        ],
    ),
    ToolSpec(
        name=ToolName.READ_FILE,
        description="Read content from an existing file.",
        parameters=[
            ToolParameter(
                name="path",
                required=True,
                description="Relative path to the file to read",
            ),
        ],
    ),
    ToolSpec(
        name=ToolName.LIST_DIRECTORY,
        description="List files and directories in a given path.",
        parameters=[
            ToolParameter(
                name="path",
                description="Directory path to list (defaults to the project root)",
            ),
        ],
    ),
]


def get_tool_spec(name: str) -> Optional[ToolSpec]:
    for spec in TOOL_CATALOGUE:
        if spec.name.value == name:
            return spec
    return None


def openai_tools() -> list[dict[str, Any]]:
    """chat.completions `tools` 파라미터"""
    return [spec.to_openai_schema() for spec in TOOL_CATALOGUE]
