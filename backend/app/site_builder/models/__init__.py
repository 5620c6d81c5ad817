"""Site Builder Models"""

from .build import BuildResponse, BuildStats, ModelReply, format_elapsed, utc_now_iso
from .enums import BuildPhase, CommandPolicy, EntryType, ToolName, ToolParameterType
from .project import ProjectContext, WebsiteInfo
from .tool import (
    DirectoryEntry,
    ExecutionRecord,
    ToolCall,
    ToolParameter,
    ToolResult,
    ToolSpec,
)

__all__ = [
    # Enums
    "BuildPhase",
    "CommandPolicy",
    "EntryType",
    "ToolName",
    "ToolParameterType",
    # Tool
    "DirectoryEntry",
    "ExecutionRecord",
    "ToolCall",
    "ToolParameter",
    "ToolResult",
    "ToolSpec",
    # Project
    "ProjectContext",
    "WebsiteInfo",
    # Build
    "BuildResponse",
    "BuildStats",
    "ModelReply",
    "format_elapsed",
    "utc_now_iso",
]
