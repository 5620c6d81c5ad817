"""Shared Enums for Models"""

from enum import Enum


class ToolName(str, Enum):
    """모델이 호출할 수 있는 액션 카탈로그"""
    EXECUTE_COMMAND = "ExecuteCommand"
    WRITE_FILE = "WriteFile"
    READ_FILE = "ReadFile"
    LIST_DIRECTORY = "ListDirectory"


class ToolParameterType(str, Enum):
    """도구 파라미터 타입 (JSON Schema)"""
    STRING = "string"
    INTEGER = "integer"
    BOOLEAN = "boolean"


class CommandPolicy(str, Enum):
    """명령어 정책"""
    ALLOW = "allow"
    DENY = "deny"


class EntryType(str, Enum):
    """디렉토리 엔트리 타입"""
    FILE = "file"
    DIRECTORY = "directory"


class BuildPhase(str, Enum):
    """빌드 상태 머신"""
    IDLE = "idle"
    PROJECT_CREATED = "project_created"
    MODEL_QUERIED = "model_queried"
    EXECUTING_ACTIONS = "executing_actions"
    COMPLETED = "completed"
    FAILED = "failed"
