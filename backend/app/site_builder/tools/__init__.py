"""Site Builder Tools - 액션 카탈로그, 검증, 실행

구조:
- tools/catalogue.py: 모델에 노출되는 고정 액션 목록
- tools/policy.py: YAML 명령어 허용/차단 테이블
- tools/validator.py: 명령어/경로 검증
- tools/base_tool.py: BaseAction 추상 클래스와 등록 데코레이터
- tools/actions.py: 내장 액션 4종
- tools/executor.py: ToolCall → ExecutionRecord
"""

from .base_tool import BaseAction, ExecutionLimits, create_action, printable, register_action
from .catalogue import TOOL_CATALOGUE, get_tool_spec, openai_tools
from .executor import ActionExecutor, parse_arguments
from .policy import CommandPolicyTable, get_policy_table
from .validator import (
    command_name,
    resolve_in_project,
    sanitize_path,
    validate_command,
    validate_prompt,
)

__all__ = [
    # Catalogue
    "TOOL_CATALOGUE",
    "get_tool_spec",
    "openai_tools",
    # Policy / validation
    "CommandPolicyTable",
    "get_policy_table",
    "command_name",
    "validate_command",
    "sanitize_path",
    "resolve_in_project",
    "validate_prompt",
    # Execution
    "ActionExecutor",
    "BaseAction",
    "ExecutionLimits",
    "create_action",
    "register_action",
    "parse_arguments",
    "printable",
]
