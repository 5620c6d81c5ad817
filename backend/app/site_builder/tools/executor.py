"""Action Executor

ToolCall 1건을 프로젝트 컨텍스트에 대해 실행하고 ExecutionRecord를 돌려준다.
호출 밖으로 예외를 던지지 않는다.
"""

import json
from typing import Any, Optional

from backend.app.core.errors import BuilderError, ErrorCode
from backend.app.core.logging import get_logger
from backend.app.site_builder.models import (
    ExecutionRecord,
    ProjectContext,
    ToolCall,
    ToolName,
    ToolResult,
)
from backend.app.site_builder.tools import actions  # noqa: F401  (registers built-in actions)
from backend.app.site_builder.tools.base_tool import (
    BaseAction,
    ExecutionLimits,
    create_action,
    get_registered_actions,
    printable,
)
from backend.app.site_builder.tools.policy import CommandPolicyTable

logger = get_logger(__name__)


def parse_arguments(raw: Any) -> dict[str, Any]:
    """모델이 보낸 arguments JSON 파싱

    Raises:
        ValueError: JSON 객체가 아닌 경우
    """
    if isinstance(raw, dict):
        return raw
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        return {}
    parsed = json.loads(raw)
    if not isinstance(parsed, dict):
        raise ValueError("Tool arguments must be a JSON object")
    return parsed


def _failure(error: str, code: ErrorCode, echo: Optional[dict[str, Any]] = None) -> ToolResult:
    return ToolResult(success=False, error=error, code=code.value, **(echo or {}))


class ActionExecutor:
    """액션 실행기

    Args:
        limits: 실행 제한값
        policy: 명령어 정책 테이블 (기본값: YAML 테이블)
    """

    def __init__(
        self,
        limits: Optional[ExecutionLimits] = None,
        policy: Optional[CommandPolicyTable] = None,
    ):
        self.limits = limits or ExecutionLimits()
        self._actions: dict[str, BaseAction] = {
            name: create_action(name, limits=self.limits, policy=policy)
            for name in get_registered_actions()
        }

    @property
    def action_names(self) -> list[str]:
        return list(self._actions.keys())

    async def execute(self, context: ProjectContext, call: ToolCall) -> ExecutionRecord:
        """ToolCall 실행

        Args:
            context: 이 빌드의 프로젝트 컨텍스트
            call: 모델이 요청한 액션

        Returns:
            (tool, args, result) 기록. 실패도 result.success=False로 담긴다.
        """
        tool = printable(call.name)
        try:
            args = parse_arguments(call.arguments)
            recorded = printable(args)
        except (ValueError, RecursionError) as e:
            # json.JSONDecodeError is a ValueError, deep nesting raises RecursionError
            error = str(e) if isinstance(e, ValueError) else "Tool arguments are nested too deeply"
            logger.warning("Tool arguments could not be parsed", tool=tool, error=printable(error))
            return ExecutionRecord(
                tool=tool,
                args=None,
                result=_failure(printable(error), ErrorCode.TOOL_ARGUMENTS_INVALID),
            )

        result = await self.run(context, call.name, args)
        return ExecutionRecord(tool=tool, args=recorded, result=result)

    async def run(self, context: ProjectContext, name: str, args: dict[str, Any]) -> ToolResult:
        action = self._actions.get(name)
        if action is None:
            return _failure(printable(f"Unknown tool: {name}"), ErrorCode.TOOL_NOT_FOUND)

        echo_value = args.get(action.echo_field)
        if echo_value is None and action.name == ToolName.LIST_DIRECTORY:
            echo_value = "."
        echo = {action.echo_field: printable(echo_value)} if isinstance(echo_value, str) else {}

        try:
            action.validate_input(args)
            result = await action.run(context, **action.call_kwargs(args))
            logger.debug("Action succeeded", tool=name)
            return result

        except BuilderError as e:
            logger.warning(
                "Action failed",
                tool=name,
                error_code=e.code.value,
                error_message=e.message,
                category=e.category.value,
            )
            return _failure(printable(e.message), e.code, echo)

        except OSError as e:
            logger.warning("Action filesystem error", tool=name, error=str(e))
            return _failure(printable(str(e)), ErrorCode.FILESYSTEM_ERROR, echo)

        except Exception as e:
            logger.exception("Unexpected action error", tool=name)
            return _failure(printable(str(e)), ErrorCode.INTERNAL_ERROR, echo)
