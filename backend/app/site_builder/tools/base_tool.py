"""BaseAction - 모든 액션의 추상 기본 클래스

액션은 (프로젝트 컨텍스트, 인자) → ToolResult 함수다.
활성 프로젝트는 전역 상태가 아니라 매 호출마다 인자로 전달된다.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Type, TypeVar

from backend.app.core.config import settings
from backend.app.core.errors import ErrorCode, ValidationError
from backend.app.core.logging import get_logger
from backend.app.site_builder.models import ProjectContext, ToolName, ToolResult, ToolSpec
from backend.app.site_builder.tools.catalogue import get_tool_spec
from backend.app.site_builder.tools.policy import CommandPolicyTable, get_policy_table

logger = get_logger(__name__)

T = TypeVar("T", bound="BaseAction")

# Global registry for action classes (populated by register_action decorator)
_ACTION_CLASSES: Dict[str, Type["BaseAction"]] = {}


def printable(value: Any) -> Any:
    """UTF-8로 인코딩할 수 없는 문자(짝 없는 surrogate)를 '?'로 바꾼 사본

    dict/list는 재귀적으로 처리한다. 응답 JSON에 그대로 실을 수 있는 값만 남긴다.
    """
    if isinstance(value, str):
        try:
            value.encode("utf-8")
            return value
        except UnicodeEncodeError:
            return value.encode("utf-8", "replace").decode("utf-8")
    if isinstance(value, dict):
        return {printable(k): printable(v) for k, v in value.items()}
    if isinstance(value, list):
        return [printable(v) for v in value]
    return value


@dataclass(frozen=True)
class ExecutionLimits:
    """액션 실행 제한값"""

    max_file_bytes: int = settings.MAX_FILE_BYTES
    command_timeout_sec: float = settings.COMMAND_TIMEOUT_SEC
    command_max_output_bytes: int = settings.COMMAND_MAX_OUTPUT_BYTES


class BaseAction(ABC):
    """모든 액션의 추상 기본 클래스

    Attributes:
        name: 카탈로그 상의 액션 이름
        echo_field: 결과에 그대로 되돌려 줄 입력 필드 ("command" 또는 "path")

    Example:
        ```python
        @register_action(ToolName.READ_FILE)
        class ReadFileAction(BaseAction):
            name = ToolName.READ_FILE
            echo_field = "path"

            async def run(self, context, path: str) -> ToolResult:
                ...
        ```
    """

    name: ToolName
    echo_field: str = "path"

    def __init__(
        self,
        limits: Optional[ExecutionLimits] = None,
        policy: Optional[CommandPolicyTable] = None,
    ):
        self.limits = limits or ExecutionLimits()
        self._policy = policy

    @property
    def policy(self) -> CommandPolicyTable:
        if self._policy is None:
            self._policy = get_policy_table()
        return self._policy

    @property
    def spec(self) -> ToolSpec:
        spec = get_tool_spec(self.name.value)
        if spec is None:
            raise KeyError(f"Action '{self.name.value}' missing from the catalogue")
        return spec

    def validate_input(self, args: dict[str, Any]) -> None:
        """필수 인자 존재 여부와 문자열 타입 검증

        Raises:
            ValidationError: 누락되었거나 잘못된 타입의 인자
        """
        known = {p.name for p in self.spec.parameters}
        for param in self.spec.get_required_params():
            if param.name not in args or args[param.name] is None:
                raise ValidationError(
                    ErrorCode.TOOL_ARGUMENTS_INVALID,
                    f"Missing required argument '{param.name}' for {self.name.value}",
                )
        for key, value in args.items():
            if key in known and value is not None and not isinstance(value, str):
                raise ValidationError(
                    ErrorCode.TOOL_ARGUMENTS_INVALID,
                    f"Argument '{key}' for {self.name.value} must be a string",
                )
            if key in known and isinstance(value, str):
                try:
                    value.encode("utf-8")
                except UnicodeEncodeError:
                    raise ValidationError(
                        ErrorCode.TOOL_ARGUMENTS_INVALID,
                        f"Argument '{key}' for {self.name.value} is not valid UTF-8 text",
                    ) from None

    def call_kwargs(self, args: dict[str, Any]) -> dict[str, Any]:
        """카탈로그에 정의된 인자만 남긴다"""
        known = {p.name for p in self.spec.parameters}
        return {k: v for k, v in args.items() if k in known and v is not None}

    @abstractmethod
    async def run(self, context: ProjectContext, **kwargs: Any) -> ToolResult:
        """액션 실행

        실패는 BuilderError/OSError로 올리고, executor가 결과 객체로 바꾼다.
        """

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}(name='{self.name.value}')>"


def register_action(name: ToolName) -> Callable[[Type[T]], Type[T]]:
    """액션 클래스 등록 데코레이터"""

    def decorator(cls: Type[T]) -> Type[T]:
        if not issubclass(cls, BaseAction):
            raise TypeError(f"{cls.__name__} must inherit from BaseAction")

        _ACTION_CLASSES[name.value] = cls
        logger.debug("Registered action", name=name.value, cls=cls.__name__)
        return cls

    return decorator


def get_registered_actions() -> Dict[str, Type[BaseAction]]:
    """등록된 모든 액션 클래스 반환"""
    return _ACTION_CLASSES.copy()


def create_action(name: str, **kwargs: Any) -> BaseAction:
    """등록된 액션 인스턴스 생성

    Raises:
        KeyError: 등록되지 않은 액션
    """
    if name not in _ACTION_CLASSES:
        raise KeyError(f"Action '{name}' not registered. Available: {list(_ACTION_CLASSES.keys())}")

    return _ACTION_CLASSES[name](**kwargs)
