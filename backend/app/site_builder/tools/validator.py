"""Action Validator

실행 전에 명령어와 경로를 검증한다. 실패는 ValidationError로 올라가고
executor가 실패 ToolResult로 바꾼다.
"""

import posixpath
import re
from pathlib import Path
from typing import Optional

from backend.app.core.errors import ErrorCode, ValidationError
from backend.app.site_builder.models import ProjectContext
from backend.app.site_builder.tools.policy import CommandPolicyTable, get_policy_table

# drive-qualified paths ("C:", "C:/x"); "a:b.html" stays a plain file name
_DRIVE_PATH = re.compile(r"^[A-Za-z]:(/|$)")


def command_name(command: str) -> str:
    """명령어 문자열의 첫 토큰 (프로그램 이름)"""
    parts = command.strip().split(maxsplit=1)
    return parts[0] if parts else ""


def validate_command(command: str, policy: Optional[CommandPolicyTable] = None) -> str:
    """명령어 검증

    Args:
        command: 모델이 요청한 명령어 문자열
        policy: 명령어 정책 테이블 (기본값: YAML 테이블)

    Returns:
        검증된 명령어 이름

    Raises:
        ValidationError: 차단 목록에 있거나 허용 목록에 없는 명령어
    """
    policy = policy or get_policy_table()
    name = command_name(command)

    if policy.is_denied(name):
        raise ValidationError(
            ErrorCode.COMMAND_BLOCKED,
            f"Command '{name}' is not allowed for security reasons",
            details={"command": name},
        )

    if not policy.is_allowed(name):
        raise ValidationError(
            ErrorCode.COMMAND_NOT_ALLOWED,
            f"Command not allowed: {name}",
            details={"command": name},
        )

    return name


def sanitize_path(file_path: str) -> str:
    """상대 경로 정규화

    절대 경로와 '..' 세그먼트를 포함하는 경로를 거부한다.

    Returns:
        정규화된 POSIX 상대 경로 ("." = 프로젝트 루트)

    Raises:
        ValidationError: 잘못된 경로
    """
    if not isinstance(file_path, str) or "\x00" in file_path:
        raise ValidationError(ErrorCode.PATH_INVALID, "Invalid file path", details={"path": file_path})

    candidate = file_path.replace("\\", "/")

    if candidate.startswith("/") or _DRIVE_PATH.match(candidate):
        raise ValidationError(
            ErrorCode.PATH_TRAVERSAL,
            "Invalid file path: absolute paths are not allowed",
            details={"path": file_path},
        )

    # reject any parent segment, even one that normalizes away
    if ".." in candidate.split("/"):
        raise ValidationError(
            ErrorCode.PATH_TRAVERSAL,
            "Invalid file path: directory traversal not allowed",
            details={"path": file_path},
        )

    return posixpath.normpath(candidate) if candidate else "."


def resolve_in_project(context: ProjectContext, file_path: str) -> Path:
    """경로를 프로젝트 디렉토리 아래로 해석

    정규화 후에도 심볼릭 링크 등으로 루트를 벗어나면 거부한다.
    """
    relative = sanitize_path(file_path)
    root = context.root.resolve()
    resolved = (root / relative).resolve()

    if resolved != root and not resolved.is_relative_to(root):
        raise ValidationError(
            ErrorCode.PATH_TRAVERSAL,
            f"Path traversal blocked: {file_path!r} resolves outside the project",
            details={"path": file_path},
        )

    return resolved


def validate_prompt(user_prompt: object, max_length: int) -> str:
    """빌드 요청 프롬프트 검증

    Raises:
        ValidationError: 비어 있거나 문자열이 아니거나 max_length 초과
    """
    if not isinstance(user_prompt, str) or not user_prompt.strip():
        raise ValidationError(ErrorCode.PROMPT_INVALID, "Valid userPrompt is required")

    if len(user_prompt) > max_length:
        raise ValidationError(
            ErrorCode.PROMPT_TOO_LONG,
            f"Prompt too long (max {max_length} characters)",
            details={"length": len(user_prompt), "max_length": max_length},
        )

    return user_prompt
