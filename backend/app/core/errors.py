"""Error Codes and Exceptions

E1xxx: 입력 검증 (prompt / path / command)
E2xxx: 액션 실행 (subprocess / filesystem)
E3xxx: 업스트림 (LLM API)
E4xxx: 설정
E5xxx: 시스템
"""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel


class ErrorCategory(str, Enum):
    """에러 카테고리"""
    VALIDATION = "VALIDATION"  # E1xxx
    EXECUTION = "EXECUTION"    # E2xxx
    UPSTREAM = "UPSTREAM"      # E3xxx
    CONFIG = "CONFIG"          # E4xxx
    SYSTEM = "SYSTEM"          # E5xxx


class ErrorCode(str, Enum):
    """에러 코드"""

    # === E1xxx: Validation ===
    PROMPT_INVALID = "E1001"
    PROMPT_TOO_LONG = "E1002"
    COMMAND_BLOCKED = "E1101"
    COMMAND_NOT_ALLOWED = "E1102"
    PATH_INVALID = "E1201"
    PATH_TRAVERSAL = "E1202"
    TOOL_NOT_FOUND = "E1301"
    TOOL_ARGUMENTS_INVALID = "E1302"
    CONTENT_TOO_LARGE = "E1401"

    # === E2xxx: Execution ===
    COMMAND_FAILED = "E2001"
    COMMAND_TIMEOUT = "E2002"
    COMMAND_OUTPUT_LIMIT = "E2003"
    FILE_NOT_FOUND = "E2101"
    NOT_A_FILE = "E2102"
    NOT_A_DIRECTORY = "E2103"
    FILESYSTEM_ERROR = "E2104"

    # === E3xxx: Upstream ===
    LLM_API_ERROR = "E3001"
    LLM_TIMEOUT = "E3002"

    # === E4xxx: Config ===
    CONFIG_MISSING_API_KEY = "E4001"

    # === E5xxx: System ===
    PROJECT_CREATE_FAILED = "E5001"
    BUILD_FAILED = "E5002"
    INTERNAL_ERROR = "E5003"


ERROR_MESSAGES: dict[ErrorCode, str] = {
    # Validation
    ErrorCode.PROMPT_INVALID: "Valid userPrompt is required",
    ErrorCode.PROMPT_TOO_LONG: "Prompt too long",
    ErrorCode.COMMAND_BLOCKED: "Command is not allowed for security reasons",
    ErrorCode.COMMAND_NOT_ALLOWED: "Command not allowed",
    ErrorCode.PATH_INVALID: "Invalid file path",
    ErrorCode.PATH_TRAVERSAL: "Invalid file path: directory traversal not allowed",
    ErrorCode.TOOL_NOT_FOUND: "Unknown tool",
    ErrorCode.TOOL_ARGUMENTS_INVALID: "Invalid tool arguments",
    ErrorCode.CONTENT_TOO_LARGE: "File content too large",

    # Execution
    ErrorCode.COMMAND_FAILED: "Command failed",
    ErrorCode.COMMAND_TIMEOUT: "Command timed out",
    ErrorCode.COMMAND_OUTPUT_LIMIT: "Command output exceeded the buffer limit",
    ErrorCode.FILE_NOT_FOUND: "File does not exist",
    ErrorCode.NOT_A_FILE: "Path is not a file",
    ErrorCode.NOT_A_DIRECTORY: "Path is not a directory",
    ErrorCode.FILESYSTEM_ERROR: "Filesystem operation failed",

    # Upstream
    ErrorCode.LLM_API_ERROR: "Language model request failed",
    ErrorCode.LLM_TIMEOUT: "Language model request timed out",

    # Config
    ErrorCode.CONFIG_MISSING_API_KEY: "Model API credential is not configured",

    # System
    ErrorCode.PROJECT_CREATE_FAILED: "Failed to create project directory",
    ErrorCode.BUILD_FAILED: "Website build failed",
    ErrorCode.INTERNAL_ERROR: "Internal server error",
}


class ErrorDetail(BaseModel):
    """API 에러 응답 상세"""
    code: str
    message: str
    details: Optional[dict[str, Any]] = None


class BuilderError(Exception):
    """Base Builder Exception"""

    def __init__(
        self,
        code: ErrorCode,
        message: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        self.code = code
        self.message = message or ERROR_MESSAGES.get(code, "Unknown error")
        self.details = details
        super().__init__(self.message)

    @property
    def category(self) -> ErrorCategory:
        return _CATEGORY_BY_PREFIX.get(self.code.value[:2], ErrorCategory.SYSTEM)

    def to_detail(self) -> ErrorDetail:
        """Convert to API response format"""
        return ErrorDetail(
            code=self.code.value,
            message=self.message,
            details=self.details,
        )


class ValidationError(BuilderError):
    """Rejected input: prompt, path, command or tool arguments"""
    pass


class ExecutionError(BuilderError):
    """Subprocess or filesystem failure for a single action"""
    pass


class UpstreamError(BuilderError):
    """Language model call failure"""
    pass


class ConfigError(BuilderError):
    """Missing or invalid configuration"""
    pass


class BuildFailedError(BuilderError):
    """Build aborted after the project was created

    Carries the elapsed-time stats that go into the 500 response.
    """

    def __init__(
        self,
        message: str,
        stats: dict[str, Any],
        project_id: Optional[str] = None,
        cause_code: Optional[ErrorCode] = None,
    ):
        details: dict[str, Any] = {}
        if project_id:
            details["project_id"] = project_id
        if cause_code:
            details["cause"] = cause_code.value
        super().__init__(ErrorCode.BUILD_FAILED, message, details or None)
        self.stats = stats
        self.project_id = project_id


_CATEGORY_BY_PREFIX: dict[str, ErrorCategory] = {
    "E1": ErrorCategory.VALIDATION,
    "E2": ErrorCategory.EXECUTION,
    "E3": ErrorCategory.UPSTREAM,
    "E4": ErrorCategory.CONFIG,
    "E5": ErrorCategory.SYSTEM,
}
