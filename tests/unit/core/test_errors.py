"""Error / Config 테스트"""

import pytest

from backend.app.core.config import Settings
from backend.app.core.errors import (
    BuildFailedError,
    ConfigError,
    ErrorCategory,
    ErrorCode,
    UpstreamError,
    ValidationError,
)


class TestBuilderError:
    """BuilderError 계층 테스트"""

    def test_default_message(self):
        error = ValidationError(ErrorCode.PROMPT_INVALID)
        assert error.message == "Valid userPrompt is required"
        assert str(error) == "Valid userPrompt is required"

    @pytest.mark.parametrize(
        "code,category",
        [
            (ErrorCode.COMMAND_BLOCKED, ErrorCategory.VALIDATION),
            (ErrorCode.COMMAND_TIMEOUT, ErrorCategory.EXECUTION),
            (ErrorCode.LLM_API_ERROR, ErrorCategory.UPSTREAM),
            (ErrorCode.CONFIG_MISSING_API_KEY, ErrorCategory.CONFIG),
            (ErrorCode.INTERNAL_ERROR, ErrorCategory.SYSTEM),
        ],
    )
    def test_category(self, code, category):
        assert UpstreamError(code).category == category

    def test_to_detail(self):
        detail = ValidationError(ErrorCode.PATH_TRAVERSAL, details={"path": ".."}).to_detail()
        assert detail.code == "E1202"
        assert detail.details == {"path": ".."}

    def test_build_failed(self):
        error = BuildFailedError(
            "boom",
            stats={"executionTime": "5ms", "timestamp": "t"},
            project_id="website_1_abcdef",
            cause_code=ErrorCode.LLM_API_ERROR,
        )
        assert error.code == ErrorCode.BUILD_FAILED
        assert error.message == "boom"
        assert error.stats["executionTime"] == "5ms"
        assert error.details == {"project_id": "website_1_abcdef", "cause": "E3001"}


class TestSettings:
    """Settings 테스트"""

    def test_defaults(self, monkeypatch):
        for name in ("PORT", "PREVIEW_PORT", "PREVIEW_BASE_URL", "MAX_MODEL_ROUNDS"):
            monkeypatch.delenv(name, raising=False)
        settings = Settings(_env_file=None)

        assert settings.PORT == 3000
        assert settings.PREVIEW_PORT == 5000
        assert settings.preview_base_url == "http://localhost:5000"
        assert settings.MAX_FILE_BYTES == 1024 * 1024
        assert settings.MAX_MODEL_ROUNDS == 1
        assert settings.LLM_REPORT_TOOL_RESULTS is False

    def test_llm_api_key_alias(self, monkeypatch):
        monkeypatch.delenv("GROQ_API_KEY", raising=False)
        monkeypatch.setenv("LLM_API_KEY", "alias-key")

        assert Settings(_env_file=None).GROQ_API_KEY == "alias-key"

    def test_missing_api_key(self, monkeypatch):
        monkeypatch.delenv("GROQ_API_KEY", raising=False)
        monkeypatch.delenv("LLM_API_KEY", raising=False)

        with pytest.raises(ConfigError) as exc_info:
            Settings(_env_file=None).require_api_key()
        assert exc_info.value.code == ErrorCode.CONFIG_MISSING_API_KEY

    def test_preview_base_url_override(self, monkeypatch):
        monkeypatch.setenv("PREVIEW_BASE_URL", "https://sites.example.com/")
        assert Settings(_env_file=None).preview_base_url == "https://sites.example.com"
