"""Application Configuration

pydantic-settings 기반 환경 설정
"""

from pathlib import Path
from typing import Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from backend.app.core.errors import ConfigError, ErrorCode

# Repository root (backend/app/core/config.py -> ../../..)
BASE_DIR = Path(__file__).resolve().parent.parent.parent.parent

MiB = 1024 * 1024


class Settings(BaseSettings):
    """애플리케이션 설정"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # === App ===
    APP_NAME: str = "Site Builder Agent"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    ENVIRONMENT: str = "development"  # development, staging, production

    # === Server ===
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    PREVIEW_PORT: int = 5000
    PREVIEW_BASE_URL: Optional[str] = None

    # === Project Store ===
    WEBSITES_DIR: Path = BASE_DIR / "websites"

    # === LLM ===
    GROQ_API_KEY: Optional[str] = Field(
        None, validation_alias=AliasChoices("GROQ_API_KEY", "LLM_API_KEY")
    )
    LLM_BASE_URL: str = "https://api.groq.com/openai/v1"
    LLM_MODEL: str = "llama-3.3-70b-versatile"
    LLM_TEMPERATURE: float = 0.1
    LLM_TIMEOUT_SEC: float = 120.0
    LLM_REPORT_TOOL_RESULTS: bool = False

    # === Build ===
    MAX_MODEL_ROUNDS: int = Field(1, ge=1, le=10)
    MAX_PROMPT_LENGTH: int = 2000

    # === Execution ===
    MAX_FILE_BYTES: int = MiB
    COMMAND_TIMEOUT_SEC: float = 30.0
    COMMAND_MAX_OUTPUT_BYTES: int = MiB

    # === Logging ===
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "json"  # json, text

    # === CORS ===
    CORS_ORIGINS: list[str] = ["http://localhost:5173", "http://localhost:3000"]

    @property
    def preview_base_url(self) -> str:
        """미리보기 서버 기본 URL (끝의 / 제외)"""
        if self.PREVIEW_BASE_URL:
            return self.PREVIEW_BASE_URL.rstrip("/")
        return f"http://localhost:{self.PREVIEW_PORT}"

    def require_api_key(self) -> str:
        """모델 API 키 반환, 없으면 ConfigError"""
        if not self.GROQ_API_KEY:
            raise ConfigError(
                ErrorCode.CONFIG_MISSING_API_KEY,
                "GROQ_API_KEY environment variable is required",
            )
        return self.GROQ_API_KEY


# Singleton
settings = Settings()
