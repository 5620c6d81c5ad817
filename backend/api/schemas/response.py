"""API Response Schemas"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from backend.app.site_builder.models import WebsiteInfo


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class HealthResponse(_CamelModel):
    """헬스체크 응답"""

    status: str = Field("healthy", description="상태")
    timestamp: str = Field(..., description="ISO-8601 UTC")
    uptime: float = Field(..., description="프로세스 가동 시간 (초)")
    platform: str = Field(..., description="sys.platform")
    python_version: str = Field(..., description="Python 버전")
    version: str = Field(..., description="앱 버전")


class HealthDetailResponse(_CamelModel):
    """상세 헬스체크 응답"""

    status: str = Field("healthy", description="상태")
    version: str = Field(..., description="앱 버전")
    timestamp: str = Field(..., description="ISO-8601 UTC")
    checks: dict[str, dict[str, Any]] = Field(default_factory=dict)


class WebsiteListResponse(_CamelModel):
    """생성된 웹사이트 목록"""

    success: bool = True
    websites: list[WebsiteInfo] = Field(default_factory=list)
    count: int = 0


class ErrorResponse(_CamelModel):
    """에러 응답"""

    success: bool = False
    error: str = Field(..., description="에러 메시지")
    code: Optional[str] = Field(None, description="에러 코드")


class BuildErrorResponse(ErrorResponse):
    """빌드 실패 응답 (경과 시간 포함)"""

    stats: dict[str, Any] = Field(default_factory=dict)
    project_id: Optional[str] = None


class NotFoundResponse(ErrorResponse):
    """알 수 없는 경로"""

    available_endpoints: list[str] = Field(default_factory=list)
