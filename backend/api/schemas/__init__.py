"""API Schemas

API 요청/응답 스키마
"""

from backend.api.schemas.request import BuildRequest
from backend.api.schemas.response import (
    BuildErrorResponse,
    ErrorResponse,
    HealthDetailResponse,
    HealthResponse,
    NotFoundResponse,
    WebsiteListResponse,
)

__all__ = [
    # Request
    "BuildRequest",
    # Response
    "HealthResponse",
    "HealthDetailResponse",
    "WebsiteListResponse",
    "ErrorResponse",
    "BuildErrorResponse",
    "NotFoundResponse",
]
