"""Health Check Routes"""

import platform
import sys
import time
from typing import Any

from fastapi import APIRouter, Depends

from backend.api.schemas.response import HealthDetailResponse, HealthResponse
from backend.app.core.config import settings
from backend.app.core.logging import get_logger
from backend.app.site_builder.llm_manager import LLMClient, get_llm_client
from backend.app.site_builder.models import utc_now_iso
from backend.app.site_builder.projects import ProjectStore, get_project_store

router = APIRouter(prefix="/health", tags=["Health"])
logger = get_logger(__name__)

_STARTED_AT = time.monotonic()


def _check_store(store: ProjectStore) -> dict[str, Any]:
    """프로젝트 저장소 쓰기 가능 여부"""
    if store.is_writable():
        return {"status": "ok", "message": f"Writable: {store.base_dir}"}
    return {"status": "error", "message": f"Not writable: {store.base_dir}"}


def _check_llm(client: LLMClient) -> dict[str, Any]:
    """LLM 자격 증명 설정 여부 (실제 호출 X)"""
    if client.is_configured:
        return {"status": "ok", "message": f"Model: {client.config.model}"}
    return {"status": "error", "message": "LLM API key not configured"}


def _health() -> HealthResponse:
    return HealthResponse(
        status="healthy",
        timestamp=utc_now_iso(),
        uptime=round(time.monotonic() - _STARTED_AT, 3),
        platform=sys.platform,
        python_version=platform.python_version(),
        version=settings.APP_VERSION,
    )


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """기본 헬스체크"""
    return _health()


@router.get("/live", response_model=HealthResponse)
async def liveness_check() -> HealthResponse:
    """Liveness 체크 (프로세스 생존 확인)"""
    return _health()


@router.get("/ready", response_model=HealthDetailResponse)
async def readiness_check(
    store: ProjectStore = Depends(get_project_store),
    llm_client: LLMClient = Depends(get_llm_client),
) -> HealthDetailResponse:
    """Readiness 체크 (의존성 확인)"""
    checks = {
        "store": _check_store(store),
        "llm": _check_llm(llm_client),
    }

    statuses = [c["status"] for c in checks.values()]
    overall_status = "healthy" if all(s == "ok" for s in statuses) else "degraded"
    if overall_status != "healthy":
        logger.warning("Readiness degraded", checks=checks)

    return HealthDetailResponse(
        status=overall_status,
        version=settings.APP_VERSION,
        timestamp=utc_now_iso(),
        checks=checks,
    )
