"""Build Routes

POST /api/build: 프롬프트 → 웹사이트 생성
"""

from fastapi import APIRouter, Depends

from backend.api.schemas import BuildErrorResponse, BuildRequest, ErrorResponse
from backend.app.core.logging import get_logger
from backend.app.site_builder.models import BuildResponse
from backend.app.site_builder.orchestrator import BuildOrchestrator, get_orchestrator

router = APIRouter(tags=["Build"])
logger = get_logger(__name__)


@router.post(
    "/build",
    response_model=BuildResponse,
    responses={
        400: {"model": ErrorResponse, "description": "프롬프트 검증 실패"},
        500: {"model": BuildErrorResponse, "description": "빌드 실패"},
    },
)
async def build_website(
    request: BuildRequest,
    orchestrator: BuildOrchestrator = Depends(get_orchestrator),
) -> BuildResponse:
    """웹사이트 빌드 (동기)

    모델이 요청한 액션을 모두 실행한 뒤 응답한다.
    개별 액션 실패는 executionResults에 기록되며 빌드는 성공으로 끝난다.
    ValidationError / BuildFailedError는 에러 핸들러가 변환한다.
    """
    return await orchestrator.build(request.user_prompt)
