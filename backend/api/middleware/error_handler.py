"""Error Handlers

BuilderError 계열 예외 → JSON 응답 `{success: false, error, ...}`
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.routing import APIRoute
from starlette.exceptions import HTTPException as StarletteHTTPException

from backend.api.schemas.response import BuildErrorResponse, ErrorResponse, NotFoundResponse
from backend.app.core.errors import (
    BuilderError,
    BuildFailedError,
    ErrorCategory,
    ErrorCode,
    ValidationError,
)
from backend.app.core.logging import get_logger

logger = get_logger(__name__)

_STATUS_BY_CATEGORY: dict[ErrorCategory, int] = {
    ErrorCategory.VALIDATION: 400,
    ErrorCategory.EXECUTION: 500,
    ErrorCategory.UPSTREAM: 502,
    ErrorCategory.CONFIG: 500,
    ErrorCategory.SYSTEM: 500,
}


def get_status_code(exc: BuilderError) -> int:
    """에러 카테고리에 따른 HTTP 상태 코드"""
    return _STATUS_BY_CATEGORY.get(exc.category, 500)


def available_endpoints(app: FastAPI) -> list[str]:
    """등록된 API 라우트 목록 ("METHOD /path")"""
    endpoints: list[str] = []
    for route in app.routes:
        if not isinstance(route, APIRoute) or not route.include_in_schema:
            continue
        for method in sorted(route.methods - {"HEAD", "OPTIONS"}):
            endpoints.append(f"{method} {route.path}")
    return endpoints


def _error_body(exc: BuilderError) -> ErrorResponse:
    """BuilderError → 응답 본문 (details는 로그에만 남긴다)"""
    detail = exc.to_detail()
    return ErrorResponse(error=detail.message, code=detail.code)


def _json(status_code: int, body: ErrorResponse) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(by_alias=True, exclude_none=True),
    )


def setup_error_handlers(app: FastAPI) -> None:
    """에러 핸들러 설정

    Args:
        app: FastAPI 앱
    """

    @app.exception_handler(ValidationError)
    async def validation_error_handler(
        request: Request,
        exc: ValidationError,
    ) -> JSONResponse:
        """입력 검증 실패 (400)"""
        logger.warning(
            "Request rejected",
            error_code=exc.code.value,
            message=exc.message,
            details=exc.details,
            path=request.url.path,
        )
        return _json(400, _error_body(exc))

    @app.exception_handler(BuildFailedError)
    async def build_failed_handler(
        request: Request,
        exc: BuildFailedError,
    ) -> JSONResponse:
        """빌드 실패 (500, 경과 시간 포함)"""
        return _json(
            500,
            BuildErrorResponse(
                error=exc.message,
                code=exc.code.value,
                stats=exc.stats,
                project_id=exc.project_id,
            ),
        )

    @app.exception_handler(BuilderError)
    async def builder_error_handler(
        request: Request,
        exc: BuilderError,
    ) -> JSONResponse:
        """기타 BuilderError"""
        logger.error(
            "Builder error",
            error_code=exc.code.value,
            message=exc.message,
            details=exc.details,
            path=request.url.path,
        )
        return _json(get_status_code(exc), _error_body(exc))

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """본문 파싱 실패 (400)"""
        logger.warning("Malformed request", path=request.url.path, errors=len(exc.errors()))
        return _json(
            400,
            ErrorResponse(error="Invalid request body", code=ErrorCode.PROMPT_INVALID.value),
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request,
        exc: StarletteHTTPException,
    ) -> JSONResponse:
        if exc.status_code == 404:
            return _json(
                404,
                NotFoundResponse(
                    error="Endpoint not found",
                    available_endpoints=available_endpoints(request.app),
                ),
            )
        return _json(exc.status_code, ErrorResponse(error=str(exc.detail)))

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """일반 예외 핸들러"""
        logger.exception("Unhandled exception", path=request.url.path, error=str(exc))
        return _json(
            500,
            ErrorResponse(
                error="Internal server error",
                code=ErrorCode.INTERNAL_ERROR.value,
            ),
        )
