"""FastAPI Application

API 서버 진입점 (미리보기 서버는 backend.api.preview)

    POST /api/build      프롬프트 → 웹사이트
    GET  /api/websites   생성된 웹사이트 목록
    GET  /api/ping       liveness 문자열
    GET  /health[/live|/ready]
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend.api.middleware import setup_error_handlers
from backend.api.routes import build_router, health_router, websites_router
from backend.app.core.config import settings
from backend.app.core.logging import get_logger, setup_logging
from backend.app.site_builder.models import CommandPolicy
from backend.app.site_builder.projects import get_project_store
from backend.app.site_builder.tools import get_policy_table

logger = get_logger(__name__)


def check_startup() -> None:
    """기동 전 확인

    Raises:
        ConfigError: 모델 API 키 없음 (서버가 뜨지 않는다)
    """
    settings.require_api_key()

    store = get_project_store()
    policy = get_policy_table()

    logger.info(
        "Site builder ready",
        websites_dir=str(store.base_dir),
        preview_base_url=store.preview_base_url,
        model=settings.LLM_MODEL,
        max_model_rounds=settings.MAX_MODEL_ROUNDS,
        allowed_commands=policy.names(CommandPolicy.ALLOW),
        denied_commands=len(policy.names(CommandPolicy.DENY)),
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    setup_logging()
    logger.info(
        "Starting application",
        app_name=settings.APP_NAME,
        version=settings.APP_VERSION,
        environment=settings.ENVIRONMENT,
        port=settings.PORT,
    )

    check_startup()
    yield

    # 생성된 프로젝트는 그대로 남는다
    logger.info("Application shutdown complete")


def create_app() -> FastAPI:
    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="Prompt-to-website builder driven by LLM tool calls",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    setup_error_handlers(app)

    app.include_router(health_router)
    for router in (build_router, websites_router):
        app.include_router(router, prefix="/api")

    return app


app = create_app()
