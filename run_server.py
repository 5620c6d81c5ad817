"""서버 실행 스크립트

API 서버(PORT)와 미리보기 서버(PREVIEW_PORT)를 한 프로세스에서 함께 띄웁니다.

사용법:
    python run_server.py
"""

import asyncio

import uvicorn
from backend.app.core.config import settings


async def serve() -> None:
    api = uvicorn.Server(
        uvicorn.Config(
            "backend.api.main:app",
            host=settings.HOST,
            port=settings.PORT,
            log_level="info",
        )
    )
    preview = uvicorn.Server(
        uvicorn.Config(
            "backend.api.preview:app",
            host=settings.HOST,
            port=settings.PREVIEW_PORT,
            log_level="info",
        )
    )
    await asyncio.gather(api.serve(), preview.serve())


if __name__ == "__main__":
    asyncio.run(serve())
