"""Preview Application

생성된 웹사이트를 정적 파일로 서빙하는 별도 앱

    GET /                → 프로젝트 목록 (HTML)
    GET /{project_id}/   → {WEBSITES_DIR}/{project_id}/index.html
"""

from html import escape
from typing import Optional

from fastapi import FastAPI
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles

from backend.app.core.config import settings
from backend.app.core.logging import get_logger
from backend.app.site_builder.models import WebsiteInfo
from backend.app.site_builder.projects import ProjectStore, get_project_store

logger = get_logger(__name__)

_PAGE = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>{title}</title>
  <style>
    body {{ font-family: system-ui, sans-serif; margin: 2rem auto; max-width: 48rem; }}
    li {{ margin: 0.5rem 0; }}
    .meta {{ color: #666; font-size: 0.85rem; }}
  </style>
</head>
<body>
  <h1>{title}</h1>
  {body}
</body>
</html>
"""


def render_listing(websites: list[WebsiteInfo], title: str = "Generated Websites") -> str:
    """프로젝트 목록 HTML (상대 링크)"""
    if not websites:
        body = "<p>No websites generated yet.</p>"
    else:
        items = "\n".join(
            '    <li><a href="{href}">{name}</a> <span class="meta">created {created}, modified {modified}</span></li>'.format(
                href=escape(w.preview_url, quote=True),
                name=escape(w.project_id),
                created=escape(w.created.isoformat(timespec="seconds")),
                modified=escape(w.modified.isoformat(timespec="seconds")),
            )
            for w in websites
        )
        body = f"<ul>\n{items}\n  </ul>"
    return _PAGE.format(title=escape(title), body=body)


def create_preview_app(store: Optional[ProjectStore] = None) -> FastAPI:
    """Create preview application

    Args:
        store: 서빙할 프로젝트 저장소 (기본값: 싱글톤)
    """
    store = store or get_project_store()

    app = FastAPI(
        title=f"{settings.APP_NAME} Preview",
        version=settings.APP_VERSION,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    @app.get("/", response_class=HTMLResponse)
    async def index() -> str:
        # 목록 링크는 미리보기 서버 기준 상대 경로
        return render_listing(store.list_websites(base_url=""))

    app.mount("/", StaticFiles(directory=store.base_dir, html=True), name="websites")

    logger.debug("Preview app created", websites_dir=str(store.base_dir))
    return app


# Application instance
app = create_preview_app()
