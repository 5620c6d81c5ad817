"""Website Listing Routes"""

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from backend.api.schemas import WebsiteListResponse
from backend.app.site_builder.projects import ProjectStore, get_project_store

router = APIRouter(tags=["Websites"])


@router.get("/websites", response_model=WebsiteListResponse)
async def list_websites(
    store: ProjectStore = Depends(get_project_store),
) -> WebsiteListResponse:
    """index.html이 있는 프로젝트 목록 (최신순)"""
    websites = store.list_websites()
    return WebsiteListResponse(success=True, websites=websites, count=len(websites))


@router.get("/ping", response_class=PlainTextResponse)
async def ping() -> str:
    return "Site builder API is live"
