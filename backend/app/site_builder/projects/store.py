"""Project Store - 생성된 웹사이트 디렉토리 저장소

저장 경로: {WEBSITES_DIR}/{project_id}/
프로젝트는 빌드마다 새로 만들어지며 자동으로 삭제되지 않는다.
"""

import os
import secrets
import string
import time
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from backend.app.core.config import settings
from backend.app.core.errors import ErrorCode, ExecutionError
from backend.app.core.logging import get_logger
from backend.app.site_builder.models import ProjectContext, WebsiteInfo

logger = get_logger(__name__)

INDEX_FILE = "index.html"
PROJECT_ID_PREFIX = "website"

_SUFFIX_ALPHABET = string.ascii_lowercase + string.digits
_SUFFIX_LENGTH = 6


def generate_project_id() -> str:
    """website_<epoch-millis>_<6 base36 chars>"""
    millis = int(time.time() * 1000)
    suffix = "".join(secrets.choice(_SUFFIX_ALPHABET) for _ in range(_SUFFIX_LENGTH))
    return f"{PROJECT_ID_PREFIX}_{millis}_{suffix}"


def _created_at(stat: os.stat_result) -> datetime:
    # st_birthtime is not available on every platform
    ts = getattr(stat, "st_birthtime", None) or stat.st_ctime
    return datetime.fromtimestamp(ts, tz=timezone.utc)


class ProjectStore:
    """프로젝트 디렉토리 관리

    Args:
        base_dir: 저장소 루트 (기본값: settings.WEBSITES_DIR)
        preview_base_url: 미리보기 서버 URL (기본값: settings.preview_base_url)
    """

    def __init__(
        self,
        base_dir: Optional[Path] = None,
        preview_base_url: Optional[str] = None,
    ):
        self.base_dir = Path(base_dir or settings.WEBSITES_DIR)
        self.preview_base_url = (preview_base_url or settings.preview_base_url).rstrip("/")
        self.base_dir.mkdir(parents=True, exist_ok=True)

    def path_for(self, project_id: str) -> Path:
        return self.base_dir / project_id

    def create(self) -> ProjectContext:
        """새 프로젝트 디렉토리 생성

        Raises:
            ExecutionError: 디렉토리 생성 실패
        """
        project_id = generate_project_id()
        root = self.path_for(project_id)
        try:
            root.mkdir(parents=True, exist_ok=False)
        except OSError as e:
            raise ExecutionError(
                ErrorCode.PROJECT_CREATE_FAILED,
                f"Failed to create project directory: {e}",
                details={"project_id": project_id},
            ) from e

        logger.info("Project created", project_id=project_id, path=str(root))
        return ProjectContext(project_id=project_id, root=root.resolve())

    def has_index(self, project_id: str) -> bool:
        return (self.path_for(project_id) / INDEX_FILE).is_file()

    def preview_url(self, project_id: str) -> str:
        return f"{self.preview_base_url}/{project_id}/"

    def list_websites(self, base_url: Optional[str] = None) -> list[WebsiteInfo]:
        """index.html이 있는 프로젝트 목록 (최신순)

        Args:
            base_url: 미리보기 URL 접두사 (기본값: self.preview_base_url)
        """
        prefix = self.preview_base_url if base_url is None else base_url.rstrip("/")
        websites: list[WebsiteInfo] = []

        if not self.base_dir.exists():
            return websites

        for entry in self.base_dir.iterdir():
            if not entry.is_dir() or not (entry / INDEX_FILE).is_file():
                continue
            stat = entry.stat()
            websites.append(
                WebsiteInfo(
                    project_id=entry.name,
                    preview_url=f"{prefix}/{entry.name}/",
                    created=_created_at(stat),
                    modified=datetime.fromtimestamp(stat.st_mtime, tz=timezone.utc),
                )
            )

        websites.sort(key=lambda w: (w.created, w.project_id), reverse=True)
        return websites

    def is_writable(self) -> bool:
        return self.base_dir.is_dir() and os.access(self.base_dir, os.W_OK)


# 싱글톤 인스턴스
_store: Optional[ProjectStore] = None


def get_project_store() -> ProjectStore:
    """ProjectStore 싱글톤 반환"""
    global _store

    if _store is None:
        _store = ProjectStore()

    return _store
