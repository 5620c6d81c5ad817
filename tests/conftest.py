"""테스트 설정 및 공통 fixture"""

import os
import sys
import tempfile
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

# 프로젝트 루트를 Python 경로에 추가
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# settings 싱글톤이 만들어지기 전에 설정 (저장소/API 키)
os.environ.setdefault("WEBSITES_DIR", tempfile.mkdtemp(prefix="site-builder-tests-"))
os.environ.setdefault("GROQ_API_KEY", "test-key")
os.environ.setdefault("LOG_FORMAT", "text")

from backend.app.site_builder.llm_manager import LLMClient  # noqa: E402
from backend.app.site_builder.orchestrator import BuildOrchestrator, OrchestratorConfig  # noqa: E402
from backend.app.site_builder.projects import ProjectStore  # noqa: E402
from backend.app.site_builder.tools import ActionExecutor, ExecutionLimits  # noqa: E402
from tests.helpers import PREVIEW_BASE, make_reply  # noqa: E402


@pytest.fixture
def store(tmp_path):
    """tmp_path 기반 프로젝트 저장소"""
    return ProjectStore(base_dir=tmp_path / "websites", preview_base_url=PREVIEW_BASE)


@pytest.fixture
def context(store):
    """새 프로젝트 컨텍스트"""
    return store.create()


@pytest.fixture
def limits():
    """테스트용 작은 실행 제한값"""
    return ExecutionLimits(
        max_file_bytes=1024,
        command_timeout_sec=2.0,
        command_max_output_bytes=4096,
    )


@pytest.fixture
def executor(limits):
    return ActionExecutor(limits=limits)


@pytest.fixture
def fake_llm():
    """AsyncMock 기반 LLM 클라이언트 (기본: 액션 없는 응답)"""
    client = MagicMock(spec=LLMClient)
    client.complete = AsyncMock(return_value=make_reply(content="Nothing to build"))
    client.report_tool_result = AsyncMock(return_value=None)
    client.is_configured = True
    return client


@pytest.fixture
def orchestrator(fake_llm, store, executor):
    return BuildOrchestrator(
        llm_client=fake_llm,
        store=store,
        executor=executor,
        config=OrchestratorConfig(max_model_rounds=1, report_tool_results=False),
    )
