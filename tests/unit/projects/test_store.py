"""Project Store 테스트"""

import re

import pytest

from backend.app.core.errors import ErrorCode, ExecutionError
from backend.app.site_builder.projects import INDEX_FILE, ProjectStore, generate_project_id
from tests.helpers import PREVIEW_BASE

PROJECT_ID_PATTERN = re.compile(r"^website_\d{13}_[a-z0-9]{6}$")


class TestProjectId:
    """프로젝트 ID 생성 테스트"""

    def test_format(self):
        assert PROJECT_ID_PATTERN.match(generate_project_id())

    def test_unique(self):
        ids = {generate_project_id() for _ in range(200)}
        assert len(ids) == 200


class TestProjectStore:
    """ProjectStore 테스트"""

    def test_creates_base_dir(self, tmp_path):
        base = tmp_path / "nested" / "websites"
        ProjectStore(base_dir=base, preview_base_url=PREVIEW_BASE)
        assert base.is_dir()

    def test_create(self, store):
        context = store.create()

        assert PROJECT_ID_PATTERN.match(context.project_id)
        assert context.root.is_dir()
        assert context.root == store.path_for(context.project_id).resolve()
        assert list(context.root.iterdir()) == []

    def test_create_failure(self, store, monkeypatch):
        monkeypatch.setattr(
            "backend.app.site_builder.projects.store.generate_project_id",
            lambda: "website_1_dupdup",
        )
        store.create()

        with pytest.raises(ExecutionError) as exc_info:
            store.create()
        assert exc_info.value.code == ErrorCode.PROJECT_CREATE_FAILED

    def test_has_index(self, store, context):
        assert store.has_index(context.project_id) is False
        (context.root / INDEX_FILE).write_text("<html></html>", encoding="utf-8")
        assert store.has_index(context.project_id) is True

    def test_index_must_be_a_file(self, store, context):
        (context.root / INDEX_FILE).mkdir()
        assert store.has_index(context.project_id) is False

    def test_preview_url(self, store):
        assert store.preview_url("website_1_abcdef") == f"{PREVIEW_BASE}/website_1_abcdef/"

    def test_preview_url_strips_trailing_slash(self, tmp_path):
        store = ProjectStore(base_dir=tmp_path, preview_base_url="http://preview.test/")
        assert store.preview_url("p") == "http://preview.test/p/"

    def test_is_writable(self, store):
        assert store.is_writable() is True


class TestListWebsites:
    """웹사이트 목록 테스트"""

    def test_only_projects_with_index(self, store):
        with_index = store.create()
        store.create()
        (with_index.root / INDEX_FILE).write_text("x", encoding="utf-8")

        websites = store.list_websites()

        assert [w.project_id for w in websites] == [with_index.project_id]
        assert websites[0].preview_url == f"{PREVIEW_BASE}/{with_index.project_id}/"

    def test_ignores_plain_files(self, store):
        (store.base_dir / "stray.html").write_text("x", encoding="utf-8")
        assert store.list_websites() == []

    def test_newest_first(self, store):
        for _ in range(3):
            context = store.create()
            (context.root / INDEX_FILE).write_text("x", encoding="utf-8")

        websites = store.list_websites()
        keys = [(w.created, w.project_id) for w in websites]

        assert len(websites) == 3
        assert keys == sorted(keys, reverse=True)

    def test_custom_base_url(self, store, context):
        (context.root / INDEX_FILE).write_text("x", encoding="utf-8")

        websites = store.list_websites(base_url="")
        assert websites[0].preview_url == f"/{context.project_id}/"

    def test_camel_case_serialization(self, store, context):
        (context.root / INDEX_FILE).write_text("x", encoding="utf-8")

        data = store.list_websites()[0].model_dump(by_alias=True, mode="json")
        assert set(data) == {"projectId", "previewUrl", "created", "modified"}
