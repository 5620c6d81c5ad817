"""Preview App 테스트"""

from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from backend.api.preview import create_preview_app, render_listing
from backend.app.site_builder.models import WebsiteInfo
from backend.app.site_builder.projects import INDEX_FILE


@pytest.fixture
def preview(store):
    return TestClient(create_preview_app(store))


class TestPreviewApp:
    """미리보기 서버 테스트"""

    def test_empty_listing(self, preview):
        response = preview.get("/")

        assert response.status_code == 200
        assert "text/html" in response.headers["content-type"]
        assert "No websites generated yet" in response.text

    def test_listing_links_projects(self, preview, store, context):
        (context.root / INDEX_FILE).write_text("<h1>Hi</h1>", encoding="utf-8")

        response = preview.get("/")

        assert f'href="/{context.project_id}/"' in response.text

    def test_serves_index(self, preview, context):
        (context.root / INDEX_FILE).write_text("<h1>Hi</h1>", encoding="utf-8")

        response = preview.get(f"/{context.project_id}/")

        assert response.status_code == 200
        assert response.text == "<h1>Hi</h1>"

    def test_serves_assets(self, preview, context):
        (context.root / "css").mkdir()
        (context.root / "css" / "style.css").write_text("body{}", encoding="utf-8")

        response = preview.get(f"/{context.project_id}/css/style.css")

        assert response.status_code == 200
        assert response.text == "body{}"

    def test_missing_file(self, preview, context):
        assert preview.get(f"/{context.project_id}/missing.html").status_code == 404

    def test_listing_escapes_html(self, store):
        html = render_listing([], title="<script>")
        assert "<script>" not in html

    def test_listing_shows_created_and_modified(self):
        created = datetime(2024, 5, 1, 9, 30, tzinfo=timezone.utc)
        modified = datetime(2024, 5, 2, 18, 5, tzinfo=timezone.utc)
        site = WebsiteInfo(
            project_id="website_1714555800000_abc123",
            preview_url="/website_1714555800000_abc123/",
            created=created,
            modified=modified,
        )

        html = render_listing([site])

        assert "created 2024-05-01T09:30:00+00:00" in html
        assert "modified 2024-05-02T18:05:00+00:00" in html
