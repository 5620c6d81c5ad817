"""Logging / Startup 테스트"""

import pytest
import structlog

from backend.api.main import check_startup
from backend.app.core.config import settings
from backend.app.core.errors import ConfigError
from backend.app.core.logging import (
    MAX_FIELD_LENGTH,
    _renderer,
    clear_log_context,
    log_context,
    truncate_long_values,
)


class TestLoggingProcessors:

    def test_truncates_long_fields(self):
        event = {"event": "File written", "content": "x" * (MAX_FIELD_LENGTH + 10), "size": 510}

        result = truncate_long_values(None, "info", event)

        assert result["content"].startswith("x" * MAX_FIELD_LENGTH)
        assert result["content"].endswith(f"({MAX_FIELD_LENGTH + 10} chars)")
        assert result["size"] == 510

    def test_short_fields_untouched(self):
        event = {"event": "e" * 1000, "path": "index.html"}
        assert truncate_long_values(None, "info", dict(event)) == event

    def test_renderers(self):
        assert isinstance(_renderer("json"), structlog.processors.JSONRenderer)
        assert isinstance(_renderer("text"), structlog.dev.ConsoleRenderer)
        with pytest.raises(ValueError):
            _renderer("xml")

    def test_log_context(self):
        log_context(project_id="website_1_abcdef")
        assert structlog.contextvars.get_contextvars()["project_id"] == "website_1_abcdef"

        clear_log_context()
        assert structlog.contextvars.get_contextvars() == {}


class TestStartup:

    def test_missing_api_key_stops_startup(self, monkeypatch):
        monkeypatch.setattr(settings, "GROQ_API_KEY", None)

        with pytest.raises(ConfigError):
            check_startup()

    def test_startup_with_api_key(self, monkeypatch):
        monkeypatch.setattr(settings, "GROQ_API_KEY", "k")
        check_startup()
