"""
Unit Tests for settings, logging and error types
"""
import json
import logging

import pytest
from pydantic import ValidationError

from app.core.config import Settings
from app.core.exceptions import InvalidRouteRequestError, VenueNotFoundError
from app.core.logging_config import (
    ContextualFormatter,
    JSONFormatter,
    TEXT_FORMAT,
    set_request_id,
    setup_logging,
)


class TestSettings:

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        monkeypatch.delenv("CAMPUS_DATA_PATH", raising=False)

        config = Settings(_env_file=None)

        assert config.APP_NAME == "wits-campus-map"
        assert config.LOG_LEVEL == "INFO"
        assert config.CAMPUS_DATA_PATH is None
        assert config.NEARBY_DEFAULT_LIMIT == 10

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("LOG_JSON", "true")

        config = Settings(_env_file=None)

        assert config.LOG_LEVEL == "DEBUG"
        assert config.LOG_JSON is True

    def test_rejects_unknown_log_level(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "chatty")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_rejects_bad_nearby_limit(self, monkeypatch):
        monkeypatch.setenv("NEARBY_DEFAULT_LIMIT", "0")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)


class TestLogging:

    def _record(self, **extra) -> logging.LogRecord:
        record = logging.LogRecord("app.test", logging.INFO, __file__, 1, "hello %s", ("world",), None)
        for key, value in extra.items():
            setattr(record, key, value)
        return record

    def test_json_formatter(self):
        set_request_id("abc123")

        payload = json.loads(JSONFormatter().format(self._record(duration_ms=1.5)))

        assert payload["message"] == "hello world"
        assert payload["level"] == "INFO"
        assert payload["request_id"] == "abc123"
        assert payload["duration_ms"] == 1.5
        set_request_id("")

    def test_contextual_formatter_marks_missing_request_id(self):
        set_request_id("")

        line = ContextualFormatter(TEXT_FORMAT).format(self._record())

        assert "[-] hello world" in line

    def test_setup_logging_replaces_handlers(self, monkeypatch):
        monkeypatch.setenv("LOG_JSON", "true")
        config = Settings(_env_file=None)

        setup_logging(config)
        root = setup_logging(config)

        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, JSONFormatter)


class TestExceptions:

    def test_venue_not_found(self):
        err = VenueNotFoundError("nowhere", field="start_venue_id")

        assert err.status_code == 404
        assert err.to_dict() == {
            "code": "VENUE_NOT_FOUND",
            "message": "Venue not found: nowhere",
            "details": {"start_venue_id": "nowhere"},
        }

    def test_invalid_route_request(self):
        err = InvalidRouteRequestError("Start and destination cannot be the same.")

        assert err.status_code == 400
        assert err.code == "INVALID_ROUTE_REQUEST"
        assert err.details == {}
