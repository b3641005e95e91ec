# tests/unit/test_logging_config.py
"""Tests for JSON log formatting."""

import json
import logging

import pytest

from app.config import get_settings
from app.logging_config import JSONFormatter, configure_from_settings, configure_logging


def make_record(message: str, **extra) -> logging.LogRecord:
    record = logging.LogRecord("app.test", logging.INFO, __file__, 1, message, None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestJSONFormatter:
    def test_basic_fields(self):
        data = json.loads(JSONFormatter().format(make_record("hello")))
        assert data["level"] == "INFO"
        assert data["logger"] == "app.test"
        assert data["message"] == "hello"
        assert data["timestamp"].endswith("Z")

    def test_known_extras_included(self):
        record = make_record("loaded", event="collections_loaded", collection_count=3)
        data = json.loads(JSONFormatter().format(record))
        assert data["event"] == "collections_loaded"
        assert data["collection_count"] == 3

    def test_unknown_extras_skipped(self):
        data = json.loads(JSONFormatter().format(make_record("x", secret="shh")))
        assert "secret" not in data


class TestConfigureLogging:
    @pytest.fixture(autouse=True)
    def restore_root(self):
        root = logging.getLogger()
        handlers, level = root.handlers[:], root.level
        yield
        root.handlers[:] = handlers
        root.setLevel(level)

    def test_installs_single_json_handler(self):
        configure_logging(json_format=True, level="debug")
        root = logging.getLogger()
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, JSONFormatter)
        assert root.level == logging.DEBUG

    def test_plain_format(self):
        configure_logging(json_format=False, level="WARNING")
        root = logging.getLogger()
        assert not isinstance(root.handlers[0].formatter, JSONFormatter)
        assert root.level == logging.WARNING

    def test_configure_from_settings(self, monkeypatch):
        monkeypatch.setenv("LOG_JSON", "false")
        monkeypatch.setenv("LOG_LEVEL", "error")
        get_settings.cache_clear()

        configure_from_settings()
        root = logging.getLogger()
        assert not isinstance(root.handlers[0].formatter, JSONFormatter)
        assert root.level == logging.ERROR
