# tests/conftest.py
"""
Pytest configuration and fixtures.
"""

import os

import pytest

from app.config import get_settings
from app.services.collection_registry import reset_collection_registry

# Set test environment
os.environ.setdefault("ENVIRONMENT", "test")


@pytest.fixture(autouse=True)
def clean_state(monkeypatch):
    """Each test starts with no collections configured and fresh settings."""
    monkeypatch.delenv("REDLIB_COLLECTIONS", raising=False)
    monkeypatch.delenv("JSON_BODY_TRUNCATE_CHARS", raising=False)
    get_settings.cache_clear()
    reset_collection_registry()
    yield
    get_settings.cache_clear()
    reset_collection_registry()


@pytest.fixture
def set_collections(monkeypatch):
    """Set REDLIB_COLLECTIONS for the current test."""

    def _set(value: str) -> None:
        monkeypatch.setenv("REDLIB_COLLECTIONS", value)
        get_settings.cache_clear()
        reset_collection_registry()

    return _set
