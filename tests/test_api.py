# tests/test_api.py
"""
Contract tests for JSON API responses served through FastAPI.
"""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.schemas.json_api import SubredditResponse
from app.schemas.reddit import Post, Subreddit
from app.services import collection_registry
from app.services.json_response import (
    default_truncate_limit,
    json_error,
    json_response,
    truncate_post_bodies,
)


def build_app() -> FastAPI:
    app = FastAPI()

    @app.get("/c/{name}")
    def collection(name: str):
        target = collection_registry.resolve(name)
        if target is None:
            return json_error("not found", 404)

        posts = [
            Post(id=str(i), title=sub, author="a", subreddit=sub, permalink=f"/r/{sub}/", body="x" * 500)
            for i, sub in enumerate(target.split("+"))
        ]
        truncate_post_bodies(posts, default_truncate_limit())
        return json_response(SubredditResponse(subreddit=Subreddit(name=target), posts=posts))

    @app.get("/broken")
    def broken():
        return json_response({"value": object()})

    return app


@pytest.fixture
def client():
    """Create test client."""
    return TestClient(build_app())


class TestEnvelopeContract:
    """Envelope responses as seen by an HTTP client."""

    def test_success_envelope(self, client, set_collections):
        set_collections("ai=singularity+claude")
        response = client.get("/c/ai")
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("application/json")

        data = response.json()
        assert data["error"] is None
        posts = data["data"]["posts"]
        assert [p["subreddit"] for p in posts] == ["singularity", "claude"]
        assert all(len(p["body"]) <= 400 and p["body_truncated"] is True for p in posts)

    def test_error_envelope(self, client):
        response = client.get("/c/missing")
        assert response.status_code == 404
        assert response.headers["content-type"].startswith("application/json")
        assert response.json() == {"data": None, "error": "not found"}

    def test_serialization_failure_sends_empty_body(self, client):
        response = client.get("/broken")
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("application/json")
        assert response.content == b""
