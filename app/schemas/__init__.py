# app/schemas/__init__.py
"""
Pydantic schemas for JSON API payloads.
"""

from app.schemas.json_api import (
    DuplicatesResponse,
    JsonResponse,
    PostResponse,
    SearchResponse,
    SubredditResponse,
    UserResponse,
    WikiResponse,
)
from app.schemas.reddit import (
    Comment,
    Post,
    Subreddit,
    User,
)

__all__ = [
    "JsonResponse",
    "SubredditResponse",
    "PostResponse",
    "UserResponse",
    "SearchResponse",
    "WikiResponse",
    "DuplicatesResponse",
    # Reddit objects
    "Post",
    "Comment",
    "Subreddit",
    "User",
]
