# app/schemas/json_api.py
"""
Schemas for the JSON API.

Every JSON endpoint answers with a JsonResponse envelope: `data` on success,
`error` on failure, never both. The payload models below are what goes into
`data` for each endpoint.
"""

from typing import Generic, TypeVar

from pydantic import BaseModel, Field, model_validator

from app.schemas.reddit import Comment, Post, Subreddit, User

T = TypeVar("T")


class JsonResponse(BaseModel, Generic[T]):
    """
    Wrapper for all JSON API responses.

    Exactly one of `data` / `error` is set. Both keys are always serialized,
    the unset one as null.
    """

    data: T | None = Field(None, description="Response payload on success")
    error: str | None = Field(None, description="Human-readable message on error")

    @model_validator(mode="after")
    def check_data_xor_error(self) -> "JsonResponse[T]":
        if (self.data is None) == (self.error is None):
            raise ValueError("exactly one of data or error must be set")
        return self

    @classmethod
    def ok(cls, data: T) -> "JsonResponse[T]":
        return cls(data=data, error=None)

    @classmethod
    def fail(cls, message: str) -> "JsonResponse[T]":
        return cls(data=None, error=message)


# -----------------------------------------------------------------------------
# Endpoint payloads
# -----------------------------------------------------------------------------


class SubredditResponse(BaseModel):
    """Subreddit listing page."""

    subreddit: Subreddit
    posts: list[Post] = Field(default_factory=list)
    after: str | None = Field(None, description="Pagination cursor for the next page")


class PostResponse(BaseModel):
    """Post page with its comment tree."""

    post: Post
    comments: list[Comment] = Field(default_factory=list)


class UserResponse(BaseModel):
    """User profile with their submissions."""

    user: User
    posts: list[Post] = Field(default_factory=list)
    after: str | None = None


class SearchResponse(BaseModel):
    """Search results."""

    posts: list[Post] = Field(default_factory=list)
    after: str | None = None


class WikiResponse(BaseModel):
    """Rendered wiki page."""

    subreddit: str
    page: str
    content: str


class DuplicatesResponse(BaseModel):
    """Other submissions of the same link."""

    post: Post
    duplicates: list[Post] = Field(default_factory=list)
