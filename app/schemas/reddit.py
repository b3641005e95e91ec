# app/schemas/reddit.py
"""
Schemas for the Reddit objects carried inside JSON API payloads.

These mirror what the page handlers already build for templates; only the
fields the JSON API exposes are modelled. Field names are serialized as-is.
"""

from pydantic import BaseModel, ConfigDict, Field


class Post(BaseModel):
    """A submission as shown in listings and on the post page."""

    model_config = ConfigDict(from_attributes=True, validate_assignment=True)

    id: str = Field(..., description="Reddit base36 ID")
    title: str = Field(..., description="Post title")
    author: str = Field(..., description="Author username ([deleted] when gone)")
    subreddit: str = Field(..., description="Subreddit name without the r/ prefix")
    permalink: str = Field(..., description="Path of the post page")
    url: str | None = Field(None, description="Link target for link posts")
    body: str = Field("", description="Self text (HTML)")
    score: int = Field(0, description="Net upvotes")
    num_comments: int = Field(0, description="Comment count")
    created: float = Field(0, description="Creation time (unix seconds, UTC)")
    nsfw: bool = False
    flair: str | None = None

    # Set to True only when the JSON layer shortened `body`
    body_truncated: bool | None = Field(None, description="True when body was shortened for the response")


class Comment(BaseModel):
    """A comment, with nested replies."""

    model_config = ConfigDict(from_attributes=True, validate_assignment=True)

    id: str
    author: str
    body: str = Field("", description="Comment text (HTML)")
    score: int = 0
    created: float = 0
    depth: int = Field(0, description="Nesting depth, 0 for top-level")
    replies: list["Comment"] = Field(default_factory=list)

    body_truncated: bool | None = Field(None, description="True when body was shortened for the response")


class Subreddit(BaseModel):
    """Subreddit metadata shown above a listing."""

    model_config = ConfigDict(from_attributes=True)

    name: str
    title: str = ""
    description: str = ""
    members: int = 0
    active: int = 0
    icon: str | None = None
    nsfw: bool = False


class User(BaseModel):
    """A user profile header."""

    model_config = ConfigDict(from_attributes=True)

    name: str
    title: str = ""
    icon: str | None = None
    karma: int = 0
    created: float = 0
    banner: str | None = None
    description: str = ""
