"""
JSON API response helpers.

Builds the {data, error} envelope responses and shortens long post/comment
bodies before they are wrapped. Serialization is best-effort: if a payload
can't be encoded the client still gets the status code and content type,
with an empty body.
"""

import logging
from collections.abc import Iterable
from typing import Any, Optional, Protocol

from fastapi import Response
from pydantic import ValidationError
from pydantic_core import PydanticSerializationError

from app.config import get_settings
from app.constants import HttpDefaults, TextLimits
from app.schemas.json_api import JsonResponse
from app.utils.text import truncate_text

logger = logging.getLogger(__name__)

# Default body limit for endpoints that truncate without an explicit value
DEFAULT_TRUNCATE_LIMIT = TextLimits.JSON_BODY_TRUNCATE_CHARS


class TruncatableContent(Protocol):
    """Any payload object with a long-form body and a truncation flag."""

    body: str
    body_truncated: Optional[bool]


# -----------------------------------------------------------------------------
# Envelopes
# -----------------------------------------------------------------------------


def _serialize(build_envelope, status_code: int) -> bytes:
    try:
        return build_envelope().model_dump_json().encode("utf-8")
    except (PydanticSerializationError, ValidationError, TypeError, ValueError) as e:
        logger.warning(
            f"Failed to serialize JSON response, sending empty body: {e}",
            extra={"event": "json_serialize_failed", "status_code": status_code},
            exc_info=True,
        )
        return b""


def _build(body: bytes, status_code: int) -> Response:
    return Response(content=body, status_code=status_code, media_type=HttpDefaults.JSON_MEDIA_TYPE)


def json_response(data: Any) -> Response:
    """Build a successful JSON response: {"data": data, "error": null}, status 200."""
    status_code = HttpDefaults.SUCCESS_STATUS
    body = _serialize(lambda: JsonResponse(data=data, error=None), status_code)
    return _build(body, status_code)


def json_error(message: str, status_code: int) -> Response:
    """Build an error JSON response: {"data": null, "error": message}."""
    body = _serialize(lambda: JsonResponse(data=None, error=message), status_code)
    return _build(body, status_code)


# -----------------------------------------------------------------------------
# Body truncation
# -----------------------------------------------------------------------------


def default_truncate_limit() -> int:
    """Truncation limit for endpoints that don't pass one (settings override first)."""
    override = get_settings().JSON_BODY_TRUNCATE_CHARS
    return override if override is not None else DEFAULT_TRUNCATE_LIMIT


def truncate_post_body(post: TruncatableContent, limit: Optional[int]) -> None:
    """
    Shorten post.body in place to at most `limit` characters.

    body_truncated is set to True only when the body actually got shorter;
    otherwise it is left untouched. A limit of None disables truncation.
    """
    if limit is None:
        return

    truncated = truncate_text(post.body, limit)
    if len(truncated) < len(post.body):
        post.body = truncated
        post.body_truncated = True


def truncate_post_bodies(posts: Iterable[TruncatableContent], limit: Optional[int]) -> None:
    """Apply truncate_post_body to each post independently."""
    if limit is None:
        return

    for post in posts:
        truncate_post_body(post, limit)
