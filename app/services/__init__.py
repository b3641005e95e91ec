# app/services/__init__.py
"""
Business logic services.
"""

from app.services.collection_registry import (
    Collection,
    CollectionRegistry,
    get_collection_registry,
    parse_collection_map,
)
from app.services.json_response import (
    DEFAULT_TRUNCATE_LIMIT,
    json_error,
    json_response,
    truncate_post_bodies,
    truncate_post_body,
)

__all__ = [
    "Collection",
    "CollectionRegistry",
    "get_collection_registry",
    "parse_collection_map",
    "DEFAULT_TRUNCATE_LIMIT",
    "json_response",
    "json_error",
    "truncate_post_body",
    "truncate_post_bodies",
]
