# app/constants.py
"""
Centralized magic constants organized by domain.

Hardcoded numbers/strings used across the JSON API and the collections
registry live here so policy changes happen in one place.
"""


class TextLimits:
    """Character limits applied to text in API payloads."""

    # Post/comment body truncation for JSON listings
    JSON_BODY_TRUNCATE_CHARS = 400      # Default when an endpoint truncates without a limit

    # Word-boundary back-off: only look for a space in the last fifth of the window
    TRUNCATE_WORD_BACKOFF_RATIO = 0.2


class SettingKeys:
    """Names of settings read through app.config.get_setting()."""

    COLLECTIONS = "REDLIB_COLLECTIONS"
    JSON_BODY_TRUNCATE_CHARS = "JSON_BODY_TRUNCATE_CHARS"


class CollectionFormat:
    """Separators of the collections configuration string."""

    ENTRY_SEPARATOR = ";"
    ALIAS_SEPARATOR = "="


class HttpDefaults:
    """Fixed values of the JSON envelope responses."""

    JSON_MEDIA_TYPE = "application/json"
    SUCCESS_STATUS = 200
