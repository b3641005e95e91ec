# app/utils/text.py
"""
Text helpers shared by the JSON API payload code.
"""

from app.constants import TextLimits


def truncate_text(text: str, max_chars: int) -> str:
    """
    Truncate text to at most max_chars characters.

    Prefers a word boundary when one falls near the end of the window, so a
    listing preview doesn't stop mid-word. Text already within the limit is
    returned as-is.

    Args:
        text: The text to truncate
        max_chars: Maximum allowed characters

    Returns:
        Text no longer than max_chars
    """
    if len(text) <= max_chars:
        return text
    if max_chars <= 0:
        return ""

    truncated = text[:max_chars]

    # Back off to the last space only if it's inside the final part of the window
    min_cut = int(max_chars * (1 - TextLimits.TRUNCATE_WORD_BACKOFF_RATIO))
    last_space = truncated.rfind(" ")
    if last_space >= min_cut and last_space > 0:
        truncated = truncated[:last_space]

    return truncated.rstrip()
