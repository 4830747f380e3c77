from __future__ import annotations

import re


MARKUP_TAG_PATTERN = re.compile(r"<[^>]*>")
MAX_NAME_TAG_LENGTH = 45
ELLIPSIS = "..."


def text_rejection_reason(text: str | None) -> str | None:
    """Returns "empty", "markup" or None when the text is acceptable."""
    if text is None or not text.strip():
        return "empty"
    if MARKUP_TAG_PATTERN.search(text):
        return "markup"
    return None


def is_valid_text(text: str | None) -> bool:
    return text_rejection_reason(text) is None


def truncate_text(text: str, max_length: int = MAX_NAME_TAG_LENGTH) -> str:
    if len(text) <= max_length:
        return text
    return text[: max_length - len(ELLIPSIS)] + ELLIPSIS
