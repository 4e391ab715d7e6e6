"""
Text processing utilities for formatting and display.
"""

import re
from typing import Iterable, List, Optional

_SCHEME_PATTERN = re.compile(r"^https?://", re.IGNORECASE)


def strip_url_scheme(url: str) -> str:
    """
    Strip the http(s) scheme and a single trailing slash from a URL.

    Example:
        >>> strip_url_scheme("https://github.com/jdoe/")
        'github.com/jdoe'
    """
    text = _SCHEME_PATTERN.sub("", url or "")
    if text.endswith("/"):
        text = text[:-1]
    return text


def capitalize_words(text: str) -> str:
    """
    Lowercase text then capitalize the first letter of each word.

    Example:
        >>> capitalize_words("PROFESSIONAL experience")
        'Professional Experience'
    """
    return re.sub(r"(^|\s)\S", lambda match: match.group(0).upper(), (text or "").lower())


def join_present(parts: Iterable[Optional[str]], separator: str) -> str:
    """
    Join the non-empty parts with a separator, never leaving a dangling one.

    Example:
        >>> join_present(["Austin", "", "USA"], ", ")
        'Austin, USA'
    """
    return separator.join(part for part in parts if part)


def present_items(items: Optional[Iterable[str]]) -> List[str]:
    """Return the non-blank string items of a possibly missing list."""
    if not items:
        return []
    return [str(item) for item in items if item is not None and str(item).strip()]
