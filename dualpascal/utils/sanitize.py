"""
Input Sanitization Utilities

HTML sanitization for rendered Markdown and plain-text helpers.
"""

from typing import Optional, List

import bleach
from pydantic import HttpUrl, TypeAdapter
from pydantic import ValidationError as PydanticValidationError


# Allowed tags for rendered article bodies
RICH_CONTENT_TAGS = [
    'p', 'br', 'strong', 'em', 'u', 'del', 'h1', 'h2', 'h3', 'h4', 'h5', 'h6',
    'blockquote', 'code', 'pre', 'hr', 'ul', 'ol', 'li', 'a', 'img',
    'table', 'thead', 'tbody', 'tr', 'th', 'td', 'div', 'span', 'sup', 'sub'
]

# Allowed attributes for rendered article bodies
RICH_CONTENT_ATTRS = {
    'a': ['href', 'title', 'rel'],
    'img': ['src', 'alt', 'title', 'width', 'height'],
    'code': ['class'],
    'pre': ['class'],
    'div': ['class'],
    'span': ['class'],
    'table': ['class'],
    'th': ['align', 'style'],
    'td': ['align', 'style'],
    'h1': ['id'], 'h2': ['id'], 'h3': ['id'], 'h4': ['id'], 'h5': ['id'], 'h6': ['id'],
}

# Allowed protocols for URLs
ALLOWED_PROTOCOLS = ['http', 'https', 'mailto']

http_url_adapter = TypeAdapter(HttpUrl)


def sanitize_html(
    text: Optional[str],
    tags: Optional[List[str]] = None,
    attributes: Optional[dict] = None,
    strip: bool = False
) -> str:
    """
    Sanitize HTML content to prevent XSS attacks.

    Args:
        text: The HTML text to sanitize
        tags: List of allowed HTML tags (default: RICH_CONTENT_TAGS)
        attributes: Dict of allowed attributes per tag (default: RICH_CONTENT_ATTRS)
        strip: If True, strip all HTML tags

    Returns:
        Sanitized HTML string
    """
    if text is None:
        return ""

    if strip:
        return bleach.clean(text, tags=[], strip=True)

    allowed_tags = tags if tags is not None else RICH_CONTENT_TAGS
    allowed_attrs = attributes if attributes is not None else RICH_CONTENT_ATTRS

    return bleach.clean(
        text,
        tags=allowed_tags,
        attributes=allowed_attrs,
        protocols=ALLOWED_PROTOCOLS,
        strip=True,
    )


def strip_tags(text: Optional[str]) -> str:
    """Remove every tag, returning plain text with entities unescaped for &amp; only."""
    return sanitize_html(text, strip=True).replace("&amp;", "&")


def truncate(text: str, length: int, omission: str = "...") -> str:
    """Cut ``text`` to at most ``length`` characters including the omission marker."""
    if len(text) <= length:
        return text
    cut = max(length - len(omission), 0)
    return text[:cut] + omission


def is_http_url(value: Optional[str]) -> bool:
    """True when ``value`` parses as an absolute http(s) URL with a valid host."""
    if not value:
        return False
    try:
        http_url_adapter.validate_python(value)
    except PydanticValidationError:
        return False
    return True
