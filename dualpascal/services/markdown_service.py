"""
Markdown Service

Renders article Markdown (GitHub-flavoured subset with highlighted code
blocks) into sanitized HTML. HTML is derived on every read and never stored.
"""

import logging

import markdown

from dualpascal.exceptions import MarkdownRenderError
from dualpascal.utils.sanitize import sanitize_html, strip_tags, truncate

logger = logging.getLogger(__name__)

MARKDOWN_EXTENSIONS = [
    "fenced_code",
    "tables",
    "codehilite",
    "sane_lists",
    "nl2br",
]

MARKDOWN_EXTENSION_CONFIGS = {
    "codehilite": {"guess_lang": False, "css_class": "highlight"},
}


def render_markdown(source: str | None) -> str:
    """Convert Markdown to sanitized HTML.

    Raises:
        MarkdownRenderError: if the renderer fails on the input.
    """
    try:
        html = markdown.markdown(
            source or "",
            extensions=MARKDOWN_EXTENSIONS,
            extension_configs=MARKDOWN_EXTENSION_CONFIGS,
            output_format="html",
        )
    except Exception as e:
        logger.error(f"Markdown rendering failed: {e}")
        raise MarkdownRenderError() from e
    return sanitize_html(html)


def content_preview(source: str | None, length: int = 100) -> str:
    """Plain-text excerpt of the rendered article, at most ``length`` characters."""
    text = " ".join(strip_tags(render_markdown(source)).split())
    return truncate(text, length)
