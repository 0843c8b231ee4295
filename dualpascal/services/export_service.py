"""
Export Service

Produces a downloadable Markdown file for a single article: a small metadata
header followed by the original Markdown source.
"""

import logging

from dualpascal.models.article import Article

logger = logging.getLogger(__name__)

UNCATEGORIZED_LABEL = "未設定"
DATE_FORMAT = "%Y年%m月%d日"


def sanitize_filename(title: str) -> str:
    """Keep letters (any script), digits, whitespace and hyphens; whitespace runs become underscores."""
    kept = "".join(ch for ch in title if ch.isalnum() or ch.isspace() or ch == "-")
    return "_".join(kept.split()) or "article"


def export_filename(article: Article) -> str:
    return f"{sanitize_filename(article.title)}_{article.locale}.md"


def generate_markdown(article: Article) -> str:
    """Requires the article's category and tags to be loaded."""
    lines = [f"# {article.title}", ""]
    lines.append(f"**カテゴリ**: {article.category.name if article.category else UNCATEGORIZED_LABEL}")
    if article.tags:
        lines.append(f"**タグ**: {', '.join(tag.name for tag in article.tags)}")
    posted = article.published_at or article.created_at
    lines.append(f"**投稿日**: {posted.strftime(DATE_FORMAT)}")
    lines.extend(["", "---", "", article.content])
    return "\n".join(lines)


def export_article_markdown(article: Article) -> tuple[str, str]:
    """Return ``(filename, body)`` for the export download."""
    filename = export_filename(article)
    logger.info("Article exported: id=%d filename=%s", article.id, filename)
    return filename, generate_markdown(article)
