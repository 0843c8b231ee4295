"""Turn ORM rows and service pages into API response models."""

from typing import Callable, TypeVar

from pydantic import BaseModel

from dualpascal.models.article import Article
from dualpascal.schemas.article import ArticleDetail, ArticleSummary, DashboardArticleResponse
from dualpascal.schemas.pagination import PageResponse
from dualpascal.services.markdown_service import content_preview, render_markdown
from dualpascal.services.tag_service import tag_list
from dualpascal.utils.pagination import Page

M = TypeVar("M", bound=BaseModel)


def page_response(page: Page, schema: type[M], convert: Callable[[object], M] | None = None) -> PageResponse[M]:
    """Wrap a service page as ``PageResponse[schema]``; items go through ``convert`` or ``schema.model_validate``."""
    convert = convert or schema.model_validate
    return PageResponse[schema](
        items=[convert(item) for item in page.items],
        total=page.total,
        page=page.page,
        per_page=page.per_page,
        total_pages=page.total_pages,
        has_next=page.has_next,
        has_previous=page.has_previous,
        filters=page.filters,
    )


def _translation_id(article: Article) -> int | None:
    if article.is_translation:
        return article.original_article_id
    translation = article.translation
    return translation.id if translation is not None else None


def article_summary(article: Article) -> ArticleSummary:
    """Listing entry; ``translation_id`` points at the article in the other locale, if any."""
    summary = ArticleSummary.model_validate(article)
    summary.content_preview = content_preview(article.content)
    summary.translation_id = _translation_id(article)
    return summary


def article_detail(article: Article, comment_count: int = 0) -> ArticleDetail:
    summary = article_summary(article)
    return ArticleDetail(
        **summary.model_dump(),
        content=article.content,
        content_html=render_markdown(article.content),
        original_article_id=article.original_article_id,
        comment_count=comment_count,
    )


def dashboard_article(article: Article) -> DashboardArticleResponse:
    response = DashboardArticleResponse.model_validate(article)
    response.tag_list = tag_list(article)
    return response
