"""
Article Listing Service

Builds the ordered, paginated article listings used by the public blog and
the author dashboard.

Public listings are always scoped to one author, to ``published`` articles
and to one locale. Category and tag filters are optional; an unknown id
simply yields an empty page. The tag filter only matches tags owned by the
listed author.
"""

import logging
from dataclasses import dataclass
from typing import Any

from sqlalchemy import Select, case, false, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from dualpascal.config import settings
from dualpascal.models.article import Article, ArticleStatus
from dualpascal.models.article_tags import article_tags
from dualpascal.models.category import Category
from dualpascal.models.tag import Tag
from dualpascal.models.user import User
from dualpascal.utils.pagination import Page, paginate

logger = logging.getLogger(__name__)

LISTING_LOAD_OPTIONS = (
    selectinload(Article.category),
    selectinload(Article.tags),
    selectinload(Article.translation),
)


def published_order() -> tuple:
    """Newest publication first; created_at then id break ties."""
    return (Article.published_at.desc(), Article.created_at.desc(), Article.id.desc())


@dataclass
class ArticleFilterQuery:
    """Public article listing for one author in one locale."""

    locale: str
    user: User | None = None
    category_id: int | None = None
    tag_id: int | None = None

    def statement(self) -> Select:
        if self.user is None:
            return select(Article).where(false())

        stmt = select(Article).where(
            Article.user_id == self.user.id,
            Article.status == ArticleStatus.PUBLISHED,
            Article.locale == self.locale,
        )

        if self.category_id is not None:
            stmt = stmt.where(Article.category_id == self.category_id)

        if self.tag_id is not None:
            stmt = (
                stmt.join(article_tags, article_tags.c.article_id == Article.id)
                .join(Tag, Tag.id == article_tags.c.tag_id)
                .where(Tag.id == self.tag_id, Tag.user_id == self.user.id)
            )

        return stmt.order_by(*published_order())

    async def paginate(self, db: AsyncSession, page: int | None = 1, per_page: int | None = None) -> Page[Article]:
        if self.user is None:
            return Page.empty(page or 1, per_page or settings.public_page_size)

        result = await paginate(
            db,
            self.statement(),
            page,
            per_page or settings.public_page_size,
            options=LISTING_LOAD_OPTIONS,
        )
        result.filters = self.filter_params()
        logger.debug("Listing for user=%s locale=%s filters=%s total=%d", self.user.id, self.locale, result.filters, result.total)
        return result

    async def current_category(self, db: AsyncSession) -> Category | None:
        if self.category_id is None or self.user is None:
            return None
        result = await db.execute(
            select(Category).where(Category.id == self.category_id, Category.user_id == self.user.id)
        )
        return result.scalars().first()

    async def current_tag(self, db: AsyncSession) -> Tag | None:
        if self.tag_id is None or self.user is None:
            return None
        result = await db.execute(select(Tag).where(Tag.id == self.tag_id, Tag.user_id == self.user.id))
        return result.scalars().first()

    def filter_params(self) -> dict[str, Any]:
        params = {"locale": self.locale, "category_id": self.category_id, "tag_id": self.tag_id}
        return {key: value for key, value in params.items() if value is not None}


async def list_dashboard_articles(db: AsyncSession, user: User, page: int | None = 1) -> Page[Article]:
    """The author's originals, published ones first, each with its translation loaded."""
    published_first = case((Article.status == ArticleStatus.PUBLISHED, 0), else_=1)
    stmt = (
        select(Article)
        .where(Article.user_id == user.id, Article.original_article_id.is_(None))
        .order_by(published_first, *published_order())
    )
    return await paginate(db, stmt, page, settings.dashboard_page_size, options=LISTING_LOAD_OPTIONS)
