"""
Search Service

Case-insensitive substring search over article titles and bodies. Results
are published articles in one locale, optionally narrowed to one author,
ordered like the public listing. A blank keyword matches nothing.
"""

import logging

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from dualpascal.config import settings
from dualpascal.models.article import Article, ArticleStatus
from dualpascal.models.user import User
from dualpascal.services.listing_service import LISTING_LOAD_OPTIONS, published_order
from dualpascal.utils.pagination import Page, paginate

logger = logging.getLogger(__name__)


def escape_like(keyword: str) -> str:
    return keyword.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


async def search_articles(
    db: AsyncSession,
    keyword: str | None,
    locale: str,
    page: int | None = 1,
    per_page: int | None = None,
    user: User | None = None,
) -> Page[Article]:
    """
    Search published articles.

    Args:
        db: The database session.
        keyword: Substring to look for in title or content; surrounding whitespace is ignored.
        locale: Only articles in this locale are searched.
        page: 1-indexed page.
        per_page: Page size, defaults to the public page size.
        user: When given, only this author's articles are searched.

    Returns:
        Page of matching articles; empty when the keyword is blank.
    """
    per_page = per_page or settings.public_page_size
    keyword = (keyword or "").strip()
    if not keyword:
        return Page.empty(page or 1, per_page)

    pattern = f"%{escape_like(keyword)}%"
    stmt = select(Article).where(
        Article.status == ArticleStatus.PUBLISHED,
        Article.locale == locale,
        or_(
            Article.title.ilike(pattern, escape="\\"),
            Article.content.ilike(pattern, escape="\\"),
        ),
    )
    if user is not None:
        stmt = stmt.where(Article.user_id == user.id)

    result = await paginate(db, stmt.order_by(*published_order()), page, per_page, options=LISTING_LOAD_OPTIONS)
    result.filters = {"q": keyword, "locale": locale}
    if user is not None:
        result.filters["username"] = user.username
    logger.info("Search: keyword=%r locale=%s user=%s hits=%d", keyword, locale, user.id if user else None, result.total)
    return result
