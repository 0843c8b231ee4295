"""
Admin Service

Site-wide statistics, user moderation and article oversight for administrators.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone

from sqlalchemy import func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from dualpascal.config import settings
from dualpascal.exceptions import ArticleNotFoundError, InvalidOperationError, UserNotFoundError
from dualpascal.models.article import Article, ArticleStatus
from dualpascal.models.contact import Contact
from dualpascal.models.user import User, UserStatus
from dualpascal.services.search_service import escape_like
from dualpascal.utils.pagination import Page, normalize_page, paginate

logger = logging.getLogger(__name__)

RECENT_ARTICLE_LIMIT = 10


@dataclass
class DashboardStats:
    total_users: int
    total_articles: int
    published_articles: int
    users_this_month: int
    total_contacts: int
    unresolved_contacts: int


@dataclass
class UserRow:
    user: User
    article_count: int


async def _count(db: AsyncSession, stmt) -> int:
    return (await db.execute(stmt)).scalar_one()


async def dashboard_stats(db: AsyncSession, now: datetime | None = None) -> DashboardStats:
    now = now or datetime.now(timezone.utc).replace(tzinfo=None)
    month_start = now.replace(day=1, hour=0, minute=0, second=0, microsecond=0)
    return DashboardStats(
        total_users=await _count(db, select(func.count(User.id))),
        total_articles=await _count(db, select(func.count(Article.id))),
        published_articles=await _count(
            db, select(func.count(Article.id)).where(Article.status == ArticleStatus.PUBLISHED)
        ),
        users_this_month=await _count(db, select(func.count(User.id)).where(User.created_at >= month_start)),
        total_contacts=await _count(db, select(func.count(Contact.id))),
        unresolved_contacts=await _count(db, select(func.count(Contact.id)).where(Contact.resolved.is_(False))),
    )


async def list_users(db: AsyncSession, search: str | None = None, page: int | None = 1) -> Page[UserRow]:
    page = normalize_page(page)
    per_page = settings.dashboard_page_size

    article_count = func.count(Article.id).label("article_count")
    stmt = (
        select(User, article_count)
        .outerjoin(Article, Article.user_id == User.id)
        .group_by(User.id)
        .order_by(User.created_at.desc(), User.id.desc())
    )
    count_stmt = select(func.count(User.id))
    if search and search.strip():
        pattern = f"%{escape_like(search.strip().lower())}%"
        condition = or_(
            func.lower(User.username).like(pattern, escape="\\"),
            func.lower(User.email).like(pattern, escape="\\"),
        )
        stmt = stmt.where(condition)
        count_stmt = count_stmt.where(condition)

    total = await _count(db, count_stmt)
    offset = (page - 1) * per_page
    rows = []
    if offset < total:
        result = await db.execute(stmt.offset(offset).limit(per_page))
        rows = [UserRow(user=user, article_count=count) for user, count in result.all()]
    return Page(items=rows, total=total, page=page, per_page=per_page, filters={"search": search or ""})


async def get_user_overview(db: AsyncSession, user_id: int) -> tuple[User, list[Article]]:
    user = await db.get(User, user_id)
    if user is None:
        raise UserNotFoundError(user_id)
    result = await db.execute(
        select(Article)
        .where(Article.user_id == user_id)
        .options(selectinload(Article.user), selectinload(Article.category))
        .order_by(Article.created_at.desc(), Article.id.desc())
        .limit(RECENT_ARTICLE_LIMIT)
    )
    return user, list(result.scalars().all())


async def update_user_status(db: AsyncSession, user_id: int, new_status: UserStatus) -> User:
    """Change a user's account status. Administrator accounts cannot be changed."""
    user = await db.get(User, user_id)
    if user is None:
        raise UserNotFoundError(user_id)
    if user.is_admin:
        raise InvalidOperationError("Administrator status cannot be changed", details={"user_id": user_id})
    user.status = new_status
    await db.commit()
    await db.refresh(user)
    logger.info(f"User {user.username} status changed to {new_status.value}")
    return user


async def list_all_articles(db: AsyncSession, page: int | None = 1) -> Page[Article]:
    stmt = select(Article).order_by(Article.created_at.desc(), Article.id.desc())
    return await paginate(
        db,
        stmt,
        page,
        settings.dashboard_page_size,
        options=(selectinload(Article.user), selectinload(Article.category)),
    )


async def delete_any_article(db: AsyncSession, article_id: int) -> None:
    article = await db.get(Article, article_id, options=[selectinload(Article.translation)])
    if article is None:
        raise ArticleNotFoundError(article_id)
    await db.delete(article)
    await db.commit()
    logger.info(f"Admin deleted article {article_id}")
