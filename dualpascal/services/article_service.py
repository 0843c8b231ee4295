"""
Article Service

Create, update and delete articles for their author. Every lookup is scoped
to the acting user, so another author's article is reported as missing.
"""

import logging
from datetime import datetime

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from dualpascal.exceptions import ArticleNotFoundError, DuplicateResourceError, InvalidOperationError, ValidationError
from dualpascal.models.article import Article, ArticleStatus
from dualpascal.models.category import Category
from dualpascal.models.user import User
from dualpascal.schemas.article import ArticleCreate, ArticleUpdate
from dualpascal.services import tag_service

logger = logging.getLogger(__name__)

ARTICLE_LOAD_OPTIONS = (
    selectinload(Article.category),
    selectinload(Article.tags),
    selectinload(Article.translation),
)

EDITABLE_FIELDS = ("title", "content", "cover_image_url")


def mark_published(article: Article, now: datetime | None = None) -> None:
    """Stamp ``published_at`` the first time an article is published; never cleared afterwards."""
    if article.status == ArticleStatus.PUBLISHED and article.published_at is None:
        article.published_at = now or datetime.utcnow()


async def load_article(db: AsyncSession, article_id: int) -> Article | None:
    """Fetch an article with category, tags and translation, refreshing any cached copy."""
    result = await db.execute(
        select(Article)
        .options(*ARTICLE_LOAD_OPTIONS)
        .where(Article.id == article_id)
        .execution_options(populate_existing=True)
    )
    return result.scalars().first()


async def get_owned_article(db: AsyncSession, user: User, article_id: int) -> Article:
    article = await load_article(db, article_id)
    if article is None or article.user_id != user.id:
        raise ArticleNotFoundError(article_id)
    return article


async def validate_category(db: AsyncSession, owner_id: int, category_id: int | None, locale: str) -> None:
    """A category must belong to the article owner and share the article's locale."""
    if category_id is None:
        return
    category = await db.get(Category, category_id)
    if category is None or category.user_id != owner_id:
        raise ValidationError("Category does not exist", field="category_id")
    if category.locale != locale:
        raise ValidationError(
            f"Category locale '{category.locale}' does not match article locale '{locale}'",
            field="category_id",
        )


async def apply_tags(db: AsyncSession, article: Article, text: str | None) -> None:
    """Resolve tag text for ``article``; a tag inserted concurrently by another request is a conflict."""
    try:
        await tag_service.apply_tag_list(db, article, text)
    except IntegrityError as e:
        await db.rollback()
        logger.warning(f"Tag conflict while saving article: {e}")
        raise DuplicateResourceError("Tag", "name", ",".join(tag_service.parse_tag_names(text))) from e


async def commit_article(db: AsyncSession, article: Article, action: str) -> Article:
    """Commit the unit of work; the only unique key on articles is the translation pairing."""
    original_article_id = article.original_article_id
    try:
        await db.commit()
    except IntegrityError as e:
        await db.rollback()
        logger.error(f"Failed to {action} article: {e}")
        raise DuplicateResourceError("Translation", "original_article_id", original_article_id) from e
    return await load_article(db, article.id)


async def create_article(db: AsyncSession, user: User, data: ArticleCreate) -> Article:
    """
    Create an article owned by ``user``.

    Args:
        db (AsyncSession): The database session.
        user (User): The author.
        data (ArticleCreate): Submitted fields, including the raw tag list.

    Returns:
        Article: The persisted article with category, tags and translation loaded.

    Raises:
        ValidationError: If the category is not the author's or is in another locale.
    """
    locale = data.locale.value
    await validate_category(db, user.id, data.category_id, locale)

    article = Article(
        title=data.title,
        content=data.content,
        locale=locale,
        status=data.status,
        category_id=data.category_id,
        cover_image_url=data.cover_image_url,
        user_id=user.id,
        tags=[],
    )
    mark_published(article)
    db.add(article)
    await db.flush()

    # The owner is known once the row exists; tags are resolved against it
    await apply_tags(db, article, data.tag_list)

    article = await commit_article(db, article, "create")
    logger.info("Article created: id=%d user=%d locale=%s", article.id, user.id, article.locale)
    return article


async def update_article(db: AsyncSession, user: User, article_id: int, data: ArticleUpdate) -> Article:
    article = await get_owned_article(db, user, article_id)
    updates = data.model_dump(exclude_unset=True)

    new_locale = updates.get("locale")
    new_locale = new_locale.value if new_locale is not None else article.locale
    if new_locale != article.locale:
        if article.is_translation or article.has_translation:
            raise InvalidOperationError(
                "The locale of an article paired with a translation cannot be changed",
                details={"article_id": article.id},
            )
        article.locale = new_locale
        if "category_id" not in updates:
            article.category_id = None

    if "category_id" in updates:
        await validate_category(db, article.user_id, updates["category_id"], article.locale)
        article.category_id = updates["category_id"]

    for field in EDITABLE_FIELDS:
        if field in updates and (updates[field] is not None or field == "cover_image_url"):
            setattr(article, field, updates[field])

    if updates.get("status") is not None:
        article.status = updates["status"]
    mark_published(article)

    if "tag_list" in updates:
        await apply_tags(db, article, updates["tag_list"])

    article.updated_at = datetime.utcnow()
    article = await commit_article(db, article, "update")
    logger.info("Article updated: id=%d fields=%s", article.id, sorted(updates))
    return article


async def delete_article(db: AsyncSession, user: User, article_id: int) -> None:
    """Delete an owned article; an original takes its translation with it."""
    article = await get_owned_article(db, user, article_id)
    await db.delete(article)
    await db.commit()
    logger.info("Article deleted: id=%d user=%d", article_id, user.id)
