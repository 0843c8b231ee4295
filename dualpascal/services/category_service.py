"""
Category Service

Categories belong to one author and one locale. Deleting a category keeps
its articles and clears their category reference.
"""

import logging

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from dualpascal.exceptions import CategoryNotFoundError, DuplicateResourceError
from dualpascal.models.article import Article
from dualpascal.models.category import Category
from dualpascal.models.user import User
from dualpascal.schemas.category import CategoryCreate, CategoryUpdate, CategoryWithCount

logger = logging.getLogger(__name__)


async def list_categories(db: AsyncSession, user: User, locale: str) -> list[CategoryWithCount]:
    """The author's categories in ``locale`` ordered by name, with their article counts."""
    result = await db.execute(
        select(Category, func.count(Article.id))
        .outerjoin(Article, Article.category_id == Category.id)
        .where(Category.user_id == user.id, Category.locale == locale)
        .group_by(Category.id)
        .order_by(Category.name)
    )
    categories = []
    for category, article_count in result.all():
        item = CategoryWithCount.model_validate(category)
        item.article_count = article_count
        categories.append(item)
    return categories


async def get_owned_category(db: AsyncSession, user: User, category_id: int) -> Category:
    category = await db.get(Category, category_id)
    if category is None or category.user_id != user.id:
        raise CategoryNotFoundError(category_id)
    return category


async def _commit_category(db: AsyncSession, category: Category) -> Category:
    name = category.name
    try:
        await db.commit()
    except IntegrityError as e:
        await db.rollback()
        raise DuplicateResourceError("Category", "name", name) from e
    await db.refresh(category)
    return category


async def create_category(db: AsyncSession, user: User, data: CategoryCreate) -> Category:
    category = Category(
        name=data.name,
        description=data.description,
        locale=data.locale.value,
        user_id=user.id,
    )
    db.add(category)
    category = await _commit_category(db, category)
    logger.info("Category created: id=%d user=%d locale=%s", category.id, user.id, category.locale)
    return category


async def update_category(db: AsyncSession, user: User, category_id: int, data: CategoryUpdate) -> Category:
    category = await get_owned_category(db, user, category_id)
    for field, value in data.model_dump(exclude_unset=True).items():
        if field == "name" and value is None:
            continue
        setattr(category, field, value)
    return await _commit_category(db, category)


async def delete_category(db: AsyncSession, user: User, category_id: int) -> None:
    category = await get_owned_category(db, user, category_id)
    await db.delete(category)
    await db.commit()
    logger.info("Category deleted: id=%d user=%d", category_id, user.id)
