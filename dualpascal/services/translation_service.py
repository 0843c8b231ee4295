"""
Translation Service

An original article may have at most one translation. The translation is an
Article row pointing at its original through ``original_article_id``; its
locale is always the counterpart of the original's and its owner is always
the original's owner, whatever the request says.

Functions:
    get_original             - owned original, rejecting translations
    build_translation_draft  - pre-filled form values for a new translation
    create_translation       - insert the single translation of an original
    get_translation          - fetch the translation of an owned original
    update_translation       - partial update (locale is never changed)
    delete_translation       - remove the translation, keeping the original
"""

from __future__ import annotations

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession  # noqa: TC002

from dualpascal.exceptions import DuplicateResourceError, InvalidOperationError, TranslationNotFoundError
from dualpascal.i18n import counterpart_locale
from dualpascal.models.article import Article
from dualpascal.models.user import User
from dualpascal.schemas.article import ArticleUpdate, TranslationCreate, TranslationDraft, TranslationUpdate
from dualpascal.services import article_service
from dualpascal.services.tag_service import tag_list

logger = logging.getLogger(__name__)


async def get_original(db: AsyncSession, user: User, original_id: int) -> Article:
    original = await article_service.get_owned_article(db, user, original_id)
    if original.is_translation:
        raise InvalidOperationError(
            "A translation cannot itself be translated",
            details={"article_id": original.id, "original_article_id": original.original_article_id},
        )
    return original


async def build_translation_draft(db: AsyncSession, user: User, original_id: int) -> TranslationDraft:
    """Copy title, content and tags from the original; the category is left for the author to pick."""
    original = await get_original(db, user, original_id)
    if original.has_translation:
        raise DuplicateResourceError("Translation", "original_article_id", original.id)
    return TranslationDraft(
        original_article_id=original.id,
        title=original.title,
        content=original.content,
        locale=counterpart_locale(original.locale),
        tag_list=tag_list(original),
        category_id=None,
    )


async def create_translation(
    db: AsyncSession,
    user: User,
    original_id: int,
    data: TranslationCreate,
) -> Article:
    """Insert the translation of ``original_id`` and return it.

    Raises:
        ArticleNotFoundError: if the original does not exist or belongs to someone else.
        InvalidOperationError: if ``original_id`` is itself a translation.
        DuplicateResourceError: if the original already has a translation, or a tag
            named in ``tag_list`` was inserted concurrently.
    """
    original = await get_original(db, user, original_id)
    if original.has_translation:
        raise DuplicateResourceError("Translation", "original_article_id", original.id)

    locale = counterpart_locale(original.locale)
    await article_service.validate_category(db, original.user_id, data.category_id, locale)

    translation = Article(
        title=data.title,
        content=data.content,
        locale=locale,
        status=data.status,
        category_id=data.category_id,
        cover_image_url=data.cover_image_url,
        user_id=original.user_id,
        original_article_id=original.id,
        tags=[],
    )
    article_service.mark_published(translation)
    db.add(translation)

    try:
        await db.flush()
    except IntegrityError as e:
        # A concurrent request inserted the translation first
        await db.rollback()
        raise DuplicateResourceError("Translation", "original_article_id", original_id) from e

    await article_service.apply_tags(db, translation, data.tag_list)
    translation = await article_service.commit_article(db, translation, "create")
    logger.info("Translation created: original_id=%d translation_id=%d locale=%s", original_id, translation.id, locale)
    return translation


async def get_translation(db: AsyncSession, user: User, original_id: int) -> Article:
    original = await get_original(db, user, original_id)
    if original.translation is None:
        raise TranslationNotFoundError(original_id)
    return await article_service.load_article(db, original.translation.id)


async def update_translation(
    db: AsyncSession,
    user: User,
    original_id: int,
    data: TranslationUpdate,
) -> Article:
    translation = await get_translation(db, user, original_id)
    updates = ArticleUpdate(**data.model_dump(exclude_unset=True))
    return await article_service.update_article(db, user, translation.id, updates)


async def delete_translation(db: AsyncSession, user: User, original_id: int) -> None:
    translation = await get_translation(db, user, original_id)
    await article_service.delete_article(db, user, translation.id)
    logger.info("Translation deleted: original_id=%d", original_id)
