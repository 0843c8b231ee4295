"""
Blog Setting Service

Every user has exactly one BlogSetting row. It is created on first access
through ``get_or_create_blog_setting``; reads elsewhere never write.
"""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from dualpascal.config import settings
from dualpascal.i18n import Locale, pick_localized
from dualpascal.models.blog_setting import BlogSetting
from dualpascal.models.user import User
from dualpascal.schemas.blog_setting import BlogAppearance, BlogSettingUpdate

logger = logging.getLogger(__name__)


async def get_blog_setting(db: AsyncSession, user_id: int) -> BlogSetting | None:
    result = await db.execute(select(BlogSetting).where(BlogSetting.user_id == user_id))
    return result.scalars().first()


async def get_or_create_blog_setting(db: AsyncSession, user: User) -> BlogSetting:
    """Return the user's blog setting, creating the default one if it does not exist yet.

    Safe to call repeatedly: a concurrent insert that wins the unique
    constraint on ``user_id`` is picked up instead of failing.
    """
    setting = await get_blog_setting(db, user.id)
    if setting is not None:
        return setting

    user_id = user.id
    setting = BlogSetting(user_id=user_id)
    try:
        # Savepoint keeps the outer transaction and the caller's loaded objects intact
        async with db.begin_nested():
            db.add(setting)
    except IntegrityError:
        setting = await get_blog_setting(db, user_id)
        if setting is None:
            raise
        return setting

    await db.commit()
    await db.refresh(setting)
    logger.info("Blog setting created: user_id=%d", user_id)
    return setting


async def update_blog_setting(db: AsyncSession, user: User, data: BlogSettingUpdate) -> BlogSetting:
    setting = await get_or_create_blog_setting(db, user)
    for field, value in data.model_dump(exclude_unset=True).items():
        if value is None and field in ("theme_color", "layout_style", "show_hero_thumbnail"):
            continue
        setattr(setting, field, value)
    await db.commit()
    await db.refresh(setting)
    logger.info("Blog setting updated: user_id=%d", user.id)
    return setting


def display_title(setting: BlogSetting, locale: str | Locale) -> str:
    values = {"ja": setting.blog_title_ja, "en": setting.blog_title_en}
    return pick_localized(values, locale, default=settings.default_blog_title)


def display_subtitle(setting: BlogSetting, locale: str | Locale) -> str:
    values = {"ja": setting.blog_subtitle_ja, "en": setting.blog_subtitle_en}
    return pick_localized(values, locale, default="")


def appearance(setting: BlogSetting, locale: str | Locale) -> BlogAppearance:
    return BlogAppearance(
        title=display_title(setting, locale),
        subtitle=display_subtitle(setting, locale),
        theme_color=setting.theme_color.value,
        layout_style=setting.layout_style.value,
        show_hero_thumbnail=setting.show_hero_thumbnail,
    )
