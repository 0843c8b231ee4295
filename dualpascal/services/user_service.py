import logging

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from dualpascal.exceptions import UserNotFoundError
from dualpascal.i18n import Locale, pick_localized
from dualpascal.models.article import Article, ArticleStatus
from dualpascal.models.user import User
from dualpascal.schemas.user import ProfileUpdate, PublicProfile, SocialLinks
from dualpascal.services import blog_setting_service

logger = logging.getLogger(__name__)


async def get_user_by_username(db: AsyncSession, username: str) -> User:
    result = await db.execute(select(User).where(User.username == username))
    user = result.scalars().first()
    if user is None:
        raise UserNotFoundError(username)
    return user


def display_name(user: User, locale: str | Locale) -> str:
    return pick_localized({"ja": user.nickname_ja, "en": user.nickname_en}, locale, default=user.username)


def localized_bio(user: User, locale: str | Locale) -> str:
    return pick_localized({"ja": user.bio_ja, "en": user.bio_en}, locale)


def localized_location(user: User, locale: str | Locale) -> str:
    return pick_localized({"ja": user.location_ja, "en": user.location_en}, locale)


async def update_profile(db: AsyncSession, user: User, data: ProfileUpdate) -> User:
    for field, value in data.model_dump(exclude_unset=True).items():
        setattr(user, field, value or None)
    await db.commit()
    await db.refresh(user)
    logger.info(f"Profile updated for user {user.id}")
    return user


async def build_public_profile(db: AsyncSession, user: User, locale: str) -> PublicProfile:
    setting = await blog_setting_service.get_or_create_blog_setting(db, user)
    count = await db.execute(
        select(func.count(Article.id)).where(
            Article.user_id == user.id,
            Article.locale == locale,
            Article.status == ArticleStatus.PUBLISHED,
        )
    )
    return PublicProfile(
        username=user.username,
        locale=locale,
        display_name=display_name(user, locale),
        bio=localized_bio(user, locale),
        location=localized_location(user, locale),
        website=user.website,
        avatar_url=user.avatar_url,
        social=SocialLinks(
            twitter=user.twitter_handle,
            facebook=user.facebook_handle,
            linkedin=user.linkedin_handle,
            github=user.github_handle,
            qiita=user.qiita_handle,
            zenn=user.zenn_handle,
            hatena=user.hatena_handle,
        ),
        blog=blog_setting_service.appearance(setting, locale),
        published_article_count=count.scalar_one(),
    )
