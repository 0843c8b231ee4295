"""
Tag Service

Turns free-text tag input into per-user Tag rows. Resolution is an explicit
call made by the article workflows; assigning text to an article never
creates tags on its own.

Functions:
    parse_tag_names    - normalize raw input into unique lowercase names
    resolve_tags       - find-or-create the Tag rows for one owner
    apply_tag_list     - replace an article's whole tag set from raw input
    tag_list           - comma-joined tag names of an article
    list_tags_for_user - all tags owned by a user
"""

from __future__ import annotations

import logging
import re

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession  # noqa: TC002

from dualpascal.models.article import Article
from dualpascal.models.tag import Tag

logger = logging.getLogger(__name__)

TAG_SEPARATOR = re.compile(r"[,\s]+")


def parse_tag_names(text: str | None) -> list[str]:
    """Split on commas or whitespace runs, trim, drop empties, lowercase and de-duplicate.

    First occurrence wins, so ``"Ruby, rails  ruby"`` gives ``["ruby", "rails"]``.
    """
    if not text:
        return []
    names: list[str] = []
    for token in TAG_SEPARATOR.split(text):
        name = token.strip().lower()
        if name and name not in names:
            names.append(name)
    return names


async def resolve_tags(db: AsyncSession, user_id: int, text: str | None) -> list[Tag]:
    """Return the Tag rows named in ``text`` for ``user_id``, creating missing ones.

    New tags are flushed but not committed; the caller's unit of work commits
    them together with the article.
    """
    names = parse_tag_names(text)
    if not names:
        return []

    result = await db.execute(select(Tag).where(Tag.user_id == user_id, Tag.name.in_(names)))
    existing = {tag.name: tag for tag in result.scalars().all()}

    tags: list[Tag] = []
    created = 0
    for name in names:
        tag = existing.get(name)
        if tag is None:
            tag = Tag(name=name, user_id=user_id)
            db.add(tag)
            existing[name] = tag
            created += 1
        tags.append(tag)

    if created:
        await db.flush()
        logger.info("Tags created: user_id=%d count=%d", user_id, created)
    return tags


async def apply_tag_list(db: AsyncSession, article: Article, text: str | None) -> None:
    """Replace the article's tag set with the tags named in ``text``.

    Blank text, or text naming no tags, leaves the current tags untouched.
    The article must already carry its owner and, when persistent, have its
    ``tags`` collection loaded.
    """
    names = parse_tag_names(text)
    if not names:
        return
    if article.user_id is None:
        raise ValueError("Article owner must be known before resolving tags")
    article.tags = await resolve_tags(db, article.user_id, text)


def tag_list(article: Article) -> str:
    return ",".join(tag.name for tag in article.tags)


async def list_tags_for_user(db: AsyncSession, user_id: int) -> list[Tag]:
    result = await db.execute(select(Tag).where(Tag.user_id == user_id).order_by(Tag.name))
    return list(result.scalars().all())
