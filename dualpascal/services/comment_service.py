"""
Comment Service

Readers comment on published articles; authors review and delete the
comments left on their own articles. Deletion is permanent.
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from dualpascal.config import settings
from dualpascal.exceptions import ArticleNotFoundError, CommentNotFoundError
from dualpascal.models.article import Article, ArticleStatus
from dualpascal.models.comment import Comment
from dualpascal.models.user import User
from dualpascal.schemas.comment import CommentCreate
from dualpascal.utils.pagination import Page, paginate

logger = logging.getLogger(__name__)


class CommentService:
    """Service for managing comments."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create_comment(self, article_id: int, data: CommentCreate, author: User | None = None) -> Comment:
        """
        Add a reader comment to a published article.

        Args:
            article_id: ID of the article being commented on
            data: Validated comment fields
            author: When given, the article must belong to this user

        Returns:
            Created comment instance
        """
        article = await self.db.get(Article, article_id)
        if article is None or article.status != ArticleStatus.PUBLISHED:
            raise ArticleNotFoundError(article_id)
        if author is not None and article.user_id != author.id:
            raise ArticleNotFoundError(article_id)

        comment = Comment(
            article_id=article_id,
            author_name=data.author_name.strip(),
            content=data.content,
            website=data.website,
        )
        self.db.add(comment)
        await self.db.commit()
        await self.db.refresh(comment)

        logger.info(f"Comment created: id={comment.id}, article={article_id}")
        return comment

    async def list_comments_for_article(self, article_id: int) -> list[Comment]:
        result = await self.db.execute(
            select(Comment).where(Comment.article_id == article_id).order_by(Comment.created_at.asc(), Comment.id.asc())
        )
        return list(result.scalars().all())

    async def list_comments_for_owner(self, owner: User, page: int | None = 1) -> Page[Comment]:
        """Comments on the owner's articles, newest first."""
        stmt = (
            select(Comment)
            .join(Article, Article.id == Comment.article_id)
            .where(Article.user_id == owner.id)
            .order_by(Comment.created_at.desc(), Comment.id.desc())
        )
        return await paginate(
            self.db,
            stmt,
            page,
            settings.dashboard_page_size,
            options=(selectinload(Comment.article),),
        )

    async def get_comment(self, owner: User, comment_id: int) -> Comment:
        result = await self.db.execute(
            select(Comment)
            .options(selectinload(Comment.article))
            .join(Article, Article.id == Comment.article_id)
            .where(Comment.id == comment_id, Article.user_id == owner.id)
        )
        comment = result.scalars().first()
        if comment is None:
            raise CommentNotFoundError(comment_id)
        return comment

    async def delete_comment(self, owner: User, comment_id: int) -> None:
        comment = await self.get_comment(owner, comment_id)
        await self.db.delete(comment)
        await self.db.commit()
        logger.info(f"Comment deleted: id={comment_id}, owner={owner.id}")
