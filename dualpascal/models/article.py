"""
Article Model

An article is either an *original* (``original_article_id`` is NULL) or the
*translation* of exactly one original. The unique constraint on
``original_article_id`` keeps the pairing one-to-one at the store level and
the self-referential foreign key cascades deletion from the original to its
translation.
"""

import enum
from datetime import datetime

from sqlalchemy import CheckConstraint, Column, DateTime, Enum, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import relationship

from dualpascal.database import Base
from dualpascal.models.article_tags import article_tags


class ArticleStatus(str, enum.Enum):
    DRAFT = "draft"
    PUBLISHED = "published"


class Article(Base):
    __tablename__ = "articles"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    title = Column(String, nullable=False)
    content = Column(Text, nullable=False)
    locale = Column(String(2), nullable=False, default="ja")
    status = Column(Enum(ArticleStatus), default=ArticleStatus.DRAFT, nullable=False)
    published_at = Column(DateTime, nullable=True, index=True)
    cover_image_url = Column(String, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    category_id = Column(Integer, ForeignKey("categories.id", ondelete="SET NULL"), nullable=True, index=True)
    original_article_id = Column(
        Integer,
        ForeignKey("articles.id", ondelete="CASCADE"),
        nullable=True,
        unique=True,
    )

    # Relationships
    user = relationship("User", back_populates="articles")
    category = relationship("Category", back_populates="articles")
    tags = relationship("Tag", secondary=article_tags, back_populates="articles", passive_deletes=True)
    comments = relationship("Comment", back_populates="article", cascade="all, delete-orphan", passive_deletes=True)

    original_article = relationship("Article", remote_side=[id], back_populates="translation")
    translation = relationship(
        "Article",
        back_populates="original_article",
        uselist=False,
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    __table_args__ = (
        CheckConstraint("locale IN ('ja', 'en')", name="ck_articles_locale"),
        Index("ix_articles_user_locale_status", "user_id", "locale", "status"),
    )

    @property
    def is_original(self) -> bool:
        return self.original_article_id is None

    @property
    def is_translation(self) -> bool:
        return self.original_article_id is not None

    @property
    def has_translation(self) -> bool:
        # Requires the translation relationship to be loaded
        return self.translation is not None

    @property
    def is_published(self) -> bool:
        return self.status == ArticleStatus.PUBLISHED

    def __repr__(self) -> str:
        return f"<Article(id={self.id}, locale={self.locale}, status={self.status}, user_id={self.user_id})>"
