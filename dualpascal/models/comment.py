"""
Comment Model

Reader comments on an article. There is no moderation workflow: a comment
exists until it is deleted.
"""

from datetime import datetime

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from dualpascal.database import Base


class Comment(Base):
    __tablename__ = "comments"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    article_id = Column(Integer, ForeignKey("articles.id", ondelete="CASCADE"), nullable=False, index=True)
    author_name = Column(String, nullable=False)
    content = Column(Text, nullable=False)
    website = Column(String, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    article = relationship("Article", back_populates="comments")

    def __repr__(self) -> str:
        return f"<Comment(id={self.id}, article_id={self.article_id})>"
