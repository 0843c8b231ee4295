from sqlalchemy import Column, Integer, String, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from dualpascal.database import Base
from dualpascal.models.article_tags import article_tags


class Tag(Base):
    __tablename__ = "tags"
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    user = relationship("User", back_populates="tags")
    articles = relationship("Article", secondary=article_tags, back_populates="tags", passive_deletes=True)

    __table_args__ = (
        UniqueConstraint("user_id", "name", name="uq_tags_user_name"),
    )

    def __repr__(self) -> str:
        return f"<Tag(id={self.id}, name={self.name!r}, user_id={self.user_id})>"
