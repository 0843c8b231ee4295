from datetime import datetime

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import relationship

from dualpascal.database import Base


class Category(Base):
    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    locale = Column(String(2), nullable=False, index=True)
    description = Column(Text, nullable=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    user = relationship("User", back_populates="categories")
    # Deleting a category leaves its articles in place with category_id set to NULL
    articles = relationship("Article", back_populates="category", passive_deletes=True)

    __table_args__ = (
        UniqueConstraint("user_id", "locale", "name", name="uq_categories_user_locale_name"),
    )

    def __repr__(self) -> str:
        return f"<Category(id={self.id}, name={self.name!r}, locale={self.locale})>"
