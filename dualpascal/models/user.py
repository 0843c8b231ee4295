from datetime import datetime

from sqlalchemy import Boolean, Column, DateTime, Enum, Integer, String, Text
from sqlalchemy.orm import relationship
from dualpascal.database import Base
import enum


class RoleEnum(str, enum.Enum):
    user = "user"
    admin = "admin"


class UserStatus(str, enum.Enum):
    active = "active"
    suspended = "suspended"
    pending = "pending"


class User(Base):
    __tablename__ = "users"
    id = Column(Integer, primary_key=True, index=True)
    username = Column(String, unique=True, nullable=False, index=True)
    email = Column(String, unique=True, nullable=False)
    hashed_password = Column(String, nullable=False)
    role = Column(Enum(RoleEnum), default=RoleEnum.user, nullable=False, index=True)
    status = Column(Enum(UserStatus), default=UserStatus.active, nullable=False)

    # Localized profile
    nickname_ja = Column(String, nullable=True)
    nickname_en = Column(String, nullable=True)
    bio_ja = Column(Text, nullable=True)
    bio_en = Column(Text, nullable=True)
    location_ja = Column(String, nullable=True)
    location_en = Column(String, nullable=True)
    website = Column(String, nullable=True)
    avatar_url = Column(String, nullable=True)

    # Social handles
    twitter_handle = Column(String, nullable=True)
    facebook_handle = Column(String, nullable=True)
    linkedin_handle = Column(String, nullable=True)
    github_handle = Column(String, nullable=True)
    qiita_handle = Column(String, nullable=True)
    zenn_handle = Column(String, nullable=True)
    hatena_handle = Column(String, nullable=True)

    # Analytics provisioning
    umami_website_id = Column(String, nullable=True)
    umami_share_url = Column(String, nullable=True)
    analytics_setup_completed = Column(Boolean, default=False, nullable=False)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    articles = relationship("Article", back_populates="user", cascade="all, delete-orphan", passive_deletes=True)
    categories = relationship("Category", back_populates="user", cascade="all, delete-orphan", passive_deletes=True)
    tags = relationship("Tag", back_populates="user", cascade="all, delete-orphan", passive_deletes=True)
    blog_setting = relationship(
        "BlogSetting",
        back_populates="user",
        uselist=False,
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    @property
    def is_admin(self) -> bool:
        return self.role == RoleEnum.admin

    @property
    def is_active(self) -> bool:
        return self.status == UserStatus.active

    @property
    def has_analytics(self) -> bool:
        return bool(self.analytics_setup_completed and self.umami_share_url)

    def __repr__(self) -> str:
        return f"<User(id={self.id}, username={self.username!r}, role={self.role})>"
