import enum
from datetime import datetime

from sqlalchemy import Boolean, Column, DateTime, Enum, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from dualpascal.database import Base


class ThemeColor(str, enum.Enum):
    DEFAULT = "default"
    SLATE = "slate"
    FOREST = "forest"
    MAROON = "maroon"
    MIDNIGHT = "midnight"


class LayoutStyle(str, enum.Enum):
    LINEAR = "linear"
    HERO_TILES = "hero_tiles"
    HERO_LIST = "hero_list"


class BlogSetting(Base):
    __tablename__ = "blog_settings"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, unique=True)
    blog_title_ja = Column(String, nullable=True)
    blog_title_en = Column(String, nullable=True)
    blog_subtitle_ja = Column(String, nullable=True)
    blog_subtitle_en = Column(String, nullable=True)
    theme_color = Column(Enum(ThemeColor), default=ThemeColor.SLATE, nullable=False)
    layout_style = Column(Enum(LayoutStyle), default=LayoutStyle.LINEAR, nullable=False)
    show_hero_thumbnail = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    user = relationship("User", back_populates="blog_setting")
