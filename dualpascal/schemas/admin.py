from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict

from dualpascal.models.article import ArticleStatus
from dualpascal.schemas.category import CategoryBrief
from dualpascal.schemas.user import UserResponse


class DashboardStatsResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    total_users: int
    total_articles: int
    published_articles: int
    users_this_month: int
    total_contacts: int
    unresolved_contacts: int


class AdminUserRow(UserResponse):
    article_count: int = 0


class ArticleOwner(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str


class AdminArticleResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True, use_enum_values=True)

    id: int
    title: str
    locale: str
    status: ArticleStatus
    published_at: Optional[datetime] = None
    created_at: datetime
    original_article_id: Optional[int] = None
    user: ArticleOwner
    category: Optional[CategoryBrief] = None


class AdminUserDetail(BaseModel):
    user: UserResponse
    recent_articles: list[AdminArticleResponse]
