from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from dualpascal.utils.sanitize import is_http_url


class CommentCreate(BaseModel):
    author_name: str = Field(..., max_length=100)
    content: str = Field(..., max_length=5000)
    website: Optional[str] = Field(None, description="Optional http(s) URL of the commenter.")

    @field_validator("author_name", "content")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v

    @field_validator("website")
    @classmethod
    def validate_website(cls, v: Optional[str]) -> Optional[str]:
        if v is None or not v.strip():
            return None
        v = v.strip()
        if not is_http_url(v):
            raise ValueError("website must be an http(s) URL")
        return v


class CommentResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    article_id: int
    author_name: str
    content: str
    website: Optional[str] = None
    created_at: datetime


class CommentArticleBrief(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    locale: str


class DashboardCommentResponse(CommentResponse):
    article: CommentArticleBrief
