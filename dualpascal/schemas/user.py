from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from dualpascal.models.user import RoleEnum, UserStatus
from dualpascal.schemas.blog_setting import BlogAppearance
from dualpascal.utils.sanitize import is_http_url


class UserCreate(BaseModel):
    username: str = Field(
        ...,
        min_length=3,
        max_length=50,
        pattern=r"^[A-Za-z0-9_\-]+$",
        description="Username must be between 3 and 50 characters.",
    )
    password: str = Field(..., min_length=6, max_length=128, description="Password must be between 6 and 128 characters.")
    email: EmailStr = Field(..., description="A valid email address.")


class UserResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True, use_enum_values=True)

    id: int
    username: str
    email: str
    role: RoleEnum
    status: UserStatus
    analytics_setup_completed: bool
    created_at: datetime


class ProfileUpdate(BaseModel):
    nickname_ja: Optional[str] = None
    nickname_en: Optional[str] = None
    bio_ja: Optional[str] = None
    bio_en: Optional[str] = None
    location_ja: Optional[str] = None
    location_en: Optional[str] = None
    website: Optional[str] = None
    avatar_url: Optional[str] = None
    twitter_handle: Optional[str] = None
    facebook_handle: Optional[str] = None
    linkedin_handle: Optional[str] = None
    github_handle: Optional[str] = None
    qiita_handle: Optional[str] = None
    zenn_handle: Optional[str] = None
    hatena_handle: Optional[str] = None

    @field_validator("website")
    @classmethod
    def validate_website(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        v = v.strip()
        if v and not is_http_url(v):
            raise ValueError("website must be an http(s) URL")
        return v


class ProfileResponse(ProfileUpdate):
    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str


class SocialLinks(BaseModel):
    twitter: Optional[str] = None
    facebook: Optional[str] = None
    linkedin: Optional[str] = None
    github: Optional[str] = None
    qiita: Optional[str] = None
    zenn: Optional[str] = None
    hatena: Optional[str] = None


class PublicProfile(BaseModel):
    username: str
    locale: str
    display_name: str
    bio: str
    location: str
    website: Optional[str] = None
    avatar_url: Optional[str] = None
    social: SocialLinks
    blog: BlogAppearance
    published_article_count: int


class AdminUserUpdate(BaseModel):
    status: UserStatus


class AnalyticsOverview(BaseModel):
    has_analytics: bool
    dashboard_url: Optional[str] = None
    setup_in_progress: bool
