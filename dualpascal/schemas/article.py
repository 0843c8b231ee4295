from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from dualpascal.i18n import Locale
from dualpascal.models.article import ArticleStatus
from dualpascal.schemas.blog_setting import BlogAppearance
from dualpascal.schemas.category import CategoryBrief
from dualpascal.schemas.comment import CommentResponse
from dualpascal.schemas.pagination import PageResponse
from dualpascal.schemas.tag import TagResponse


class _ArticleFields(BaseModel):
    @field_validator("title", "content", check_fields=False)
    @classmethod
    def not_blank(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not v.strip():
            raise ValueError("must not be blank")
        return v


class ArticleCreate(_ArticleFields):
    title: str = Field(..., title="Article Title", description="The title of the article.")
    content: str = Field(..., title="Article Content", description="Markdown source of the article.")
    locale: Locale = Field(Locale.JA, description="Locale the article is written in.")
    status: ArticleStatus = Field(ArticleStatus.DRAFT, title="Article Status")
    category_id: Optional[int] = Field(None, description="Category owned by the author in the same locale.")
    tag_list: Optional[str] = Field(None, description="Comma or whitespace separated tag names.")
    cover_image_url: Optional[str] = Field(None, description="Reference to an uploaded cover image.")


class ArticleUpdate(_ArticleFields):
    title: Optional[str] = Field(None, title="Updated Title")
    content: Optional[str] = Field(None, title="Updated Content")
    locale: Optional[Locale] = Field(None, description="Only originals without a translation may change locale.")
    status: Optional[ArticleStatus] = None
    category_id: Optional[int] = None
    tag_list: Optional[str] = None
    cover_image_url: Optional[str] = None


class TranslationCreate(_ArticleFields):
    """Fields accepted for a translation; its locale and owner come from the original."""

    title: str
    content: str
    status: ArticleStatus = ArticleStatus.DRAFT
    category_id: Optional[int] = None
    tag_list: Optional[str] = None
    cover_image_url: Optional[str] = None


class TranslationUpdate(_ArticleFields):
    title: Optional[str] = None
    content: Optional[str] = None
    status: Optional[ArticleStatus] = None
    category_id: Optional[int] = None
    tag_list: Optional[str] = None
    cover_image_url: Optional[str] = None


class TranslationDraft(BaseModel):
    """Pre-filled values for a new translation form."""

    original_article_id: int
    title: str
    content: str
    locale: str
    tag_list: str
    category_id: Optional[int] = None


class TranslationSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    locale: str
    status: ArticleStatus
    published_at: Optional[datetime] = None


class ArticleResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True, use_enum_values=True)

    id: int
    title: str
    content: str
    locale: str
    status: ArticleStatus
    published_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime
    user_id: int
    category_id: Optional[int] = None
    original_article_id: Optional[int] = None
    cover_image_url: Optional[str] = None
    is_original: bool
    is_translation: bool
    category: Optional[CategoryBrief] = None
    tags: list[TagResponse] = []


class DashboardArticleResponse(ArticleResponse):
    tag_list: str = ""
    translation: Optional[TranslationSummary] = None


class ArticleSummary(BaseModel):
    """Listing entry for public pages and search results."""

    model_config = ConfigDict(from_attributes=True, use_enum_values=True)

    id: int
    title: str
    locale: str
    status: ArticleStatus
    published_at: Optional[datetime] = None
    created_at: datetime
    user_id: int
    cover_image_url: Optional[str] = None
    category: Optional[CategoryBrief] = None
    tags: list[TagResponse] = []
    content_preview: str = ""
    translation_id: Optional[int] = None


class ArticleDetail(ArticleSummary):
    content: str
    content_html: str
    original_article_id: Optional[int] = None
    comment_count: int = 0


class ArticleListingResponse(BaseModel):
    """Public listing page for one author in one locale."""

    username: str
    display_name: str
    locale: str
    blog: BlogAppearance
    current_category: Optional[CategoryBrief] = None
    current_tag: Optional[TagResponse] = None
    articles: PageResponse[ArticleSummary]


class ArticlePage(BaseModel):
    """A single public article together with its comments."""

    username: str
    display_name: str
    blog: BlogAppearance
    article: ArticleDetail
    comments: list[CommentResponse] = []


class ExportResponse(BaseModel):
    filename: str
    content: str


class PreviewRequest(BaseModel):
    content: str = ""


class PreviewResponse(BaseModel):
    html: str
