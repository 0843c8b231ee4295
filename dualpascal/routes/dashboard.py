"""
Author dashboard routes.

All endpoints act on behalf of the authenticated user; resources belonging
to someone else are reported as not found.
"""

import logging
from urllib.parse import quote

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from dualpascal.auth import get_current_user
from dualpascal.database import get_db
from dualpascal.i18n import Locale
from dualpascal.models.user import User
from dualpascal.presenters import dashboard_article, page_response
from dualpascal.schemas.article import (
    ArticleCreate,
    ArticleUpdate,
    DashboardArticleResponse,
    ExportResponse,
    PreviewRequest,
    PreviewResponse,
    TranslationCreate,
    TranslationDraft,
    TranslationUpdate,
)
from dualpascal.schemas.blog_setting import BlogSettingResponse, BlogSettingUpdate
from dualpascal.schemas.category import (
    CategoryCreate,
    CategoryIndexResponse,
    CategoryResponse,
    CategoryUpdate,
    CategoryWithCount,
)
from dualpascal.schemas.comment import DashboardCommentResponse
from dualpascal.schemas.pagination import PageResponse
from dualpascal.schemas.tag import TagResponse
from dualpascal.schemas.user import AnalyticsOverview, ProfileResponse, ProfileUpdate
from dualpascal.services import (
    article_service,
    blog_setting_service,
    category_service,
    export_service,
    translation_service,
    user_service,
)
from dualpascal.services.analytics_service import analytics_overview
from dualpascal.services.comment_service import CommentService
from dualpascal.services.listing_service import list_dashboard_articles
from dualpascal.services.markdown_service import render_markdown
from dualpascal.services.tag_service import list_tags_for_user

router = APIRouter()

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Articles
# ---------------------------------------------------------------------------


@router.get("/articles", response_model=PageResponse[DashboardArticleResponse])
async def list_articles(
    page: int = Query(1, ge=1),
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    articles = await list_dashboard_articles(db, current_user, page)
    return page_response(articles, DashboardArticleResponse, dashboard_article)


@router.post("/articles", response_model=DashboardArticleResponse, status_code=status.HTTP_201_CREATED)
async def create_article(
    article: ArticleCreate,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    created = await article_service.create_article(db, current_user, article)
    return dashboard_article(created)


@router.get("/articles/{article_id}", response_model=DashboardArticleResponse)
async def get_article(
    article_id: int,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return dashboard_article(await article_service.get_owned_article(db, current_user, article_id))


@router.patch("/articles/{article_id}", response_model=DashboardArticleResponse)
async def update_article(
    article_id: int,
    article: ArticleUpdate,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    updated = await article_service.update_article(db, current_user, article_id, article)
    return dashboard_article(updated)


@router.delete("/articles/{article_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_article(
    article_id: int,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    await article_service.delete_article(db, current_user, article_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/articles/{article_id}/export")
async def export_article(
    article_id: int,
    download: bool = Query(True),
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    article = await article_service.get_owned_article(db, current_user, article_id)
    filename, body = export_service.export_article_markdown(article)
    if not download:
        return ExportResponse(filename=filename, content=body)
    return Response(
        content=body,
        media_type="text/markdown; charset=utf-8",
        headers={"Content-Disposition": f"attachment; filename*=UTF-8''{quote(filename)}"},
    )


# ---------------------------------------------------------------------------
# Translation of an original article
# ---------------------------------------------------------------------------


@router.get("/articles/{article_id}/translation/new", response_model=TranslationDraft)
async def new_translation(
    article_id: int,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return await translation_service.build_translation_draft(db, current_user, article_id)


@router.post(
    "/articles/{article_id}/translation",
    response_model=DashboardArticleResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_translation(
    article_id: int,
    translation: TranslationCreate,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    created = await translation_service.create_translation(db, current_user, article_id, translation)
    return dashboard_article(created)


@router.get("/articles/{article_id}/translation", response_model=DashboardArticleResponse)
async def get_translation(
    article_id: int,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return dashboard_article(await translation_service.get_translation(db, current_user, article_id))


@router.patch("/articles/{article_id}/translation", response_model=DashboardArticleResponse)
async def update_translation(
    article_id: int,
    translation: TranslationUpdate,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    updated = await translation_service.update_translation(db, current_user, article_id, translation)
    return dashboard_article(updated)


@router.delete("/articles/{article_id}/translation", status_code=status.HTTP_204_NO_CONTENT)
async def delete_translation(
    article_id: int,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    await translation_service.delete_translation(db, current_user, article_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/preview", response_model=PreviewResponse)
async def preview(body: PreviewRequest, current_user: User = Depends(get_current_user)):
    return PreviewResponse(html=render_markdown(body.content))


# ---------------------------------------------------------------------------
# Categories and tags
# ---------------------------------------------------------------------------


@router.get("/categories", response_model=CategoryIndexResponse)
async def list_categories(db: AsyncSession = Depends(get_db), current_user: User = Depends(get_current_user)):
    return CategoryIndexResponse(
        ja=await category_service.list_categories(db, current_user, Locale.JA.value),
        en=await category_service.list_categories(db, current_user, Locale.EN.value),
    )


@router.get("/categories/{locale}", response_model=list[CategoryWithCount])
async def list_categories_for_locale(
    locale: Locale,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return await category_service.list_categories(db, current_user, locale.value)


@router.post("/categories", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED)
async def create_category(
    category: CategoryCreate,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return await category_service.create_category(db, current_user, category)


@router.patch("/categories/{category_id}", response_model=CategoryResponse)
async def update_category(
    category_id: int,
    category: CategoryUpdate,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return await category_service.update_category(db, current_user, category_id, category)


@router.delete("/categories/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_category(
    category_id: int,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    await category_service.delete_category(db, current_user, category_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/tags", response_model=list[TagResponse])
async def list_tags(db: AsyncSession = Depends(get_db), current_user: User = Depends(get_current_user)):
    return await list_tags_for_user(db, current_user.id)


# ---------------------------------------------------------------------------
# Comments
# ---------------------------------------------------------------------------


@router.get("/comments", response_model=PageResponse[DashboardCommentResponse])
async def list_comments(
    page: int = Query(1, ge=1),
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    comments = await CommentService(db).list_comments_for_owner(current_user, page)
    return page_response(comments, DashboardCommentResponse)


@router.get("/comments/{comment_id}", response_model=DashboardCommentResponse)
async def get_comment(
    comment_id: int,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return await CommentService(db).get_comment(current_user, comment_id)


@router.delete("/comments/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_comment(
    comment_id: int,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    await CommentService(db).delete_comment(current_user, comment_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# ---------------------------------------------------------------------------
# Profile, blog setting, analytics
# ---------------------------------------------------------------------------


@router.get("/profile", response_model=ProfileResponse)
async def get_profile(current_user: User = Depends(get_current_user)):
    return current_user


@router.patch("/profile", response_model=ProfileResponse)
async def update_profile(
    profile: ProfileUpdate,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return await user_service.update_profile(db, current_user, profile)


@router.get("/blog-setting", response_model=BlogSettingResponse)
async def get_blog_setting(db: AsyncSession = Depends(get_db), current_user: User = Depends(get_current_user)):
    return await blog_setting_service.get_or_create_blog_setting(db, current_user)


@router.patch("/blog-setting", response_model=BlogSettingResponse)
async def update_blog_setting(
    blog_setting: BlogSettingUpdate,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return await blog_setting_service.update_blog_setting(db, current_user, blog_setting)


@router.get("/analytics", response_model=AnalyticsOverview)
async def get_analytics(current_user: User = Depends(get_current_user)):
    return analytics_overview(current_user)
