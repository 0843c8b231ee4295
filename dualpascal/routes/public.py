"""
Public blog routes.

Everything here is read-only except comment submission, and every path
carries an explicit locale that is threaded into the queries.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from dualpascal.database import get_db
from dualpascal.exceptions import ArticleNotFoundError
from dualpascal.i18n import Locale
from dualpascal.models.article import ArticleStatus
from dualpascal.presenters import article_detail, article_summary, page_response
from dualpascal.schemas.article import ArticleListingResponse, ArticlePage, ArticleSummary
from dualpascal.schemas.category import CategoryBrief
from dualpascal.schemas.comment import CommentCreate, CommentResponse
from dualpascal.schemas.pagination import PageResponse
from dualpascal.schemas.tag import TagResponse
from dualpascal.schemas.user import PublicProfile
from dualpascal.services import blog_setting_service, search_service, user_service
from dualpascal.services.article_service import load_article
from dualpascal.services.comment_service import CommentService
from dualpascal.services.listing_service import ArticleFilterQuery

router = APIRouter()

logger = logging.getLogger(__name__)


@router.get("/{locale}/u/{username}/articles", response_model=ArticleListingResponse)
async def list_articles(
    locale: Locale,
    username: str,
    category_id: Optional[int] = Query(None),
    tag_id: Optional[int] = Query(None),
    page: int = Query(1, ge=1),
    db: AsyncSession = Depends(get_db),
):
    user = await user_service.get_user_by_username(db, username)
    query = ArticleFilterQuery(locale=locale.value, user=user, category_id=category_id, tag_id=tag_id)
    articles = await query.paginate(db, page)
    category = await query.current_category(db)
    tag = await query.current_tag(db)
    setting = await blog_setting_service.get_or_create_blog_setting(db, user)

    return ArticleListingResponse(
        username=user.username,
        display_name=user_service.display_name(user, locale),
        locale=locale.value,
        blog=blog_setting_service.appearance(setting, locale),
        current_category=CategoryBrief.model_validate(category) if category else None,
        current_tag=TagResponse.model_validate(tag) if tag else None,
        articles=page_response(articles, ArticleSummary, article_summary),
    )


@router.get("/{locale}/u/{username}/articles/{article_id}", response_model=ArticlePage)
async def show_article(locale: Locale, username: str, article_id: int, db: AsyncSession = Depends(get_db)):
    user = await user_service.get_user_by_username(db, username)
    article = await load_article(db, article_id)
    if (
        article is None
        or article.user_id != user.id
        or article.status != ArticleStatus.PUBLISHED
        or article.locale != locale.value
    ):
        raise ArticleNotFoundError(article_id)

    comments = await CommentService(db).list_comments_for_article(article.id)
    setting = await blog_setting_service.get_or_create_blog_setting(db, user)
    return ArticlePage(
        username=user.username,
        display_name=user_service.display_name(user, locale),
        blog=blog_setting_service.appearance(setting, locale),
        article=article_detail(article, comment_count=len(comments)),
        comments=[CommentResponse.model_validate(c) for c in comments],
    )


@router.post(
    "/{locale}/u/{username}/articles/{article_id}/comments",
    response_model=CommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    locale: Locale,
    username: str,
    article_id: int,
    comment: CommentCreate,
    db: AsyncSession = Depends(get_db),
):
    user = await user_service.get_user_by_username(db, username)
    return await CommentService(db).create_comment(article_id, comment, author=user)


@router.get("/{locale}/u/{username}/profile", response_model=PublicProfile)
async def show_profile(locale: Locale, username: str, db: AsyncSession = Depends(get_db)):
    user = await user_service.get_user_by_username(db, username)
    return await user_service.build_public_profile(db, user, locale.value)


@router.get("/{locale}/search", response_model=PageResponse[ArticleSummary])
async def search(
    locale: Locale,
    q: Optional[str] = Query(None, max_length=200),
    username: Optional[str] = Query(None),
    page: int = Query(1, ge=1),
    db: AsyncSession = Depends(get_db),
):
    user = await user_service.get_user_by_username(db, username) if username else None
    results = await search_service.search_articles(db, q, locale.value, page, user=user)
    return page_response(results, ArticleSummary, article_summary)

