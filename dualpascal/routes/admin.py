import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from dualpascal.auth import require_admin
from dualpascal.database import get_db
from dualpascal.models.user import User
from dualpascal.presenters import page_response
from dualpascal.schemas.admin import (
    AdminArticleResponse,
    AdminUserDetail,
    AdminUserRow,
    DashboardStatsResponse,
)
from dualpascal.schemas.contact import ContactResponse, ContactUpdate
from dualpascal.schemas.pagination import PageResponse
from dualpascal.schemas.user import AdminUserUpdate, UserResponse
from dualpascal.services import admin_service, contact_service

router = APIRouter(dependencies=[Depends(require_admin)])

logger = logging.getLogger(__name__)


def _user_row(row: admin_service.UserRow) -> AdminUserRow:
    return AdminUserRow(**UserResponse.model_validate(row.user).model_dump(), article_count=row.article_count)


@router.get("/dashboard", response_model=DashboardStatsResponse)
async def dashboard(db: AsyncSession = Depends(get_db)):
    return await admin_service.dashboard_stats(db)


@router.get("/users", response_model=PageResponse[AdminUserRow])
async def list_users(
    search: Optional[str] = Query(None, max_length=100),
    page: int = Query(1, ge=1),
    db: AsyncSession = Depends(get_db),
):
    users = await admin_service.list_users(db, search, page)
    return page_response(users, AdminUserRow, _user_row)


@router.get("/users/{user_id}", response_model=AdminUserDetail)
async def get_user(user_id: int, db: AsyncSession = Depends(get_db)):
    user, articles = await admin_service.get_user_overview(db, user_id)
    return AdminUserDetail(
        user=UserResponse.model_validate(user),
        recent_articles=[AdminArticleResponse.model_validate(article) for article in articles],
    )


@router.patch("/users/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: int,
    body: AdminUserUpdate,
    db: AsyncSession = Depends(get_db),
    admin: User = Depends(require_admin),
):
    logger.info(f"Admin {admin.username} sets user {user_id} status to {body.status.value}")
    return await admin_service.update_user_status(db, user_id, body.status)


@router.get("/articles", response_model=PageResponse[AdminArticleResponse])
async def list_articles(page: int = Query(1, ge=1), db: AsyncSession = Depends(get_db)):
    articles = await admin_service.list_all_articles(db, page)
    return page_response(articles, AdminArticleResponse)


@router.delete("/articles/{article_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_article(article_id: int, db: AsyncSession = Depends(get_db)):
    await admin_service.delete_any_article(db, article_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/contacts", response_model=PageResponse[ContactResponse])
async def list_contacts(page: int = Query(1, ge=1), db: AsyncSession = Depends(get_db)):
    contacts = await contact_service.list_contacts(db, page)
    return page_response(contacts, ContactResponse)


@router.get("/contacts/{contact_id}", response_model=ContactResponse)
async def get_contact(contact_id: int, db: AsyncSession = Depends(get_db)):
    return await contact_service.get_contact(db, contact_id)


@router.patch("/contacts/{contact_id}", response_model=ContactResponse)
async def update_contact(contact_id: int, body: ContactUpdate, db: AsyncSession = Depends(get_db)):
    return await contact_service.set_contact_resolved(db, contact_id, body.resolved)
