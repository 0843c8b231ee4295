"""
Tests for Article Service
"""

from datetime import datetime

import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from utils.mock_utils import create_test_article, create_test_category, create_test_comment, reload_article

from dualpascal.exceptions import ArticleNotFoundError, DuplicateResourceError, ValidationError
from dualpascal.models.article import Article, ArticleStatus
from dualpascal.models.comment import Comment
from dualpascal.schemas.article import ArticleCreate, ArticleUpdate
from dualpascal.services import article_service, tag_service
from dualpascal.services.article_service import mark_published


class TestCreateArticle:
    async def test_create_with_tags_and_category(self, test_db, test_user):
        category = await create_test_category(test_db, test_user, "Tech", locale="en")

        article = await article_service.create_article(
            test_db,
            test_user,
            ArticleCreate(title="Hello", content="# Hi", locale="en", category_id=category.id, tag_list="Python, web"),
        )

        assert article.id is not None
        assert article.user_id == test_user.id
        assert article.locale == "en"
        assert article.status == ArticleStatus.DRAFT
        assert article.published_at is None
        assert article.category.name == "Tech"
        assert sorted(t.name for t in article.tags) == ["python", "web"]
        assert article.is_original

    async def test_publishing_sets_published_at(self, test_db, test_user):
        article = await article_service.create_article(
            test_db, test_user, ArticleCreate(title="Live", content="body", status=ArticleStatus.PUBLISHED)
        )

        assert article.published_at is not None

    async def test_category_from_other_locale_rejected(self, test_db, test_user):
        category = await create_test_category(test_db, test_user, "技術", locale="ja")

        with pytest.raises(ValidationError) as exc_info:
            await article_service.create_article(
                test_db, test_user, ArticleCreate(title="t", content="c", locale="en", category_id=category.id)
            )
        assert exc_info.value.details["field"] == "category_id"

    async def test_category_of_other_user_rejected(self, test_db, test_user, other_user):
        category = await create_test_category(test_db, other_user, "技術", locale="ja")

        with pytest.raises(ValidationError):
            await article_service.create_article(
                test_db, test_user, ArticleCreate(title="t", content="c", category_id=category.id)
            )

    def test_blank_title_rejected_by_schema(self):
        from pydantic import ValidationError as PydanticValidationError

        with pytest.raises(PydanticValidationError):
            ArticleCreate(title="   ", content="body")


class TestUpdateArticle:
    async def test_published_at_kept_after_unpublish(self, test_db, test_user):
        article = await create_test_article(test_db, test_user, published_at=datetime(2024, 5, 1))

        updated = await article_service.update_article(
            test_db, test_user, article.id, ArticleUpdate(status=ArticleStatus.DRAFT)
        )
        assert updated.published_at == datetime(2024, 5, 1)

        republished = await article_service.update_article(
            test_db, test_user, article.id, ArticleUpdate(status=ArticleStatus.PUBLISHED)
        )
        assert republished.published_at == datetime(2024, 5, 1)

    async def test_locale_change_drops_category(self, test_db, test_user):
        category = await create_test_category(test_db, test_user, "技術", locale="ja")
        article = await create_test_article(test_db, test_user, category=category)

        updated = await article_service.update_article(test_db, test_user, article.id, ArticleUpdate(locale="en"))

        assert updated.locale == "en"
        assert updated.category_id is None

    async def test_omitted_tag_list_keeps_tags(self, test_db, test_user):
        article = await article_service.create_article(
            test_db, test_user, ArticleCreate(title="t", content="c", tag_list="ruby")
        )

        updated = await article_service.update_article(test_db, test_user, article.id, ArticleUpdate(title="new"))

        assert updated.title == "new"
        assert [t.name for t in updated.tags] == ["ruby"]

    async def test_other_users_article_not_found(self, test_db, test_user, other_user):
        article = await create_test_article(test_db, other_user)

        with pytest.raises(ArticleNotFoundError):
            await article_service.update_article(test_db, test_user, article.id, ArticleUpdate(title="x"))


class TestDeleteArticle:
    async def test_delete_removes_comments(self, test_db, test_user):
        article = await create_test_article(test_db, test_user)
        comment = await create_test_comment(test_db, article)

        await article_service.delete_article(test_db, test_user, article.id)

        assert await reload_article(test_db, article.id) is None
        test_db.expunge_all()
        assert await test_db.get(Comment, comment.id) is None


def test_mark_published_only_stamps_once():
    from dualpascal.models.article import Article

    article = Article(status=ArticleStatus.PUBLISHED)
    mark_published(article, now=datetime(2024, 1, 1))
    mark_published(article, now=datetime(2025, 1, 1))
    assert article.published_at == datetime(2024, 1, 1)

    draft = Article(status=ArticleStatus.DRAFT)
    mark_published(draft)
    assert draft.published_at is None


async def conflicting_resolve(db, user_id, text):
    """Stands in for a concurrent request that inserted the same tag first."""
    raise IntegrityError("INSERT INTO tags", {}, Exception("UNIQUE constraint failed: tags.user_id, tags.name"))


class TestIntegrityConflicts:
    async def test_concurrent_tag_insert_is_a_tag_conflict(self, test_db, test_user, monkeypatch):
        monkeypatch.setattr(tag_service, "resolve_tags", conflicting_resolve)

        with pytest.raises(DuplicateResourceError) as exc_info:
            await article_service.create_article(
                test_db, test_user, ArticleCreate(title="t", content="c", tag_list="Go")
            )

        assert exc_info.value.status_code == 409
        assert exc_info.value.details == {"resource_type": "Tag", "field": "name", "value": "go"}
        count = await test_db.execute(select(func.count(Article.id)))
        assert count.scalar_one() == 0

    async def test_second_translation_row_conflicts_on_commit(self, test_db, test_user):
        original = await create_test_article(test_db, test_user)
        original_id = original.id
        await create_test_article(test_db, test_user, locale="en", original=original)
        duplicate = Article(
            title="t", content="c", locale="en", user_id=test_user.id, original_article_id=original_id, tags=[]
        )
        test_db.add(duplicate)

        with pytest.raises(DuplicateResourceError) as exc_info:
            await article_service.commit_article(test_db, duplicate, "create")

        assert exc_info.value.status_code == 409
        assert exc_info.value.details["resource_type"] == "Translation"
        assert exc_info.value.details["value"] == original_id
