import pytest
from utils.mock_utils import create_test_article, create_test_category, reload_article

from dualpascal.exceptions import CategoryNotFoundError, DuplicateResourceError
from dualpascal.models.article import ArticleStatus
from dualpascal.schemas.category import CategoryCreate, CategoryUpdate
from dualpascal.services import category_service


class TestCategoryService:
    async def test_create_and_list_by_locale(self, test_db, test_user):
        await category_service.create_category(test_db, test_user, CategoryCreate(name=" 技術 ", locale="ja"))
        await category_service.create_category(test_db, test_user, CategoryCreate(name="Tech", locale="en"))

        ja = await category_service.list_categories(test_db, test_user, "ja")
        en = await category_service.list_categories(test_db, test_user, "en")

        assert [c.name for c in ja] == ["技術"]
        assert [c.name for c in en] == ["Tech"]

    async def test_same_name_allowed_in_other_locale(self, test_db, test_user):
        await category_service.create_category(test_db, test_user, CategoryCreate(name="Tech", locale="ja"))
        created = await category_service.create_category(test_db, test_user, CategoryCreate(name="Tech", locale="en"))

        assert created.locale == "en"

    async def test_duplicate_name_in_locale_rejected(self, test_db, test_user):
        await category_service.create_category(test_db, test_user, CategoryCreate(name="Tech", locale="en"))

        with pytest.raises(DuplicateResourceError):
            await category_service.create_category(test_db, test_user, CategoryCreate(name="Tech", locale="en"))

    async def test_other_users_may_reuse_name(self, test_db, test_user, other_user):
        await category_service.create_category(test_db, test_user, CategoryCreate(name="Tech", locale="en"))
        created = await category_service.create_category(test_db, other_user, CategoryCreate(name="Tech", locale="en"))

        assert created.user_id == other_user.id

    async def test_article_counts(self, test_db, test_user):
        category = await create_test_category(test_db, test_user, "技術")
        await create_test_article(test_db, test_user, category=category)
        await create_test_article(test_db, test_user, category=category, status=ArticleStatus.DRAFT)
        await create_test_category(test_db, test_user, "空")

        counts = {c.name: c.article_count for c in await category_service.list_categories(test_db, test_user, "ja")}

        assert counts == {"技術": 2, "空": 0}

    async def test_update(self, test_db, test_user):
        category = await create_test_category(test_db, test_user, "Old", locale="en")

        updated = await category_service.update_category(
            test_db, test_user, category.id, CategoryUpdate(name="New", description="desc")
        )

        assert updated.name == "New"
        assert updated.description == "desc"

    async def test_foreign_category_not_found(self, test_db, test_user, other_user):
        category = await create_test_category(test_db, other_user, "Theirs")

        with pytest.raises(CategoryNotFoundError):
            await category_service.delete_category(test_db, test_user, category.id)

    async def test_delete_nullifies_article_references(self, test_db, test_user):
        category = await create_test_category(test_db, test_user, "技術")
        article = await create_test_article(test_db, test_user, category=category)

        await category_service.delete_category(test_db, test_user, category.id)

        article = await reload_article(test_db, article.id)
        assert article is not None
        assert article.category_id is None
        assert article.category is None
