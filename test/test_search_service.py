"""
Tests for Search Service
"""

import pytest
from utils.mock_utils import create_test_article

from dualpascal.models.article import ArticleStatus
from dualpascal.services.search_service import search_articles


class TestSearchArticles:
    @pytest.mark.parametrize("keyword", [None, "", "   "])
    async def test_blank_keyword_returns_empty_page(self, test_db, test_user, keyword):
        await create_test_article(test_db, test_user, title="Anything")

        page = await search_articles(test_db, keyword, "ja", user=test_user)

        assert page.items == []
        assert page.total == 0

    async def test_case_insensitive_substring_on_title_and_content(self, test_db, test_user):
        await create_test_article(test_db, test_user, title="Python Tutorial", content="basics", locale="en")
        await create_test_article(test_db, test_user, title="Other", content="Learn PYTHON fast", locale="en")
        await create_test_article(test_db, test_user, title="JavaScript", content="closures", locale="en")

        page = await search_articles(test_db, "python", "en")

        assert sorted(a.title for a in page.items) == ["Other", "Python Tutorial"]
        assert page.filters == {"q": "python", "locale": "en"}

    async def test_only_published_in_locale(self, test_db, test_user):
        await create_test_article(test_db, test_user, title="検索 ja", locale="ja")
        await create_test_article(test_db, test_user, title="検索 en", locale="en")
        await create_test_article(test_db, test_user, title="検索 draft", locale="ja", status=ArticleStatus.DRAFT)

        page = await search_articles(test_db, "検索", "ja")

        assert [a.title for a in page.items] == ["検索 ja"]

    async def test_scoped_to_user(self, test_db, test_user, other_user):
        await create_test_article(test_db, test_user, title="fastapi mine")
        await create_test_article(test_db, other_user, title="fastapi theirs")

        page = await search_articles(test_db, "fastapi", "ja", user=test_user)

        assert [a.title for a in page.items] == ["fastapi mine"]
        assert page.filters["username"] == "testuser"

    async def test_like_wildcards_are_literal(self, test_db, test_user):
        await create_test_article(test_db, test_user, title="100% done")
        await create_test_article(test_db, test_user, title="1000 done")

        page = await search_articles(test_db, "100%", "ja")

        assert [a.title for a in page.items] == ["100% done"]

    async def test_keyword_is_trimmed(self, test_db, test_user):
        await create_test_article(test_db, test_user, title="sqlalchemy tips")

        page = await search_articles(test_db, "  sqlalchemy  ", "ja")

        assert page.total == 1
