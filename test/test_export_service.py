from datetime import datetime

from utils.mock_utils import create_test_article, create_test_category, create_test_tag

from dualpascal.services.export_service import export_article_markdown, sanitize_filename


class TestSanitizeFilename:
    def test_keeps_japanese_and_joins_whitespace(self):
        assert sanitize_filename("はじめての FastAPI!") == "はじめての_FastAPI"

    def test_falls_back_when_nothing_left(self):
        assert sanitize_filename("?!/") == "article"


class TestExportArticle:
    async def test_markdown_with_metadata(self, test_db, test_user):
        category = await create_test_category(test_db, test_user, "技術")
        tag = await create_test_tag(test_db, test_user, "python")
        article = await create_test_article(
            test_db,
            test_user,
            title="My Post",
            content="Body **bold**",
            category=category,
            tags=[tag],
            published_at=datetime(2024, 3, 9, 10, 0),
        )

        filename, body = export_article_markdown(article)

        assert filename == "My_Post_ja.md"
        assert body.splitlines() == [
            "# My Post",
            "",
            "**カテゴリ**: 技術",
            "**タグ**: python",
            "**投稿日**: 2024年03月09日",
            "",
            "---",
            "",
            "Body **bold**",
        ]

    async def test_uncategorized_without_tags(self, test_db, test_user):
        article = await create_test_article(test_db, test_user, title="Plain", locale="en")

        filename, body = export_article_markdown(article)

        assert filename == "Plain_en.md"
        assert "**カテゴリ**: 未設定" in body
        assert "**タグ**" not in body
