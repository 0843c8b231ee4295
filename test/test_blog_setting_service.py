from sqlalchemy import func, select

from dualpascal.models.blog_setting import BlogSetting, LayoutStyle, ThemeColor
from dualpascal.schemas.blog_setting import BlogSettingUpdate
from dualpascal.services import blog_setting_service


class TestBlogSettingService:
    async def test_get_or_create_is_idempotent(self, test_db, test_user):
        first = await blog_setting_service.get_or_create_blog_setting(test_db, test_user)
        second = await blog_setting_service.get_or_create_blog_setting(test_db, test_user)

        assert first.id == second.id
        count = await test_db.execute(select(func.count(BlogSetting.id)).where(BlogSetting.user_id == test_user.id))
        assert count.scalar_one() == 1

    async def test_defaults(self, test_db, test_user):
        setting = await blog_setting_service.get_or_create_blog_setting(test_db, test_user)

        assert setting.theme_color == ThemeColor.SLATE
        assert setting.layout_style == LayoutStyle.LINEAR
        assert setting.show_hero_thumbnail is True
        assert blog_setting_service.display_title(setting, "ja") == "Dual Pascal"

    async def test_update_and_localized_display(self, test_db, test_user):
        setting = await blog_setting_service.update_blog_setting(
            test_db,
            test_user,
            BlogSettingUpdate(blog_title_ja="日本語ブログ", theme_color=ThemeColor.FOREST, layout_style=LayoutStyle.HERO_TILES),
        )

        assert setting.theme_color == ThemeColor.FOREST
        assert blog_setting_service.display_title(setting, "ja") == "日本語ブログ"
        # Missing English title falls back to the Japanese one
        assert blog_setting_service.display_title(setting, "en") == "日本語ブログ"

        appearance = blog_setting_service.appearance(setting, "en")
        assert appearance.layout_style == "hero_tiles"
        assert appearance.subtitle == ""

    async def test_concurrent_create_picks_up_existing_row(self, test_db, session_factory, test_user, monkeypatch):
        async with session_factory() as other_session:
            other_session.add(BlogSetting(user_id=test_user.id, blog_title_en="Created elsewhere"))
            await other_session.commit()

        real_get = blog_setting_service.get_blog_setting
        calls = []

        async def missed_first_lookup(db, user_id):
            calls.append(user_id)
            if len(calls) == 1:
                return None
            return await real_get(db, user_id)

        monkeypatch.setattr(blog_setting_service, "get_blog_setting", missed_first_lookup)

        setting = await blog_setting_service.get_or_create_blog_setting(test_db, test_user)

        assert setting.user_id == test_user.id
        assert setting.blog_title_en == "Created elsewhere"
        # The losing insert must not roll back the caller's session
        assert test_user.username == "testuser"
