from typing import Optional

from pydantic import BaseModel, ConfigDict

from dualpascal.models.blog_setting import LayoutStyle, ThemeColor


class BlogSettingUpdate(BaseModel):
    blog_title_ja: Optional[str] = None
    blog_title_en: Optional[str] = None
    blog_subtitle_ja: Optional[str] = None
    blog_subtitle_en: Optional[str] = None
    theme_color: Optional[ThemeColor] = None
    layout_style: Optional[LayoutStyle] = None
    show_hero_thumbnail: Optional[bool] = None


class BlogSettingResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True, use_enum_values=True)

    id: int
    user_id: int
    blog_title_ja: Optional[str] = None
    blog_title_en: Optional[str] = None
    blog_subtitle_ja: Optional[str] = None
    blog_subtitle_en: Optional[str] = None
    theme_color: ThemeColor
    layout_style: LayoutStyle
    show_hero_thumbnail: bool


class BlogAppearance(BaseModel):
    """Blog header as shown to readers in one locale."""

    title: str
    subtitle: str
    theme_color: str
    layout_style: str
    show_hero_thumbnail: bool
