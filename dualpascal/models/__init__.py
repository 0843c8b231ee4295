from .article import Article, ArticleStatus
from .article_tags import article_tags
from .blog_setting import BlogSetting, LayoutStyle, ThemeColor
from .category import Category
from .comment import Comment
from .contact import Contact
from .tag import Tag
from .user import RoleEnum, User, UserStatus

__all__ = [
    "Article",
    "ArticleStatus",
    "article_tags",
    "BlogSetting",
    "LayoutStyle",
    "ThemeColor",
    "Category",
    "Comment",
    "Contact",
    "Tag",
    "RoleEnum",
    "User",
    "UserStatus",
]
