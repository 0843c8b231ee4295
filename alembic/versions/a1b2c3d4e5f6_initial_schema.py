"""Initial schema

Revision ID: a1b2c3d4e5f6
Revises:
Create Date: 2026-10-17 09:00:00.000000

Creates users, blog settings, categories, tags, articles (with the
self-referential original/translation link), article tags, comments and
contacts.
"""

from collections.abc import Sequence
from typing import Union

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "a1b2c3d4e5f6"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
    ]


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("username", sa.String(), nullable=False),
        sa.Column("email", sa.String(), nullable=False),
        sa.Column("hashed_password", sa.String(), nullable=False),
        sa.Column("role", sa.Enum("user", "admin", name="roleenum"), nullable=False),
        sa.Column("status", sa.Enum("active", "suspended", "pending", name="userstatus"), nullable=False),
        sa.Column("nickname_ja", sa.String(), nullable=True),
        sa.Column("nickname_en", sa.String(), nullable=True),
        sa.Column("bio_ja", sa.Text(), nullable=True),
        sa.Column("bio_en", sa.Text(), nullable=True),
        sa.Column("location_ja", sa.String(), nullable=True),
        sa.Column("location_en", sa.String(), nullable=True),
        sa.Column("website", sa.String(), nullable=True),
        sa.Column("avatar_url", sa.String(), nullable=True),
        sa.Column("twitter_handle", sa.String(), nullable=True),
        sa.Column("facebook_handle", sa.String(), nullable=True),
        sa.Column("linkedin_handle", sa.String(), nullable=True),
        sa.Column("github_handle", sa.String(), nullable=True),
        sa.Column("qiita_handle", sa.String(), nullable=True),
        sa.Column("zenn_handle", sa.String(), nullable=True),
        sa.Column("hatena_handle", sa.String(), nullable=True),
        sa.Column("umami_website_id", sa.String(), nullable=True),
        sa.Column("umami_share_url", sa.String(), nullable=True),
        sa.Column("analytics_setup_completed", sa.Boolean(), nullable=False, server_default=sa.false()),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email"),
    )
    op.create_index("ix_users_id", "users", ["id"])
    op.create_index("ix_users_username", "users", ["username"], unique=True)
    op.create_index("ix_users_role", "users", ["role"])

    op.create_table(
        "blog_settings",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("blog_title_ja", sa.String(), nullable=True),
        sa.Column("blog_title_en", sa.String(), nullable=True),
        sa.Column("blog_subtitle_ja", sa.String(), nullable=True),
        sa.Column("blog_subtitle_en", sa.String(), nullable=True),
        sa.Column(
            "theme_color",
            sa.Enum("DEFAULT", "SLATE", "FOREST", "MAROON", "MIDNIGHT", name="themecolor"),
            nullable=False,
        ),
        sa.Column("layout_style", sa.Enum("LINEAR", "HERO_TILES", "HERO_LIST", name="layoutstyle"), nullable=False),
        sa.Column("show_hero_thumbnail", sa.Boolean(), nullable=False, server_default=sa.true()),
        *_timestamps(),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id"),
    )
    op.create_index("ix_blog_settings_id", "blog_settings", ["id"])

    op.create_table(
        "categories",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("locale", sa.String(length=2), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("user_id", sa.Integer(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id", "locale", "name", name="uq_categories_user_locale_name"),
    )
    op.create_index("ix_categories_id", "categories", ["id"])
    op.create_index("ix_categories_locale", "categories", ["locale"])
    op.create_index("ix_categories_user_id", "categories", ["user_id"])

    op.create_table(
        "tags",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id", "name", name="uq_tags_user_name"),
    )
    op.create_index("ix_tags_id", "tags", ["id"])
    op.create_index("ix_tags_user_id", "tags", ["user_id"])

    op.create_table(
        "articles",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("title", sa.String(), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("locale", sa.String(length=2), nullable=False),
        sa.Column("status", sa.Enum("DRAFT", "PUBLISHED", name="articlestatus"), nullable=False),
        sa.Column("published_at", sa.DateTime(), nullable=True),
        sa.Column("cover_image_url", sa.String(), nullable=True),
        *_timestamps(),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("category_id", sa.Integer(), nullable=True),
        sa.Column("original_article_id", sa.Integer(), nullable=True),
        sa.CheckConstraint("locale IN ('ja', 'en')", name="ck_articles_locale"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["category_id"], ["categories.id"], ondelete="SET NULL"),
        sa.ForeignKeyConstraint(["original_article_id"], ["articles.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("original_article_id"),
    )
    op.create_index("ix_articles_id", "articles", ["id"])
    op.create_index("ix_articles_published_at", "articles", ["published_at"])
    op.create_index("ix_articles_user_id", "articles", ["user_id"])
    op.create_index("ix_articles_category_id", "articles", ["category_id"])
    op.create_index("ix_articles_user_locale_status", "articles", ["user_id", "locale", "status"])

    op.create_table(
        "article_tags",
        sa.Column("article_id", sa.Integer(), nullable=False),
        sa.Column("tag_id", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["article_id"], ["articles.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["tag_id"], ["tags.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("article_id", "tag_id"),
    )
    op.create_index("ix_article_tags_tag_id", "article_tags", ["tag_id"])

    op.create_table(
        "comments",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("article_id", sa.Integer(), nullable=False),
        sa.Column("author_name", sa.String(), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("website", sa.String(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(["article_id"], ["articles.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_comments_id", "comments", ["id"])
    op.create_index("ix_comments_article_id", "comments", ["article_id"])

    op.create_table(
        "contacts",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("email", sa.String(), nullable=False),
        sa.Column("subject", sa.String(), nullable=False),
        sa.Column("message", sa.Text(), nullable=False),
        sa.Column("resolved", sa.Boolean(), nullable=False, server_default=sa.false()),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_contacts_id", "contacts", ["id"])
    op.create_index("ix_contacts_resolved", "contacts", ["resolved"])


def downgrade() -> None:
    op.drop_table("contacts")
    op.drop_table("comments")
    op.drop_table("article_tags")
    op.drop_table("articles")
    op.drop_table("tags")
    op.drop_table("categories")
    op.drop_table("blog_settings")
    op.drop_table("users")
    sa.Enum(name="articlestatus").drop(op.get_bind(), checkfirst=True)
    sa.Enum(name="layoutstyle").drop(op.get_bind(), checkfirst=True)
    sa.Enum(name="themecolor").drop(op.get_bind(), checkfirst=True)
    sa.Enum(name="userstatus").drop(op.get_bind(), checkfirst=True)
    sa.Enum(name="roleenum").drop(op.get_bind(), checkfirst=True)
