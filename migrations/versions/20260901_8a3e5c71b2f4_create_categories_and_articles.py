"""create_categories_and_articles

Revision ID: 8a3e5c71b2f4
Revises: 4f1c2a9b7d10
Create Date: 2026-09-01 10:30:00.000000

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "8a3e5c71b2f4"
down_revision: Union[str, None] = "4f1c2a9b7d10"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """업그레이드 마이그레이션: categories, articles, ratings, article_views"""
    categories = op.create_table(
        "categories",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column(
            "category_name",
            sa.String(length=30),
            nullable=False,
            comment="카테고리 이름",
        ),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
            comment="생성 일시",
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("category_name"),
    )

    # 기본 카테고리 (id=1, 게시글 category_id 기본값)
    op.bulk_insert(categories, [{"category_name": "General"}])

    op.create_table(
        "articles",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column(
            "slug", sa.String(length=255), nullable=False, comment="URL slug"
        ),
        sa.Column(
            "title", sa.String(length=255), nullable=False, comment="제목"
        ),
        sa.Column("description", sa.Text(), nullable=False, comment="요약 설명"),
        sa.Column("body", sa.Text(), nullable=False, comment="본문"),
        sa.Column(
            "taglist",
            postgresql.ARRAY(sa.String()),
            server_default=sa.text("'{}'"),
            nullable=False,
            comment="태그 목록 (PostgreSQL ARRAY)",
        ),
        sa.Column("user_id", sa.Integer(), nullable=False, comment="작성자 ID"),
        sa.Column(
            "category_id",
            sa.Integer(),
            server_default=sa.text("1"),
            nullable=False,
            comment="카테고리 ID",
        ),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
            comment="생성 일시",
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            nullable=True,
            comment="수정 일시",
        ),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["category_id"], ["categories.id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("slug"),
    )
    op.create_index("ix_articles_created_at", "articles", ["created_at"])
    op.create_index("ix_articles_user_id", "articles", ["user_id"])
    op.create_index("ix_articles_category_id", "articles", ["category_id"])
    # 태그 포함(@>) 검색용 GIN 인덱스
    op.create_index(
        "ix_articles_taglist",
        "articles",
        ["taglist"],
        postgresql_using="gin",
    )

    op.create_table(
        "ratings",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("article_id", sa.Integer(), nullable=False, comment="게시글 ID"),
        sa.Column(
            "user_id", sa.Integer(), nullable=False, comment="평가한 사용자 ID"
        ),
        sa.Column(
            "rating", sa.SmallInteger(), nullable=False, comment="평점 (1~5)"
        ),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
            comment="생성 일시",
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            nullable=True,
            comment="수정 일시",
        ),
        sa.ForeignKeyConstraint(
            ["article_id"], ["articles.id"], ondelete="CASCADE"
        ),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "user_id", "article_id", name="uq_ratings_user_article"
        ),
        sa.CheckConstraint("rating BETWEEN 1 AND 5", name="ck_ratings_range"),
    )
    op.create_index("ix_ratings_article_id", "ratings", ["article_id"])

    op.create_table(
        "article_views",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("article_id", sa.Integer(), nullable=False, comment="게시글 ID"),
        sa.Column(
            "viewer_id", sa.Integer(), nullable=False, comment="조회한 사용자 ID"
        ),
        sa.Column(
            "viewed_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
            comment="조회 일시",
        ),
        sa.ForeignKeyConstraint(
            ["article_id"], ["articles.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ix_article_views_article_id", "article_views", ["article_id"]
    )


def downgrade() -> None:
    """다운그레이드 마이그레이션"""
    op.drop_index("ix_article_views_article_id", table_name="article_views")
    op.drop_table("article_views")
    op.drop_index("ix_ratings_article_id", table_name="ratings")
    op.drop_table("ratings")
    op.drop_index("ix_articles_taglist", table_name="articles")
    op.drop_index("ix_articles_category_id", table_name="articles")
    op.drop_index("ix_articles_user_id", table_name="articles")
    op.drop_index("ix_articles_created_at", table_name="articles")
    op.drop_table("articles")
    op.drop_table("categories")
