"""create_comments_table

Revision ID: c61d0e4f9a27
Revises: 8a3e5c71b2f4
Create Date: 2026-09-02 09:00:00.000000

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "c61d0e4f9a27"
down_revision: Union[str, None] = "8a3e5c71b2f4"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """업그레이드 마이그레이션: comments 테이블 생성"""
    op.create_table(
        "comments",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("article_id", sa.Integer(), nullable=False, comment="게시글 ID"),
        sa.Column("user_id", sa.Integer(), nullable=False, comment="작성자 ID"),
        sa.Column("comment", sa.Text(), nullable=False, comment="댓글 내용"),
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
    )
    op.create_index("ix_comments_article_id", "comments", ["article_id"])


def downgrade() -> None:
    """다운그레이드 마이그레이션: comments 테이블 삭제"""
    op.drop_index("ix_comments_article_id", table_name="comments")
    op.drop_table("comments")
