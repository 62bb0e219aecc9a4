"""create_users_table

Revision ID: 4f1c2a9b7d10
Revises:
Create Date: 2026-09-01 10:00:00.000000

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "4f1c2a9b7d10"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """업그레이드 마이그레이션: users 테이블 생성"""
    op.create_table(
        "users",
        sa.Column(
            "id",
            sa.Integer(),
            nullable=False,
            autoincrement=False,
            comment="인증 게이트웨이에서 제공하는 사용자 ID",
        ),
        sa.Column(
            "username",
            sa.String(length=15),
            nullable=False,
            comment="사용자명 (영숫자 5~15자)",
        ),
        sa.Column(
            "email", sa.String(length=255), nullable=False, comment="이메일"
        ),
        sa.Column(
            "name", sa.String(length=255), nullable=True, comment="전체 이름"
        ),
        sa.Column("bio", sa.Text(), nullable=True, comment="자기소개"),
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
        sa.Column(
            "deleted_at",
            sa.DateTime(timezone=True),
            nullable=True,
            comment="삭제 일시 (Soft Delete)",
        ),
        sa.Column(
            "last_sync_at",
            sa.DateTime(timezone=True),
            nullable=True,
            comment="마지막 동기화 일시",
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("username"),
        sa.UniqueConstraint("email"),
    )

    # Soft Delete를 위한 부분 인덱스 (deleted_at IS NULL인 레코드만 인덱싱)
    op.create_index(
        "idx_users_active",
        "users",
        ["id"],
        unique=False,
        postgresql_where=sa.text("deleted_at IS NULL"),
    )


def downgrade() -> None:
    """다운그레이드 마이그레이션: users 테이블 삭제"""
    op.drop_index("idx_users_active", table_name="users")
    op.drop_table("users")
