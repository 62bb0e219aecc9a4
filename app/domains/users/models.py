"""Users 도메인 모델 정의

인증 게이트웨이(identity broker)와 동기화되는 사용자 모델입니다.
ID는 게이트웨이에서 제공되며, 자동 증가하지 않습니다.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from app.core.database import Base


class User(Base):
    """사용자 모델 (인증 게이트웨이 동기화용)

    게시글 작성자, 평점/댓글 작성자를 식별합니다.
    name은 "이름 성" 형태의 전체 이름으로 저장합니다.
    """

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(
        primary_key=True,
        autoincrement=False,
        comment="인증 게이트웨이에서 제공하는 사용자 ID",
    )
    username: Mapped[str] = mapped_column(
        String(15),
        unique=True,
        nullable=False,
        comment="사용자명 (영숫자 5~15자)",
    )
    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        comment="이메일",
    )
    name: Mapped[Optional[str]] = mapped_column(
        String(255), nullable=True, comment="전체 이름"
    )
    bio: Mapped[Optional[str]] = mapped_column(
        Text, nullable=True, comment="자기소개"
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
        comment="생성 일시",
    )
    updated_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
        onupdate=func.now(),
        nullable=True,
        comment="수정 일시",
    )
    deleted_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True), nullable=True, comment="삭제 일시 (Soft Delete)"
    )
    last_sync_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True), nullable=True, comment="마지막 동기화 일시"
    )

    def __repr__(self) -> str:
        return (
            f"<User(id={self.id}, username={self.username}, "
            f"deleted_at={self.deleted_at})>"
        )
