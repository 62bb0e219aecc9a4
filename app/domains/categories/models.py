"""Categories 도메인 모델 정의"""

from datetime import datetime

from sqlalchemy import DateTime, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column

from app.core.database import Base


class Category(Base):
    """게시글 카테고리 모델

    id=1 ("General") 카테고리는 마이그레이션에서 기본으로 생성됩니다.
    """

    __tablename__ = "categories"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
        comment="카테고리 ID",
    )
    category_name: Mapped[str] = mapped_column(
        String(30),
        unique=True,
        nullable=False,
        comment="카테고리 이름",
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
        comment="생성 일시",
    )

    def __repr__(self) -> str:
        return f"<Category(id={self.id}, name={self.category_name})>"
