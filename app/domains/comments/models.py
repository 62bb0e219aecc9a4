"""Comments 도메인 모델 정의"""

from datetime import datetime
from typing import TYPE_CHECKING, Optional

from sqlalchemy import DateTime, ForeignKey, Index, Integer, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.database import Base
from app.domains.users.models import User

if TYPE_CHECKING:
    from app.domains.articles.models import Article


class Comment(Base):
    """게시글 댓글 모델"""

    __tablename__ = "comments"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True, comment="댓글 ID"
    )
    article_id: Mapped[int] = mapped_column(
        ForeignKey("articles.id", ondelete="CASCADE"),
        nullable=False,
        comment="게시글 ID",
    )
    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        comment="작성자 ID",
    )
    comment: Mapped[str] = mapped_column(
        Text, nullable=False, comment="댓글 내용"
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

    article: Mapped["Article"] = relationship(
        back_populates="comments", lazy="raise"
    )
    author: Mapped[User] = relationship(User, lazy="raise")

    __table_args__ = (Index("ix_comments_article_id", "article_id"),)

    def __repr__(self) -> str:
        return (
            f"<Comment(id={self.id}, article_id={self.article_id}, "
            f"user_id={self.user_id})>"
        )
