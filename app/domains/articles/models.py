"""Articles 도메인 모델 정의

게시글, 평점, 조회 기록 모델입니다.
"""

from datetime import datetime
from typing import TYPE_CHECKING, Optional

from sqlalchemy import (
    CheckConstraint,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    SmallInteger,
    String,
    Text,
    UniqueConstraint,
    func,
    text,
)
from sqlalchemy.dialects.postgresql import ARRAY
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.database import Base
from app.domains.categories.models import Category
from app.domains.users.models import User

if TYPE_CHECKING:
    from app.domains.comments.models import Comment


class Article(Base):
    """게시글 모델"""

    __tablename__ = "articles"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True, comment="게시글 ID"
    )
    slug: Mapped[str] = mapped_column(
        String(255), unique=True, nullable=False, comment="URL slug"
    )
    title: Mapped[str] = mapped_column(
        String(255), nullable=False, comment="제목"
    )
    description: Mapped[str] = mapped_column(
        Text, nullable=False, comment="요약 설명"
    )
    body: Mapped[str] = mapped_column(Text, nullable=False, comment="본문")
    taglist: Mapped[list[str]] = mapped_column(
        ARRAY(String),
        nullable=False,
        default=list,
        server_default=text("'{}'"),
        comment="태그 목록 (PostgreSQL ARRAY)",
    )

    # Foreign Keys
    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        comment="작성자 ID",
    )
    category_id: Mapped[int] = mapped_column(
        ForeignKey("categories.id"),
        nullable=False,
        server_default=text("1"),
        comment="카테고리 ID",
    )

    # Timestamps
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

    # Relationships (비동기 세션에서는 selectinload로 명시적 로딩)
    author: Mapped[User] = relationship(User, lazy="raise")
    category: Mapped[Category] = relationship(Category, lazy="raise")
    ratings: Mapped[list["Rating"]] = relationship(
        back_populates="article",
        cascade="all, delete-orphan",
        passive_deletes=True,
        lazy="raise",
    )
    comments: Mapped[list["Comment"]] = relationship(
        back_populates="article",
        cascade="all, delete-orphan",
        passive_deletes=True,
        lazy="raise",
        order_by="Comment.created_at",
    )

    __table_args__ = (
        Index("ix_articles_created_at", "created_at"),
        Index("ix_articles_user_id", "user_id"),
        Index("ix_articles_category_id", "category_id"),
        Index("ix_articles_taglist", "taglist", postgresql_using="gin"),
    )

    @property
    def average_rating(self) -> Optional[float]:
        """평균 평점 (ratings가 로딩된 경우만 사용)"""
        if not self.ratings:
            return None
        return round(
            sum(r.rating for r in self.ratings) / len(self.ratings), 1
        )

    @property
    def ratings_count(self) -> int:
        """평점 수 (ratings가 로딩된 경우만 사용)"""
        return len(self.ratings)

    def __repr__(self) -> str:
        return (
            f"<Article(id={self.id}, slug={self.slug}, "
            f"user_id={self.user_id}, category_id={self.category_id})>"
        )


class Rating(Base):
    """게시글 평점 모델 (사용자당 게시글 하나에 1개)"""

    __tablename__ = "ratings"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True, comment="평점 ID"
    )
    article_id: Mapped[int] = mapped_column(
        ForeignKey("articles.id", ondelete="CASCADE"),
        nullable=False,
        comment="게시글 ID",
    )
    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        comment="평가한 사용자 ID",
    )
    rating: Mapped[int] = mapped_column(
        SmallInteger, nullable=False, comment="평점 (1~5)"
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

    article: Mapped[Article] = relationship(
        back_populates="ratings", lazy="raise"
    )

    __table_args__ = (
        UniqueConstraint("user_id", "article_id", name="uq_ratings_user_article"),
        CheckConstraint("rating BETWEEN 1 AND 5", name="ck_ratings_range"),
        Index("ix_ratings_article_id", "article_id"),
    )

    def __repr__(self) -> str:
        return (
            f"<Rating(article_id={self.article_id}, "
            f"user_id={self.user_id}, rating={self.rating})>"
        )


class ArticleView(Base):
    """게시글 조회 기록 (식별된 호출자만 기록)"""

    __tablename__ = "article_views"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True, comment="조회 기록 ID"
    )
    article_id: Mapped[int] = mapped_column(
        ForeignKey("articles.id", ondelete="CASCADE"),
        nullable=False,
        comment="게시글 ID",
    )
    viewer_id: Mapped[int] = mapped_column(
        Integer, nullable=False, comment="조회한 사용자 ID"
    )
    viewed_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
        comment="조회 일시",
    )

    __table_args__ = (
        Index("ix_article_views_article_id", "article_id"),
    )

    def __repr__(self) -> str:
        return (
            f"<ArticleView(article_id={self.article_id}, "
            f"viewer_id={self.viewer_id})>"
        )


# 관계 문자열("Comment") 해석을 위해 매퍼 구성 전에 로딩
from app.domains.comments.models import Comment  # noqa: E402, F401
