"""Articles 도메인 리포지토리

CompiledPredicate와 RankingDirective를 SQLAlchemy 쿼리로 해석하는
데이터 접근 계층입니다. 모든 값은 바인드 파라미터로 전달됩니다.
"""

from typing import Any, Optional, Sequence, cast

from sqlalchemy import ColumnElement, Select, and_, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.domains.articles.models import Article, ArticleView, Rating
from app.domains.articles.ranking import Aggregate, RankingDirective
from app.domains.articles.search import (
    AUTHOR,
    CATEGORY_ID,
    CREATED_AT,
    DESCRIPTION,
    TAGS,
    TITLE,
    Between,
    CompiledPredicate,
    Equals,
    MatchRule,
    PartialMatch,
    SetContains,
)
from app.domains.comments.models import Comment
from app.domains.users.models import User

# 논리 필드명 → 컬럼
FIELD_COLUMNS: dict[str, Any] = {
    AUTHOR: User.username,
    TITLE: Article.title,
    DESCRIPTION: Article.description,
    CREATED_AT: Article.created_at,
    TAGS: Article.taglist,
    CATEGORY_ID: Article.category_id,
}

# 랭킹 조인 대상 → (모델, 게시글 FK 컬럼)
RANKING_RELATIONS: dict[str, tuple[Any, Any]] = {
    "ratings": (Rating, Rating.article_id),
    "comments": (Comment, Comment.article_id),
}


def rule_to_condition(rule: MatchRule) -> ColumnElement[bool]:
    """매칭 규칙 하나를 SQL 조건식으로 변환"""
    if isinstance(rule, Equals):
        return cast(ColumnElement[bool], FIELD_COLUMNS[rule.field] == rule.value)
    if isinstance(rule, PartialMatch):
        # LIKE 와일드카드(%, _)는 이스케이프하여 문자 그대로 매칭
        return or_(
            *(
                FIELD_COLUMNS[name].icontains(rule.value, autoescape=True)
                for name in rule.columns
            )
        )
    if isinstance(rule, Between):
        return cast(
            ColumnElement[bool],
            FIELD_COLUMNS[rule.field].between(rule.lower, rule.upper),
        )
    if isinstance(rule, SetContains):
        return cast(
            ColumnElement[bool],
            FIELD_COLUMNS[rule.field].contains(sorted(rule.values)),
        )
    raise ValueError(f"Unsupported match rule: {rule!r}")


def apply_predicate(query: Select, predicate: CompiledPredicate) -> Select:
    """검색 조건을 쿼리에 적용 (모든 규칙은 AND)"""
    if predicate.is_empty:
        return query
    if AUTHOR in predicate.fields:
        query = query.join(User, User.id == Article.user_id)
    return query.where(and_(*(rule_to_condition(rule) for rule in predicate)))


def _summary_options() -> tuple:
    return (selectinload(Article.author), selectinload(Article.category))


class ArticleRepository:
    """게시글 리포지토리"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def find(
        self, predicate: CompiledPredicate, limit: int, offset: int
    ) -> Sequence[Article]:
        """조건에 맞는 게시글 페이지 조회

        최신순(created_at, id 내림차순)으로 정렬합니다.
        """
        query = apply_predicate(select(Article), predicate)
        query = (
            query.options(*_summary_options())
            .order_by(Article.created_at.desc(), Article.id.desc())
            .offset(offset)
            .limit(limit)
        )
        result = await self.session.execute(query)
        return cast(Sequence[Article], result.scalars().all())

    async def count(self, predicate: CompiledPredicate) -> int:
        """조건에 맞는 전체 게시글 수"""
        query = apply_predicate(
            select(func.count(Article.id)).select_from(Article), predicate
        )
        result = await self.session.execute(query)
        return int(result.scalar_one())

    async def find_ranked(
        self, directive: RankingDirective
    ) -> list[tuple[Article, Optional[float]]]:
        """랭킹 지시에 따라 상위 게시글 조회

        조인이 필요한 전략은 내부 조인이므로 평점/댓글이 없는 게시글은
        결과에 포함되지 않습니다.

        Returns:
            (게시글, 점수) 목록. 조인이 없는 전략의 점수는 None
        """
        tie_breakers = [
            getattr(Article, name).desc() for name in directive.tie_breakers
        ]

        if directive.join is None:
            sort_column = getattr(Article, directive.sort_key.value)
            order = sort_column.desc() if directive.descending else sort_column.asc()
            query = (
                select(Article)
                .options(*_summary_options())
                .order_by(order, *tie_breakers)
                .limit(directive.limit)
            )
            result = await self.session.execute(query)
            return [(article, None) for article in result.scalars().all()]

        model, article_fk = RANKING_RELATIONS[directive.join.relation]
        target = getattr(model, directive.join.column)
        aggregate = (
            func.avg(target)
            if directive.join.aggregate == Aggregate.AVG
            else func.count(target)
        )
        score = aggregate.label(directive.sort_key.value)

        query = (
            select(Article, score)
            .join(model, article_fk == Article.id)
            .group_by(Article.id)
            .options(*_summary_options())
            .order_by(
                score.desc() if directive.descending else score.asc(),
                *tie_breakers,
            )
            .limit(directive.limit)
        )
        result = await self.session.execute(query)
        return [
            (article, round(float(value), 1) if value is not None else None)
            for article, value in result.all()
        ]

    async def get_by_slug(
        self, slug: str, with_details: bool = False
    ) -> Optional[Article]:
        """slug로 게시글 조회

        Args:
            slug: 게시글 slug
            with_details: 평점/댓글(작성자 포함)까지 로딩할지 여부
        """
        query = select(Article).where(Article.slug == slug).options(
            *_summary_options()
        )
        if with_details:
            query = query.options(
                selectinload(Article.ratings),
                selectinload(Article.comments).selectinload(Comment.author),
            ).execution_options(populate_existing=True)
        result = await self.session.execute(query)
        return cast(Optional[Article], result.scalar_one_or_none())

    async def get_by_id(self, article_id: int) -> Optional[Article]:
        """ID로 게시글 조회"""
        result = await self.session.execute(
            select(Article)
            .where(Article.id == article_id)
            .options(*_summary_options())
        )
        return cast(Optional[Article], result.scalar_one_or_none())

    async def slug_exists(self, slug: str) -> bool:
        result = await self.session.execute(
            select(Article.id).where(Article.slug == slug).limit(1)
        )
        return result.scalar_one_or_none() is not None

    async def _reload(self, article_id: int) -> Article:
        # 서버 기본값(created_at 등)과 관계를 다시 읽어옴
        result = await self.session.execute(
            select(Article)
            .where(Article.id == article_id)
            .options(*_summary_options())
            .execution_options(populate_existing=True)
        )
        return cast(Article, result.scalar_one())

    async def create(self, article: Article) -> Article:
        """게시글 생성 (작성자/카테고리 로딩 후 반환)"""
        self.session.add(article)
        await self.session.flush()
        return await self._reload(article.id)

    async def update(self, article: Article) -> Article:
        """게시글 수정"""
        await self.session.flush()
        return await self._reload(article.id)

    async def delete(self, article: Article) -> None:
        """게시글 삭제 (평점/댓글/조회 기록은 DB CASCADE)"""
        await self.session.delete(article)
        await self.session.flush()


class RatingRepository:
    """평점 리포지토리"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_user_article(
        self, user_id: int, article_id: int
    ) -> Optional[Rating]:
        result = await self.session.execute(
            select(Rating).where(
                Rating.user_id == user_id, Rating.article_id == article_id
            )
        )
        return cast(Optional[Rating], result.scalar_one_or_none())

    async def create(self, rating: Rating) -> Rating:
        self.session.add(rating)
        await self.session.flush()
        await self.session.refresh(rating)
        return rating

    async def update(self, rating: Rating) -> Rating:
        await self.session.flush()
        await self.session.refresh(rating)
        return rating


class ArticleViewRepository:
    """조회 기록 리포지토리"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def record(self, article_id: int, viewer_id: int) -> ArticleView:
        view = ArticleView(article_id=article_id, viewer_id=viewer_id)
        self.session.add(view)
        await self.session.flush()
        return view
