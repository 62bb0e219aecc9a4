"""Articles 도메인 서비스

게시글 검색/목록(검색 조건 컴파일 → 페이지 계산 → 저장소 조회),
랭킹, 작성/수정/삭제, 평점 로직을 담당합니다.
"""

import re
import uuid
from dataclasses import dataclass, field
from typing import Optional, Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.core.database import bounded_read
from app.core.exceptions import ForbiddenException
from app.core.logging import get_logger
from app.core.middlewares.context import get_request_id
from app.core.schemas import PageMeta
from app.core.utils.pagination import PageParams, paginate
from app.domains.articles.exceptions import (
    ArticleNotFoundException,
    ArticleSlugAlreadyExistsException,
)
from app.domains.articles.models import Article, Rating
from app.domains.articles.ranking import RankingDirective, select_ranking
from app.domains.articles.repository import (
    ArticleRepository,
    ArticleViewRepository,
    RatingRepository,
)
from app.domains.articles.schemas import (
    ArticleCreateRequest,
    ArticleUpdateRequest,
)
from app.domains.articles.search import SearchCriteria, compile_criteria
from app.domains.categories.exceptions import CategoryNotFoundException
from app.domains.categories.repository import CategoryRepository
from app.domains.users.exceptions import UserNotFoundException
from app.domains.users.repository import UserRepository

logger = get_logger(__name__)

_SLUG_STRIP = re.compile(r"[^a-z0-9]+")


def slugify(title: str) -> str:
    """제목으로 고유 slug 생성 (소문자-하이픈 + 8자리 접미사)

    Example::

        slugify("Hello, World!")  # "hello-world-1a2b3c4d"
    """
    base = _SLUG_STRIP.sub("-", title.lower()).strip("-")[:200]
    suffix = uuid.uuid4().hex[:8]
    return f"{base}-{suffix}" if base else suffix


@dataclass
class ListingResult:
    """목록 조회 결과 (게시글 페이지 + 페이지 메타)"""

    items: list[Article] = field(default_factory=list)
    meta: Optional[PageMeta] = None


class ArticleService:
    """게시글 서비스

    리포지토리는 생성자에서 주입할 수 있으며, 생략하면 세션으로 생성합니다.
    """

    def __init__(
        self,
        session: AsyncSession,
        repository: Optional[ArticleRepository] = None,
        rating_repository: Optional[RatingRepository] = None,
        view_repository: Optional[ArticleViewRepository] = None,
        user_repository: Optional[UserRepository] = None,
        category_repository: Optional[CategoryRepository] = None,
    ):
        self.session = session
        self.repository = repository or ArticleRepository(session)
        self.rating_repository = rating_repository or RatingRepository(session)
        self.view_repository = view_repository or ArticleViewRepository(session)
        self.user_repository = user_repository or UserRepository(session)
        self.category_repository = category_repository or CategoryRepository(
            session
        )

    # 목록 / 검색

    async def search_articles(
        self,
        criteria: Optional[SearchCriteria],
        page: PageParams,
        timeout: Optional[float] = None,
    ) -> ListingResult:
        """조건 검색 + 페이지 조회

        count와 fetch는 같은 세션(트랜잭션)에서 순서대로 실행됩니다.
        READ COMMITTED 격리 수준에서는 두 문장 사이에 커밋된 변경이
        total_count와 결과 목록에 다르게 반영될 수 있습니다.

        Args:
            criteria: 검색 조건 (None이면 전체 목록)
            page: 오프셋/페이지 크기
            timeout: 저장소 조회 제한 시간 (초)

        Returns:
            ListingResult: 게시글 목록과 페이지 메타

        Raises:
            StorageUnavailableException: 조회 시간 초과 또는 DB 오류
        """
        predicate = compile_criteria(criteria)

        total_count = await bounded_read(
            self.repository.count(predicate),
            timeout=timeout,
            operation="articles.count",
        )
        items: Sequence[Article] = await bounded_read(
            self.repository.find(predicate, limit=page.limit, offset=page.offset),
            timeout=timeout,
            operation="articles.find",
        )
        meta = paginate(total_count, page.limit, page.offset)

        logger.info(
            "Articles listed",
            extra={
                "request_id": get_request_id(),
                "filters": sorted(predicate.fields),
                "total_count": meta.total_count,
                "offset": meta.current_offset,
                "limit": meta.page_size,
            },
        )
        return ListingResult(items=list(items), meta=meta)

    async def list_articles(
        self, page: PageParams, timeout: Optional[float] = None
    ) -> ListingResult:
        """필터 없는 전체 목록"""
        return await self.search_articles(None, page, timeout=timeout)

    async def get_ranked_articles(
        self,
        strategy: Optional[str],
        amount: object = None,
        timeout: Optional[float] = None,
    ) -> tuple[RankingDirective, list[tuple[Article, Optional[float]]]]:
        """랭킹 상위 게시글 조회

        Raises:
            UnknownRankingStrategyException: 알 수 없는 전략
            StorageUnavailableException: 조회 시간 초과 또는 DB 오류
        """
        directive = select_ranking(strategy, amount)
        ranked = await bounded_read(
            self.repository.find_ranked(directive),
            timeout=timeout,
            operation=f"articles.rank.{directive.strategy.value}",
        )
        return directive, ranked

    # 단건 조회 / 작성

    async def get_article(
        self, slug: str, viewer_id: Optional[int] = None
    ) -> Article:
        """게시글 상세 조회

        식별된 호출자(viewer_id)가 있을 때만 조회 기록을 남깁니다.

        Raises:
            ArticleNotFoundException: 게시글이 없는 경우
        """
        article = await bounded_read(
            self.repository.get_by_slug(slug, with_details=True),
            operation="articles.get",
        )
        if not article:
            raise ArticleNotFoundException(slug=slug)

        if viewer_id is not None:
            await self.view_repository.record(article.id, viewer_id)
        return article

    async def create_article(
        self, data: ArticleCreateRequest, author_id: int
    ) -> Article:
        """게시글 작성

        Raises:
            UserNotFoundException: 작성자가 동기화되지 않은 경우
            CategoryNotFoundException: 카테고리가 없는 경우
            ArticleSlugAlreadyExistsException: slug 중복
        """
        if not await self.user_repository.get_by_id(author_id):
            raise UserNotFoundException(user_id=author_id)

        category_id = data.category_id or settings.default_category_id
        if not await self.category_repository.get_by_id(category_id):
            raise CategoryNotFoundException(category_id=category_id)

        slug = data.slug or slugify(data.title)
        if await self.repository.slug_exists(slug):
            raise ArticleSlugAlreadyExistsException(slug=slug)

        article = await self.repository.create(
            Article(
                slug=slug,
                title=data.title,
                description=data.description,
                body=data.body,
                taglist=data.taglist,
                user_id=author_id,
                category_id=category_id,
            )
        )

        logger.info(
            "Article created",
            extra={
                "request_id": get_request_id(),
                "article_id": article.id,
                "user_id": author_id,
            },
        )
        return article

    async def update_article(
        self, slug: str, data: ArticleUpdateRequest, user_id: int
    ) -> Article:
        """게시글 수정 (작성자만 가능)

        Raises:
            ArticleNotFoundException: 게시글이 없는 경우
            ForbiddenException: 작성자가 아닌 경우
        """
        article = await self._get_owned(slug, user_id)

        for key, value in data.model_dump(exclude_unset=True).items():
            if value is not None:
                setattr(article, key, value)
        article = await self.repository.update(article)

        logger.info(
            "Article updated",
            extra={"request_id": get_request_id(), "article_id": article.id},
        )
        return article

    async def delete_article(self, slug: str, user_id: int) -> None:
        """게시글 삭제 (작성자만 가능)"""
        article = await self._get_owned(slug, user_id)
        await self.repository.delete(article)

        logger.info(
            "Article deleted",
            extra={"request_id": get_request_id(), "article_id": article.id},
        )

    async def rate_article(
        self, article_id: int, user_id: int, rating: int
    ) -> tuple[Rating, bool]:
        """게시글 평점 등록 (이미 있으면 수정)

        Returns:
            (평점, 새로 생성 여부)

        Raises:
            UserNotFoundException: 평가자가 동기화되지 않은 경우
            ArticleNotFoundException: 게시글이 없는 경우
        """
        if not await self.user_repository.get_by_id(user_id):
            raise UserNotFoundException(user_id=user_id)

        article = await self.repository.get_by_id(article_id)
        if not article:
            raise ArticleNotFoundException(article_id=article_id)

        existing = await self.rating_repository.get_by_user_article(
            user_id, article_id
        )
        if existing:
            existing.rating = rating
            return await self.rating_repository.update(existing), False

        created = await self.rating_repository.create(
            Rating(article_id=article_id, user_id=user_id, rating=rating)
        )
        logger.info(
            "Article rated",
            extra={
                "request_id": get_request_id(),
                "article_id": article_id,
                "user_id": user_id,
            },
        )
        return created, True

    async def _get_owned(self, slug: str, user_id: int) -> Article:
        article = await self.repository.get_by_slug(slug)
        if not article:
            raise ArticleNotFoundException(slug=slug)
        if article.user_id != user_id:
            raise ForbiddenException(message="게시글 작성자만 수정할 수 있습니다.")
        return article
