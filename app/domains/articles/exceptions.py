"""Articles 도메인 예외 정의"""

from enum import Enum

from app.core.exceptions import (
    BadRequestException,
    ConflictException,
    NotFoundException,
)


class ArticleErrorCode(str, Enum):
    """게시글 도메인 에러 코드"""

    ARTICLE_NOT_FOUND = "ARTICLE_NOT_FOUND"
    ARTICLE_SLUG_EXISTS = "ARTICLE_SLUG_EXISTS"
    UNKNOWN_RANKING_STRATEGY = "UNKNOWN_RANKING_STRATEGY"


class ArticleNotFoundException(NotFoundException):
    """게시글을 찾을 수 없는 경우"""

    def __init__(
        self, slug: str | None = None, article_id: int | None = None
    ):
        detail: dict = {}
        if slug:
            detail["slug"] = slug
        if article_id:
            detail["article_id"] = article_id
        super().__init__(
            message="게시글을 찾을 수 없습니다.",
            error_code=ArticleErrorCode.ARTICLE_NOT_FOUND,
            detail=detail,
        )


class ArticleSlugAlreadyExistsException(ConflictException):
    """같은 slug의 게시글이 이미 있는 경우"""

    def __init__(self, slug: str | None = None):
        detail = {"slug": slug} if slug else {}
        super().__init__(
            message="이미 사용 중인 slug입니다.",
            error_code=ArticleErrorCode.ARTICLE_SLUG_EXISTS,
            detail=detail,
        )


class UnknownRankingStrategyException(BadRequestException):
    """지원하지 않는 랭킹 전략인 경우"""

    SUPPORTED = ("ratings", "latest", "comments")

    def __init__(self, strategy: str | None = None):
        super().__init__(
            message="지원하지 않는 랭킹 기준입니다.",
            error_code=ArticleErrorCode.UNKNOWN_RANKING_STRATEGY,
            detail={"type": strategy, "supported": list(self.SUPPORTED)},
        )
