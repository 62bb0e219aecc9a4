"""Articles 도메인 모듈

게시글 작성/조회, 조건 검색, 랭킹, 평점을 담당하는 도메인입니다.

- search/: 검색 조건 컴파일
- ranking.py: 랭킹 전략 선택
- service.py: 목록 조회(컴파일 → 페이지 계산 → 저장소 조회)
"""

from app.domains.articles.exceptions import (
    ArticleErrorCode,
    ArticleNotFoundException,
    ArticleSlugAlreadyExistsException,
    UnknownRankingStrategyException,
)
from app.domains.articles.models import Article, ArticleView, Rating

__all__ = [
    "Article",
    "Rating",
    "ArticleView",
    "ArticleErrorCode",
    "ArticleNotFoundException",
    "ArticleSlugAlreadyExistsException",
    "UnknownRankingStrategyException",
]
