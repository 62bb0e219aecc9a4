"""게시글 랭킹 전략

전략 이름과 개수를 저장소 계층이 해석하는 정렬 지시(RankingDirective)로
변환합니다. 쿼리 문자열을 만들지 않으므로 사용자 입력이 SQL에 섞이지
않습니다.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from app.core.config import settings
from app.core.utils.pagination import coerce_int
from app.domains.articles.exceptions import UnknownRankingStrategyException


class RankingStrategy(str, Enum):
    """랭킹 전략"""

    RATINGS = "ratings"  # 평균 평점
    LATEST = "latest"  # 최신 작성
    COMMENTS = "comments"  # 댓글 수


class SortKey(str, Enum):
    """정렬 기준"""

    AVERAGE_RATING = "average_rating"
    CREATED_AT = "created_at"
    COMMENT_COUNT = "comment_count"


class Aggregate(str, Enum):
    """조인 대상 집계 함수"""

    AVG = "avg"
    COUNT = "count"


@dataclass(frozen=True)
class JoinSpec:
    """랭킹 계산을 위한 조인 정보

    Attributes:
        relation: 조인할 관계 ("ratings" / "comments")
        aggregate: 집계 함수
        column: 집계 대상 컬럼
    """

    relation: str
    aggregate: Aggregate
    column: str


@dataclass(frozen=True)
class RankingDirective:
    """정렬 지시

    동점은 created_at 내림차순, id 내림차순으로 정렬합니다.
    """

    strategy: RankingStrategy
    sort_key: SortKey
    limit: int
    join: Optional[JoinSpec] = None
    descending: bool = True
    tie_breakers: tuple[str, ...] = ("created_at", "id")


_STRATEGIES: dict[RankingStrategy, tuple[SortKey, Optional[JoinSpec]]] = {
    RankingStrategy.RATINGS: (
        SortKey.AVERAGE_RATING,
        JoinSpec(relation="ratings", aggregate=Aggregate.AVG, column="rating"),
    ),
    RankingStrategy.LATEST: (SortKey.CREATED_AT, None),
    RankingStrategy.COMMENTS: (
        SortKey.COMMENT_COUNT,
        JoinSpec(relation="comments", aggregate=Aggregate.COUNT, column="id"),
    ),
}


def resolve_amount(
    amount: Any,
    default: Optional[int] = None,
    maximum: Optional[int] = None,
) -> int:
    """요청 개수 보정

    숫자가 아니거나 1 미만이면 기본값, 최대값을 넘으면 최대값으로 맞춥니다.
    """
    default = default or settings.ranking_default_amount
    maximum = maximum or settings.ranking_max_amount
    return min(coerce_int(amount, default, minimum=1), maximum)


def select_ranking(
    strategy: Optional[str], amount: Any = None
) -> RankingDirective:
    """랭킹 전략 선택

    Args:
        strategy: 전략 이름 (ratings / latest / comments)
        amount: 조회할 게시글 수 (기본 5)

    Returns:
        RankingDirective: 저장소에 전달할 정렬 지시

    Raises:
        UnknownRankingStrategyException: 알 수 없는 전략 이름
    """
    name = (strategy or "").strip().lower()
    try:
        resolved = RankingStrategy(name)
    except ValueError as e:
        raise UnknownRankingStrategyException(strategy=strategy) from e

    sort_key, join = _STRATEGIES[resolved]
    return RankingDirective(
        strategy=resolved,
        sort_key=sort_key,
        limit=resolve_amount(amount),
        join=join,
    )
