"""오프셋 페이지네이션 유틸리티

잘못된 입력은 예외 대신 기본값으로 보정합니다.
"""

import math
from typing import Any, Optional

from fastapi import Query

from app.core.config import settings
from app.core.schemas import PageMeta

DEFAULT_OFFSET = 0
DEFAULT_LIMIT = 10

# PostgreSQL 정수 컬럼 범위 (INTEGER, BIGINT)
INT32_MAX = 2**31 - 1
INT64_MAX = 2**63 - 1


def coerce_int(
    value: Any,
    default: int,
    minimum: Optional[int] = None,
    maximum: Optional[int] = None,
) -> int:
    """값을 정수로 변환 (실패하거나 범위를 벗어나면 기본값)

    Example::

        coerce_int("15", 0)                  # 15
        coerce_int("abc", 10)                # 10
        coerce_int("-3", 5, 1)               # 5
        coerce_int("9" * 25, 0, 0, INT64_MAX)  # 0
    """
    if value is None or isinstance(value, bool):
        return default
    try:
        number = int(str(value).strip())
    except (TypeError, ValueError):
        return default
    if minimum is not None and number < minimum:
        return default
    if maximum is not None and number > maximum:
        return default
    return number


def paginate(total_count: int, limit: int, offset: int) -> PageMeta:
    """페이지 메타 정보 계산

    입력은 유효 범위로 보정하며 예외를 발생시키지 않습니다.
    (음수 offset → 0, 0 이하 limit → 10, 음수 total_count → 0)

    Args:
        total_count: 조건에 맞는 전체 아이템 수
        limit: 페이지 크기
        offset: 현재 오프셋

    Returns:
        PageMeta: 다음/이전 페이지 정보가 포함된 메타 정보
    """
    total_count = max(0, coerce_int(total_count, 0))
    limit = coerce_int(limit, DEFAULT_LIMIT, minimum=1, maximum=INT64_MAX)
    offset = coerce_int(offset, DEFAULT_OFFSET, minimum=0, maximum=INT64_MAX)

    total_pages = math.ceil(total_count / limit) if total_count else 0

    return PageMeta(
        total_count=total_count,
        page_size=limit,
        current_offset=offset,
        total_pages=total_pages,
        has_next_page=offset + limit < total_count,
        has_previous_page=offset > 0,
        next_offset=offset + limit,
        previous_offset=max(0, offset - limit),
    )


class PageParams:
    """페이지네이션 파라미터 의존성

    숫자가 아닌 값도 422로 거절하지 않고 기본값으로 보정합니다.

    Example::

        from app.core.utils.pagination import PageParams, paginate
        from app.core.schemas import ListAPIResponse, create_list_response

        @router.get("", response_model=ListAPIResponse[ArticleResponse])
        async def list_articles(page_params: PageParams = Depends()):
            items, total = await service.list_items(
                offset=page_params.offset,
                limit=page_params.limit,
            )
            return create_list_response(
                results=items,
                meta=paginate(total, page_params.limit, page_params.offset),
            )
    """

    def __init__(
        self,
        offset: Optional[str] = Query(None, description="건너뛸 아이템 수"),
        limit: Optional[str] = Query(None, description="페이지 크기"),
    ):
        self.offset = coerce_int(
            offset, DEFAULT_OFFSET, minimum=0, maximum=INT64_MAX
        )
        self.limit = coerce_int(
            limit,
            settings.default_page_limit or DEFAULT_LIMIT,
            minimum=1,
            maximum=INT64_MAX,
        )

    @classmethod
    def of(cls, offset: Any = None, limit: Any = None) -> "PageParams":
        """FastAPI 외부에서 생성 (서비스/테스트용)"""
        return cls(offset=offset, limit=limit)

    def __repr__(self) -> str:
        return f"<PageParams(offset={self.offset}, limit={self.limit})>"
