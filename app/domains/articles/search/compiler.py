"""검색 조건 컴파일러

쿼리 파라미터로 받은 SearchCriteria를 CompiledPredicate로 변환합니다.
값이 없거나 비어 있는 조건은 규칙을 만들지 않으며, 어떤 입력에도
예외를 발생시키지 않습니다.
"""

from datetime import date, datetime, timedelta
from typing import Any, Optional, Union

from app.core.utils.datetime import ensure_utc, parse_iso
from app.core.utils.pagination import INT32_MAX, coerce_int
from app.domains.articles.search.types import (
    Between,
    CompiledPredicate,
    Equals,
    PartialMatch,
    PredicateBuilder,
    SearchCriteria,
    SetContains,
)

# 논리 필드명 (저장소 계층에서 컬럼으로 매핑)
AUTHOR = "author"
TERM = "term"
TITLE = "title"
DESCRIPTION = "description"
CREATED_AT = "created_at"
TAGS = "tags"
CATEGORY_ID = "category_id"


def _clean_text(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def split_tags(raw: Union[str, list[str], None]) -> list[str]:
    """쉼표 구분 태그 문자열을 목록으로 변환 (공백/빈 값 제거, 순서 유지)"""
    if raw is None:
        return []
    parts = raw.split(",") if isinstance(raw, str) else raw
    tags: list[str] = []
    for part in parts:
        tag = str(part).strip()
        if tag and tag not in tags:
            tags.append(tag)
    return tags


def _is_date_only(value: str) -> bool:
    try:
        date.fromisoformat(value.strip())
    except ValueError:
        return False
    return True


def _to_datetime(
    value: Union[str, datetime, None], end_of_day: bool = False
) -> Optional[datetime]:
    if isinstance(value, datetime):
        return ensure_utc(value)
    if not isinstance(value, str):
        return None
    parsed = parse_iso(value)
    # 날짜만 있는 끝 경계는 그날 마지막 시각까지 포함
    if parsed is not None and end_of_day and _is_date_only(value):
        try:
            return parsed + timedelta(days=1, microseconds=-1)
        except OverflowError:
            return parsed
    return parsed


def author_rule(author: Optional[str]) -> Optional[PartialMatch]:
    author = _clean_text(author)
    if author is None:
        return None
    return PartialMatch(field=AUTHOR, value=author)


def term_rule(term: Optional[str]) -> Optional[PartialMatch]:
    term = _clean_text(term)
    if term is None:
        return None
    return PartialMatch(field=TERM, value=term, targets=(TITLE, DESCRIPTION))


def date_range_rule(
    start: Union[str, datetime, None], end: Union[str, datetime, None]
) -> Optional[Between]:
    # 한쪽 경계만 있으면 범위 전체를 무시
    lower = _to_datetime(start)
    upper = _to_datetime(end, end_of_day=True)
    if lower is None or upper is None:
        return None
    return Between(field=CREATED_AT, lower=lower, upper=upper)


def tags_rule(tags: Union[str, list[str], None]) -> Optional[SetContains]:
    values = split_tags(tags)
    if not values:
        return None
    return SetContains(field=TAGS, values=frozenset(values))


def category_rule(category_id: Any) -> Optional[Equals]:
    # 정수로 변환되지 않거나 컬럼 범위를 넘는 값은 조건 없음으로 처리
    if _clean_text(category_id) is None:
        return None
    value = coerce_int(category_id, default=-1, maximum=INT32_MAX)
    if value < 0:
        return None
    return Equals(field=CATEGORY_ID, value=value)


def compile_criteria(criteria: Optional[SearchCriteria]) -> CompiledPredicate:
    """검색 조건을 매칭 규칙 목록으로 컴파일

    Args:
        criteria: 검색 조건 (None이면 빈 조건)

    Returns:
        CompiledPredicate: 값이 있는 조건에 대한 규칙만 포함
    """
    if criteria is None:
        return CompiledPredicate()

    return (
        PredicateBuilder()
        .add(author_rule(criteria.author))
        .add(term_rule(criteria.term))
        .add(date_range_rule(criteria.start_date, criteria.end_date))
        .add(tags_rule(criteria.tags))
        .add(category_rule(criteria.category_id))
        .build()
    )
