"""게시글 검색 타입 정의

SearchCriteria는 쿼리 파라미터 원본(느슨한 타입)을 그대로 담고,
CompiledPredicate는 저장소 계층이 해석하는 매칭 규칙 목록입니다.
모든 규칙은 AND 조건으로 결합됩니다.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Iterator, Optional, Union


@dataclass
class SearchCriteria:
    """게시글 검색 조건

    Attributes:
        author: 작성자 username (부분 일치)
        term: 제목/설명 검색어 (부분 일치)
        start_date: 작성일 시작 (end_date와 함께 있을 때만 적용)
        end_date: 작성일 끝 (포함, 날짜만 주면 그날 23:59:59.999999까지)
        tags: 쉼표로 구분된 태그 (모두 포함해야 일치)
        category_id: 카테고리 ID (정수 변환 실패 시 무시)

    Example::

        criteria = SearchCriteria(
            term="python",
            tags="fastapi,sqlalchemy",
            start_date="2024-01-01",
            end_date="2024-12-31",
        )
    """

    author: Optional[str] = None
    term: Optional[str] = None
    start_date: Union[str, datetime, None] = None
    end_date: Union[str, datetime, None] = None
    tags: Optional[str] = None
    category_id: Any = None


class MatchKind(str, Enum):
    """매칭 규칙 종류"""

    EQUALS = "equals"
    PARTIAL_MATCH = "partial_match"
    BETWEEN = "between"
    SET_CONTAINS = "set_contains"


@dataclass(frozen=True)
class Equals:
    """값이 정확히 일치"""

    field: str
    value: Any
    kind: MatchKind = field(default=MatchKind.EQUALS, init=False)


@dataclass(frozen=True)
class PartialMatch:
    """대상 필드 중 하나라도 값을 포함 (대소문자 무시)"""

    field: str
    value: str
    targets: tuple[str, ...] = ()
    kind: MatchKind = field(default=MatchKind.PARTIAL_MATCH, init=False)

    @property
    def columns(self) -> tuple[str, ...]:
        return self.targets or (self.field,)


@dataclass(frozen=True)
class Between:
    """lower <= 값 <= upper"""

    field: str
    lower: datetime
    upper: datetime
    kind: MatchKind = field(default=MatchKind.BETWEEN, init=False)


@dataclass(frozen=True)
class SetContains:
    """대상 컬렉션이 values를 모두 포함"""

    field: str
    values: frozenset[str]
    kind: MatchKind = field(default=MatchKind.SET_CONTAINS, init=False)


MatchRule = Union[Equals, PartialMatch, Between, SetContains]


@dataclass(frozen=True)
class CompiledPredicate:
    """컴파일된 검색 조건 (논리 필드명 → 매칭 규칙)

    규칙이 없으면 필터 없는 전체 조회를 의미합니다.
    """

    rules: tuple[MatchRule, ...] = ()

    def __iter__(self) -> Iterator[MatchRule]:
        return iter(self.rules)

    def __len__(self) -> int:
        return len(self.rules)

    @property
    def is_empty(self) -> bool:
        return not self.rules

    @property
    def fields(self) -> frozenset[str]:
        return frozenset(rule.field for rule in self.rules)

    def get(self, field_name: str) -> Optional[MatchRule]:
        """필드에 해당하는 규칙 (없으면 None)"""
        for rule in self.rules:
            if rule.field == field_name:
                return rule
        return None


class PredicateBuilder:
    """규칙을 추가만 하는 CompiledPredicate 빌더"""

    def __init__(self) -> None:
        self._rules: list[MatchRule] = []

    def add(self, rule: Optional[MatchRule]) -> "PredicateBuilder":
        if rule is not None:
            self._rules.append(rule)
        return self

    def build(self) -> CompiledPredicate:
        return CompiledPredicate(rules=tuple(self._rules))
