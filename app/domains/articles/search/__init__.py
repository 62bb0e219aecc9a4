"""게시글 검색 모듈

- types.py: SearchCriteria, 매칭 규칙, CompiledPredicate
- compiler.py: SearchCriteria → CompiledPredicate 변환
"""

from app.domains.articles.search.compiler import (
    AUTHOR,
    CATEGORY_ID,
    CREATED_AT,
    DESCRIPTION,
    TAGS,
    TERM,
    TITLE,
    compile_criteria,
    split_tags,
)
from app.domains.articles.search.types import (
    Between,
    CompiledPredicate,
    Equals,
    MatchKind,
    MatchRule,
    PartialMatch,
    PredicateBuilder,
    SearchCriteria,
    SetContains,
)

__all__ = [
    "SearchCriteria",
    "CompiledPredicate",
    "PredicateBuilder",
    "MatchKind",
    "MatchRule",
    "Equals",
    "PartialMatch",
    "Between",
    "SetContains",
    "compile_criteria",
    "split_tags",
    "AUTHOR",
    "TERM",
    "TITLE",
    "DESCRIPTION",
    "CREATED_AT",
    "TAGS",
    "CATEGORY_ID",
]
