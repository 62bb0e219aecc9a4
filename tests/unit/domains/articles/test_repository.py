"""검색 조건 → SQL 변환 테스트 (DB 연결 없이 컴파일 결과 확인)"""

from datetime import datetime

import pytest
from sqlalchemy import select
from sqlalchemy.dialects import postgresql

from app.core.utils.datetime import UTC
from app.domains.articles.models import Article
from app.domains.articles.repository import apply_predicate, rule_to_condition
from app.domains.articles.search import (
    Between,
    Equals,
    PartialMatch,
    SearchCriteria,
    SetContains,
    compile_criteria,
)


def _compile(clause):
    return clause.compile(dialect=postgresql.dialect())


class TestRuleToCondition:
    """매칭 규칙별 SQL 조건식"""

    def test_equals(self):
        compiled = _compile(
            rule_to_condition(Equals(field="category_id", value=3))
        )

        assert "articles.category_id =" in str(compiled)
        assert 3 in compiled.params.values()

    def test_partial_match_or_across_targets(self):
        """term은 제목 또는 설명에 포함되면 일치"""
        compiled = _compile(
            rule_to_condition(
                PartialMatch(
                    field="term",
                    value="50%_off",
                    targets=("title", "description"),
                )
            )
        )
        sql = str(compiled)

        assert "articles.title" in sql
        assert "articles.description" in sql
        assert " OR " in sql
        assert "ESCAPE" in sql
        # 값은 바인드 파라미터로만 전달
        assert "50%_off" not in sql

    def test_between(self):
        lower = datetime(2024, 1, 1, tzinfo=UTC)
        upper = datetime(2024, 12, 31, tzinfo=UTC)
        compiled = _compile(
            rule_to_condition(
                Between(field="created_at", lower=lower, upper=upper)
            )
        )

        assert "articles.created_at BETWEEN" in str(compiled)
        assert set(compiled.params.values()) == {lower, upper}

    def test_set_contains(self):
        compiled = _compile(
            rule_to_condition(
                SetContains(field="tags", values=frozenset({"b", "a"}))
            )
        )

        assert "articles.taglist @>" in str(compiled)
        assert ["a", "b"] in compiled.params.values()

    def test_unknown_field_raises(self):
        with pytest.raises(KeyError):
            rule_to_condition(Equals(field="unknown", value=1))


class TestApplyPredicate:
    """apply_predicate() 테스트"""

    def test_empty_predicate_leaves_query_unchanged(self):
        query = select(Article)

        assert apply_predicate(query, compile_criteria(None)) is query

    def test_author_filter_joins_users(self):
        query = apply_predicate(
            select(Article), compile_criteria(SearchCriteria(author="alice"))
        )
        sql = str(_compile(query))

        assert "JOIN users ON users.id = articles.user_id" in sql
        assert "users.username" in sql

    def test_no_join_without_author(self):
        query = apply_predicate(
            select(Article),
            compile_criteria(SearchCriteria(tags="python", category_id="2")),
        )
        sql = str(_compile(query))

        assert "JOIN" not in sql
        assert "articles.taglist @>" in sql
        assert "articles.category_id =" in sql
        assert " AND " in sql
