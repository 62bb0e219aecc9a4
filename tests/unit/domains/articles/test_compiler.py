"""검색 조건 컴파일러 테스트"""

from datetime import datetime

import pytest

from app.core.utils.datetime import UTC
from app.domains.articles.search import (
    Between,
    CompiledPredicate,
    Equals,
    MatchKind,
    PartialMatch,
    PredicateBuilder,
    SearchCriteria,
    SetContains,
    compile_criteria,
    split_tags,
)


class TestCompileCriteria:
    """compile_criteria() 테스트"""

    def test_empty_criteria_produces_empty_predicate(self):
        """조건이 없으면 빈 predicate (전체 조회)"""
        predicate = compile_criteria(SearchCriteria())

        assert predicate.is_empty
        assert len(predicate) == 0

    def test_none_criteria(self):
        assert compile_criteria(None).is_empty

    def test_blank_values_are_ignored(self):
        """빈 문자열/공백은 조건 없음"""
        predicate = compile_criteria(
            SearchCriteria(author="", term="   ", tags=" , ,", category_id="")
        )

        assert predicate.is_empty

    def test_author_partial_match(self):
        predicate = compile_criteria(SearchCriteria(author=" alice "))

        rule = predicate.get("author")
        assert isinstance(rule, PartialMatch)
        assert rule.kind == MatchKind.PARTIAL_MATCH
        assert rule.value == "alice"
        assert rule.columns == ("author",)

    def test_term_targets_title_and_description(self):
        predicate = compile_criteria(SearchCriteria(term="python"))

        rule = predicate.get("term")
        assert isinstance(rule, PartialMatch)
        assert rule.columns == ("title", "description")

    def test_date_range_both_bounds(self):
        predicate = compile_criteria(
            SearchCriteria(start_date="2024-01-01", end_date="2024-12-31")
        )

        rule = predicate.get("created_at")
        assert isinstance(rule, Between)
        assert rule.kind == MatchKind.BETWEEN
        assert rule.lower == datetime(2024, 1, 1, tzinfo=UTC)
        # 날짜만 있는 끝 경계는 그날 전체 포함
        assert rule.upper == datetime(2024, 12, 31, 23, 59, 59, 999999, tzinfo=UTC)

    def test_end_bound_with_time_is_kept(self):
        rule = compile_criteria(
            SearchCriteria(start_date="2024-01-01", end_date="2024-12-31T12:00:00Z")
        ).get("created_at")

        assert rule.upper == datetime(2024, 12, 31, 12, tzinfo=UTC)

    def test_last_representable_date_does_not_raise(self):
        rule = compile_criteria(
            SearchCriteria(start_date="2024-01-01", end_date="9999-12-31")
        ).get("created_at")

        assert rule.upper == datetime(9999, 12, 31, tzinfo=UTC)

    @pytest.mark.parametrize(
        "start, end",
        [
            ("2024-01-01", None),
            (None, "2024-12-31"),
            ("2024-01-01", ""),
            ("2024-01-01", "not-a-date"),
        ],
    )
    def test_single_date_bound_is_dropped(self, start, end):
        """한쪽 경계만 있으면 날짜 조건 전체를 생략"""
        predicate = compile_criteria(
            SearchCriteria(start_date=start, end_date=end)
        )

        assert predicate.get("created_at") is None
        assert predicate.is_empty

    def test_datetime_bounds_are_accepted(self):
        start = datetime(2024, 1, 1)
        end = datetime(2024, 2, 1, tzinfo=UTC)

        rule = compile_criteria(
            SearchCriteria(start_date=start, end_date=end)
        ).get("created_at")

        assert rule.lower.tzinfo == UTC
        assert rule.upper == end

    def test_tags_set_contains(self):
        """tags="a,b,c"는 {a, b, c} 모두 포함"""
        predicate = compile_criteria(SearchCriteria(tags="a,b,c"))

        rule = predicate.get("tags")
        assert isinstance(rule, SetContains)
        assert rule.values == frozenset({"a", "b", "c"})

    def test_tags_are_trimmed_and_deduplicated(self):
        rule = compile_criteria(SearchCriteria(tags=" a , b,,a ")).get("tags")

        assert rule.values == frozenset({"a", "b"})

    def test_category_id_numeric(self):
        rule = compile_criteria(SearchCriteria(category_id="3")).get(
            "category_id"
        )

        assert isinstance(rule, Equals)
        assert rule.value == 3

    @pytest.mark.parametrize("value", ["abc", "1.5", "-2", None])
    def test_non_numeric_category_id_is_omitted(self, value):
        """정수로 변환되지 않는 categoryId는 조건 없음으로 처리"""
        predicate = compile_criteria(SearchCriteria(category_id=value))

        assert predicate.get("category_id") is None

    @pytest.mark.parametrize("value", ["9" * 25, str(2**31)])
    def test_oversized_category_id_is_omitted(self, value):
        """INTEGER 컬럼 범위를 넘는 categoryId는 조건 없음"""
        predicate = compile_criteria(SearchCriteria(category_id=value))

        assert predicate.is_empty

    def test_category_id_at_column_limit(self):
        rule = compile_criteria(SearchCriteria(category_id=str(2**31 - 1))).get(
            "category_id"
        )

        assert rule == Equals(field="category_id", value=2**31 - 1)

    def test_all_fields_combined(self):
        predicate = compile_criteria(
            SearchCriteria(
                author="alice",
                term="fastapi",
                start_date="2024-01-01",
                end_date="2024-06-30",
                tags="python",
                category_id="1",
            )
        )

        assert predicate.fields == frozenset(
            {"author", "term", "created_at", "tags", "category_id"}
        )
        assert len(predicate) == 5

    def test_compile_is_deterministic(self):
        criteria = SearchCriteria(author="bob", tags="x,y")

        assert compile_criteria(criteria) == compile_criteria(criteria)


class TestSplitTags:
    def test_from_string(self):
        assert split_tags("python, fastapi ,") == ["python", "fastapi"]

    def test_from_list(self):
        assert split_tags([" a", "b ", "a"]) == ["a", "b"]

    def test_none(self):
        assert split_tags(None) == []


class TestPredicateBuilder:
    """PredicateBuilder 테스트"""

    def test_skips_none_rules(self):
        predicate = (
            PredicateBuilder()
            .add(None)
            .add(Equals(field="category_id", value=1))
            .build()
        )

        assert isinstance(predicate, CompiledPredicate)
        assert len(predicate) == 1
        assert predicate.get("category_id") == Equals(
            field="category_id", value=1
        )
