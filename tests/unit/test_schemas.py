"""공통 응답 스키마 테스트"""

from app.core.schemas import (
    APIResponse,
    ErrorDetail,
    ErrorResponse,
    create_list_response,
    create_response,
)
from app.core.utils.pagination import paginate


class TestAPIResponse:
    """단일 응답 스키마 테스트"""

    def test_create_response(self):
        response = create_response(data={"id": 1}, message="조회 성공")

        assert isinstance(response, APIResponse)
        assert response.success is True
        assert response.message == "조회 성공"
        assert response.data == {"id": 1}

    def test_default_message(self):
        response = create_response()

        assert response.data is None
        assert response.message == "요청이 성공적으로 처리되었습니다."


class TestListAPIResponse:
    """목록 응답 스키마 테스트"""

    def test_page_meta_is_flattened(self):
        """페이지 메타 필드가 results와 같은 수준에 포함"""
        meta = paginate(total_count=42, limit=10, offset=10)

        response = create_list_response(results=["a", "b"], meta=meta)
        body = response.model_dump()

        assert body["results"] == ["a", "b"]
        assert body["total_count"] == 42
        assert body["page_size"] == 10
        assert body["current_offset"] == 10
        assert body["total_pages"] == 5
        assert body["has_next_page"] is True
        assert body["has_previous_page"] is True
        assert body["next_offset"] == 20
        assert body["previous_offset"] == 0
        assert "meta" not in body

    def test_empty_results(self):
        meta = paginate(total_count=0, limit=10, offset=0)

        response = create_list_response(results=[], meta=meta)

        assert response.results == []
        assert response.has_next_page is False


class TestErrorResponse:
    def test_error_response(self):
        response = ErrorResponse(
            message="게시글을 찾을 수 없습니다.",
            errors=["게시글을 찾을 수 없습니다."],
            error=ErrorDetail(
                code="ARTICLE_NOT_FOUND", message="게시글을 찾을 수 없습니다."
            ),
        )

        assert response.success is False
        assert response.error.detail is None
