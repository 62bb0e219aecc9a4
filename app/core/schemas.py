"""공통 API 응답 스키마

이 모듈은 API 응답의 일관된 구조를 정의합니다.

Usage::

    # 단일 데이터 응답
    from app.core.schemas import APIResponse, create_response
    return create_response(data=article, message="게시글 조회 성공")

    # 목록 데이터 응답 (오프셋 페이지네이션)
    from app.core.schemas import ListAPIResponse, create_list_response
    from app.core.utils.pagination import paginate
    meta = paginate(total_count=100, limit=10, offset=20)
    return create_list_response(results=articles, meta=meta)

Note:
    Generic 타입의 classmethod는 Pydantic에서 제한이 있으므로,
    팩토리 함수(create_response, create_list_response)를 사용하거나
    직접 생성자를 호출하세요.
"""

from datetime import datetime
from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

DataT = TypeVar("DataT")


class BaseSchema(BaseModel):
    """기본 스키마 (ORM 모델 변환용)"""

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
    )


class TimestampMixin(BaseModel):
    """타임스탬프 믹스인"""

    created_at: datetime
    updated_at: Optional[datetime] = None


class APIResponse(BaseModel, Generic[DataT]):
    """단일 데이터 API 응답

    Example::

        @router.get("/{slug}", response_model=APIResponse[ArticleDetailResponse])
        async def get_article(slug: str):
            article = await service.get_article(slug)
            return APIResponse(
                success=True,
                data=ArticleDetailResponse.model_validate(article),
                message="게시글 조회 성공",
            )
    """

    success: bool = True
    message: str = "요청이 성공적으로 처리되었습니다."
    data: Optional[DataT] = None


class PageMeta(BaseModel):
    """오프셋 페이지네이션 메타 정보

    next_offset은 has_next_page가 True일 때만 의미가 있습니다.
    """

    total_count: int = Field(..., ge=0, description="전체 아이템 수")
    page_size: int = Field(..., gt=0, description="페이지 크기 (limit)")
    current_offset: int = Field(..., ge=0, description="현재 오프셋")
    total_pages: int = Field(..., ge=0, description="전체 페이지 수")
    has_next_page: bool = Field(..., description="다음 페이지 존재 여부")
    has_previous_page: bool = Field(..., description="이전 페이지 존재 여부")
    next_offset: int = Field(..., ge=0, description="다음 페이지 오프셋")
    previous_offset: int = Field(..., ge=0, description="이전 페이지 오프셋")


class ListAPIResponse(PageMeta, Generic[DataT]):
    """목록 데이터 API 응답 (페이지네이션 메타 필드 포함)

    Example::

        {
            "success": true,
            "message": "게시글 목록을 조회했습니다.",
            "results": [...],
            "total_count": 100,
            "page_size": 10,
            "current_offset": 20,
            "total_pages": 10,
            "has_next_page": true,
            "has_previous_page": true,
            "next_offset": 30,
            "previous_offset": 10
        }
    """

    success: bool = True
    message: str = "요청이 성공적으로 처리되었습니다."
    results: list[DataT] = Field(default_factory=list)


def create_response(
    data: Optional[DataT] = None,
    message: str = "요청이 성공적으로 처리되었습니다.",
    success: bool = True,
) -> APIResponse[DataT]:
    """API 응답 생성 팩토리 함수

    Args:
        data: 응답 데이터
        message: 응답 메시지
        success: 성공 여부

    Returns:
        APIResponse 인스턴스
    """
    return APIResponse(success=success, message=message, data=data)


def create_list_response(
    results: list[DataT],
    meta: PageMeta,
    message: str = "요청이 성공적으로 처리되었습니다.",
) -> ListAPIResponse[DataT]:
    """목록 API 응답 생성 팩토리 함수

    Args:
        results: 목록 데이터
        meta: paginate()로 계산한 페이지 메타 정보
        message: 응답 메시지

    Returns:
        ListAPIResponse 인스턴스
    """
    return ListAPIResponse(
        success=True,
        message=message,
        results=results,
        **meta.model_dump(),
    )


class ErrorDetail(BaseModel):
    """에러 상세 정보"""

    code: str = Field(..., description="에러 코드")
    message: str = Field(..., description="에러 메시지")
    detail: Optional[dict[str, Any]] = Field(default=None, description="추가 정보")


class ErrorResponse(BaseModel):
    """에러 API 응답

    Example::

        {
            "success": false,
            "message": "게시글을 찾을 수 없습니다.",
            "errors": ["게시글을 찾을 수 없습니다."],
            "error": {
                "code": "ARTICLE_NOT_FOUND",
                "message": "게시글을 찾을 수 없습니다.",
                "detail": {"slug": "hello-world"}
            }
        }
    """

    success: bool = False
    message: str
    errors: list[str] = Field(default_factory=list)
    error: ErrorDetail
