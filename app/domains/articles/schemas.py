"""Articles 도메인 스키마 정의

게시글 작성/수정/검색/랭킹을 위한 Pydantic 스키마입니다.
"""

from datetime import datetime
from typing import Optional, Union

from fastapi import Query
from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.domains.articles.search import SearchCriteria, split_tags
from app.domains.comments.schemas import CommentResponse
from app.domains.users.schemas import AuthorSummary

SLUG_PATTERN = r"^[a-z0-9]+(?:-[a-z0-9]+)*$"

# Request Schemas


class ArticleCreateRequest(BaseModel):
    """게시글 작성 요청"""

    title: str = Field(..., min_length=6, max_length=255, description="제목")
    description: str = Field(..., min_length=6, description="요약 설명")
    body: str = Field(..., min_length=6, description="본문")
    slug: Optional[str] = Field(
        None, max_length=255, pattern=SLUG_PATTERN, description="URL slug"
    )
    taglist: list[str] = Field(
        default_factory=list, description="태그 (쉼표 구분 문자열 또는 목록)"
    )
    category_id: Optional[int] = Field(None, gt=0, description="카테고리 ID")

    @field_validator("taglist", mode="before")
    @classmethod
    def parse_taglist(cls, v: Union[str, list[str], None]) -> list[str]:
        tags = split_tags(v)
        if len(tags) > 50:
            raise ValueError("태그는 최대 50개까지 허용됩니다.")
        return tags


class ArticleUpdateRequest(BaseModel):
    """게시글 수정 요청 (전달된 필드만 수정)"""

    title: Optional[str] = Field(None, min_length=6, max_length=255)
    description: Optional[str] = Field(None, min_length=6)
    body: Optional[str] = Field(None, min_length=6)


class RatingRequest(BaseModel):
    """게시글 평점 요청"""

    rating: int = Field(..., ge=1, le=5, description="평점 (1~5)")


class ArticleSearchParams:
    """게시글 검색 쿼리 파라미터 의존성

    값 검증은 하지 않고 원본 그대로 SearchCriteria로 전달합니다.
    """

    def __init__(
        self,
        author: Optional[str] = Query(None, description="작성자 username"),
        term: Optional[str] = Query(None, description="제목/설명 검색어"),
        start_date: Optional[str] = Query(
            None, alias="startDate", description="작성일 시작 (ISO 8601)"
        ),
        end_date: Optional[str] = Query(
            None, alias="endDate", description="작성일 끝 (ISO 8601)"
        ),
        tags: Optional[str] = Query(None, description="태그 (쉼표 구분)"),
        category_id: Optional[str] = Query(
            None, alias="categoryId", description="카테고리 ID"
        ),
    ):
        self.author = author
        self.term = term
        self.start_date = start_date
        self.end_date = end_date
        self.tags = tags
        self.category_id = category_id

    def to_criteria(self) -> SearchCriteria:
        return SearchCriteria(
            author=self.author,
            term=self.term,
            start_date=self.start_date,
            end_date=self.end_date,
            tags=self.tags,
            category_id=self.category_id,
        )


# Response Schemas


class CategorySummary(BaseModel):
    """게시글에 포함되는 카테고리 요약"""

    model_config = ConfigDict(from_attributes=True)

    id: int
    category_name: str


class ArticleResponse(BaseModel):
    """게시글 응답"""

    model_config = ConfigDict(from_attributes=True)

    id: int
    slug: str
    title: str
    description: str
    body: str
    taglist: list[str] = Field(default_factory=list)
    user_id: int
    category_id: int
    author: Optional[AuthorSummary] = None
    category: Optional[CategorySummary] = None
    created_at: datetime
    updated_at: Optional[datetime] = None


class ArticleDetailResponse(ArticleResponse):
    """게시글 상세 응답 (평점, 댓글 포함)"""

    average_rating: Optional[float] = None
    ratings_count: int = 0
    comments: list[CommentResponse] = Field(default_factory=list)


class RankedArticleResponse(ArticleResponse):
    """랭킹 게시글 응답

    score는 전략별 값입니다. (ratings: 평균 평점, comments: 댓글 수,
    latest: None)
    """

    score: Optional[float] = None


class RankingAPIResponse(BaseModel):
    """랭킹 API 응답"""

    success: bool = True
    message: str = "요청이 성공적으로 처리되었습니다."
    type: str
    amount: int
    articles: list[RankedArticleResponse] = Field(default_factory=list)


class RatingResponse(BaseModel):
    """평점 응답"""

    model_config = ConfigDict(from_attributes=True)

    id: int
    article_id: int
    user_id: int
    rating: int
    created_at: datetime
    updated_at: Optional[datetime] = None
