"""Articles 도메인 라우터

게시글 목록/검색/랭킹/상세/작성/수정/삭제/평점 API 엔드포인트입니다.
고정 경로(/search, /top)는 /{slug}보다 먼저 선언해야 합니다.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Path, Query, Response
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db
from app.core.dependencies import (
    get_current_user_id,
    require_current_user_id,
    verify_internal_api_key,
)
from app.core.schemas import (
    APIResponse,
    ListAPIResponse,
    create_list_response,
    create_response,
)
from app.core.utils.pagination import INT32_MAX, PageParams
from app.domains.articles.schemas import (
    ArticleCreateRequest,
    ArticleDetailResponse,
    ArticleResponse,
    ArticleSearchParams,
    ArticleUpdateRequest,
    RankedArticleResponse,
    RankingAPIResponse,
    RatingRequest,
    RatingResponse,
)
from app.domains.articles.service import ArticleService, ListingResult

router = APIRouter(dependencies=[Depends(verify_internal_api_key)])


def get_article_service(
    session: AsyncSession = Depends(get_db),
) -> ArticleService:
    """ArticleService 의존성"""
    return ArticleService(session)


def _listing_response(result: ListingResult, message: str):
    return create_list_response(
        results=[ArticleResponse.model_validate(a) for a in result.items],
        meta=result.meta,
        message=message,
    )


@router.get("", response_model=ListAPIResponse[ArticleResponse])
async def list_articles(
    page_params: PageParams = Depends(),
    service: ArticleService = Depends(get_article_service),
):
    """게시글 목록 (최신순)"""
    result = await service.list_articles(page_params)
    return _listing_response(result, "게시글 목록을 조회했습니다.")


@router.get("/search", response_model=ListAPIResponse[ArticleResponse])
async def search_articles(
    search_params: ArticleSearchParams = Depends(),
    page_params: PageParams = Depends(),
    service: ArticleService = Depends(get_article_service),
):
    """게시글 검색

    author, term, startDate/endDate, tags, categoryId 조건을 모두 만족하는
    게시글을 조회합니다. 값이 없는 조건은 무시합니다.
    """
    result = await service.search_articles(
        search_params.to_criteria(), page_params
    )
    return _listing_response(result, "게시글을 검색했습니다.")


@router.get("/top", response_model=RankingAPIResponse)
async def top_articles(
    type: Optional[str] = Query(
        None, description="랭킹 기준 (ratings / latest / comments)"
    ),
    amount: Optional[str] = Query(None, description="조회할 게시글 수"),
    service: ArticleService = Depends(get_article_service),
):
    """랭킹 상위 게시글"""
    directive, ranked = await service.get_ranked_articles(type, amount)
    articles = [
        RankedArticleResponse.model_validate(article).model_copy(
            update={"score": score}
        )
        for article, score in ranked
    ]
    return RankingAPIResponse(
        message="랭킹 게시글을 조회했습니다.",
        type=directive.strategy.value,
        amount=directive.limit,
        articles=articles,
    )


@router.post(
    "",
    response_model=APIResponse[ArticleResponse],
    status_code=201,
)
async def create_article(
    data: ArticleCreateRequest,
    user_id: int = Depends(require_current_user_id),
    service: ArticleService = Depends(get_article_service),
):
    """게시글 작성"""
    article = await service.create_article(data, user_id)
    return create_response(
        data=ArticleResponse.model_validate(article),
        message="게시글이 작성되었습니다.",
    )


@router.post(
    "/{article_id}/ratings",
    response_model=APIResponse[RatingResponse],
    status_code=201,
)
async def rate_article(
    data: RatingRequest,
    response: Response,
    article_id: int = Path(..., le=INT32_MAX),
    user_id: int = Depends(require_current_user_id),
    service: ArticleService = Depends(get_article_service),
):
    """게시글 평점 등록 (이미 평가했다면 수정, 200)"""
    rating, created = await service.rate_article(
        article_id, user_id, data.rating
    )
    if not created:
        response.status_code = 200
    return create_response(
        data=RatingResponse.model_validate(rating),
        message="평점이 등록되었습니다." if created else "평점이 수정되었습니다.",
    )


@router.get("/{slug}", response_model=APIResponse[ArticleDetailResponse])
async def get_article(
    slug: str,
    viewer_id: Optional[int] = Depends(get_current_user_id),
    service: ArticleService = Depends(get_article_service),
):
    """게시글 상세 조회 (로그인 사용자는 조회 기록)"""
    article = await service.get_article(slug, viewer_id=viewer_id)
    return create_response(
        data=ArticleDetailResponse.model_validate(article),
        message="게시글을 조회했습니다.",
    )


@router.put("/{slug}", response_model=APIResponse[ArticleResponse])
async def update_article(
    slug: str,
    data: ArticleUpdateRequest,
    user_id: int = Depends(require_current_user_id),
    service: ArticleService = Depends(get_article_service),
):
    """게시글 수정"""
    article = await service.update_article(slug, data, user_id)
    return create_response(
        data=ArticleResponse.model_validate(article),
        message="게시글이 수정되었습니다.",
    )


@router.delete("/{slug}", status_code=204)
async def delete_article(
    slug: str,
    user_id: int = Depends(require_current_user_id),
    service: ArticleService = Depends(get_article_service),
):
    """게시글 삭제"""
    await service.delete_article(slug, user_id)
    return None
