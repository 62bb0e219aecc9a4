"""Comments 도메인 라우터

게시글 댓글(/articles/{slug}/comments)과 댓글 단건(/comments/{id})
엔드포인트입니다.
"""

from fastapi import APIRouter, Depends, Path
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db
from app.core.dependencies import (
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
from app.domains.comments.schemas import (
    CommentCreateRequest,
    CommentResponse,
    CommentUpdateRequest,
)
from app.domains.comments.service import CommentService

article_comments_router = APIRouter(
    dependencies=[Depends(verify_internal_api_key)]
)
router = APIRouter(dependencies=[Depends(verify_internal_api_key)])


def get_comment_service(
    session: AsyncSession = Depends(get_db),
) -> CommentService:
    """CommentService 의존성"""
    return CommentService(session)


@article_comments_router.get(
    "/{slug}/comments", response_model=ListAPIResponse[CommentResponse]
)
async def list_comments(
    slug: str,
    page_params: PageParams = Depends(),
    service: CommentService = Depends(get_comment_service),
):
    """게시글 댓글 목록"""
    comments, meta = await service.list_comments(slug, page_params)
    return create_list_response(
        results=[CommentResponse.model_validate(c) for c in comments],
        meta=meta,
        message="댓글 목록을 조회했습니다.",
    )


@article_comments_router.post(
    "/{slug}/comments",
    response_model=APIResponse[CommentResponse],
    status_code=201,
)
async def create_comment(
    slug: str,
    data: CommentCreateRequest,
    user_id: int = Depends(require_current_user_id),
    service: CommentService = Depends(get_comment_service),
):
    """댓글 작성"""
    comment = await service.create_comment(slug, user_id, data.comment)
    return create_response(
        data=CommentResponse.model_validate(comment),
        message="댓글이 작성되었습니다.",
    )


@router.patch("/{comment_id}", response_model=APIResponse[CommentResponse])
async def update_comment(
    data: CommentUpdateRequest,
    comment_id: int = Path(..., le=INT32_MAX),
    user_id: int = Depends(require_current_user_id),
    service: CommentService = Depends(get_comment_service),
):
    """댓글 수정"""
    comment = await service.update_comment(comment_id, user_id, data.comment)
    return create_response(
        data=CommentResponse.model_validate(comment),
        message="댓글이 수정되었습니다.",
    )


@router.delete("/{comment_id}", status_code=204)
async def delete_comment(
    comment_id: int = Path(..., le=INT32_MAX),
    user_id: int = Depends(require_current_user_id),
    service: CommentService = Depends(get_comment_service),
):
    """댓글 삭제"""
    await service.delete_comment(comment_id, user_id)
    return None
