"""API v1 라우터"""

from typing import Any

from fastapi import APIRouter

from app.core.schemas import APIResponse
from app.domains.articles.router import router as articles_router
from app.domains.categories.router import router as categories_router
from app.domains.comments.router import (
    article_comments_router,
    router as comments_router,
)
from app.domains.users.router import router as users_router

api_router = APIRouter()

# 도메인 라우터 등록
api_router.include_router(users_router, prefix="/users", tags=["Users"])
api_router.include_router(
    categories_router, prefix="/categories", tags=["Categories"]
)
# 댓글 경로(/{slug}/comments)는 게시글 상세(/{slug})와 겹치지 않음
api_router.include_router(
    article_comments_router, prefix="/articles", tags=["Comments"]
)
api_router.include_router(
    articles_router, prefix="/articles", tags=["Articles"]
)
api_router.include_router(
    comments_router, prefix="/comments", tags=["Comments"]
)


@api_router.get("/", response_model=APIResponse[dict[str, Any]])
async def api_v1_root():
    """API v1 루트 엔드포인트"""
    return APIResponse(
        success=True,
        message="Authors Haven API v1",
        data={
            "version": "1.0.0",
            "docs": "/docs",
        },
    )
