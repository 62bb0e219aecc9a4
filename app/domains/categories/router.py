"""Categories 도메인 라우터"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db
from app.core.dependencies import (
    require_current_user_id,
    verify_internal_api_key,
)
from app.core.schemas import APIResponse, create_response
from app.domains.categories.schemas import (
    CategoryCreateRequest,
    CategoryResponse,
)
from app.domains.categories.service import CategoryService

router = APIRouter(dependencies=[Depends(verify_internal_api_key)])


def get_category_service(
    session: AsyncSession = Depends(get_db),
) -> CategoryService:
    """CategoryService 의존성"""
    return CategoryService(session)


@router.get("", response_model=APIResponse[list[CategoryResponse]])
async def list_categories(
    service: CategoryService = Depends(get_category_service),
):
    """카테고리 목록 조회"""
    categories = await service.list_categories()
    return create_response(
        data=[CategoryResponse.model_validate(c) for c in categories],
        message="카테고리 목록을 조회했습니다.",
    )


@router.post(
    "",
    response_model=APIResponse[CategoryResponse],
    status_code=201,
    dependencies=[Depends(require_current_user_id)],
)
async def create_category(
    data: CategoryCreateRequest,
    service: CategoryService = Depends(get_category_service),
):
    """카테고리 생성"""
    category = await service.create_category(data.category)
    return create_response(
        data=CategoryResponse.model_validate(category),
        message="카테고리가 생성되었습니다.",
    )
