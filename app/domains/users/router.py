"""Users 도메인 라우터

사용자 동기화 및 프로필 API 엔드포인트입니다.
"""

from fastapi import APIRouter, Depends, Path
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db
from app.core.dependencies import (
    require_current_user_id,
    verify_internal_api_key,
)
from app.core.schemas import APIResponse, create_response
from app.core.utils.pagination import INT32_MAX
from app.domains.users.schemas import (
    ProfileResponse,
    ProfileUpdateRequest,
    UserResponse,
    UserSync,
)
from app.domains.users.service import UserService

router = APIRouter(dependencies=[Depends(verify_internal_api_key)])


def get_user_service(session: AsyncSession = Depends(get_db)) -> UserService:
    """UserService 의존성"""
    return UserService(session)


@router.post(
    "",
    response_model=APIResponse[UserResponse],
    status_code=201,
)
async def upsert_user(
    user_data: UserSync,
    service: UserService = Depends(get_user_service),
):
    """사용자 동기화 (Upsert)"""
    user = await service.upsert_user(user_data)
    return create_response(
        data=UserResponse.model_validate(user),
        message="사용자가 동기화되었습니다.",
    )


@router.get("/me", response_model=APIResponse[ProfileResponse])
async def view_profile(
    user_id: int = Depends(require_current_user_id),
    service: UserService = Depends(get_user_service),
):
    """내 프로필 조회"""
    profile = await service.get_profile(user_id)
    return create_response(data=profile, message="프로필을 조회했습니다.")


@router.patch("/me", response_model=APIResponse[ProfileResponse])
async def edit_profile(
    data: ProfileUpdateRequest,
    user_id: int = Depends(require_current_user_id),
    service: UserService = Depends(get_user_service),
):
    """내 프로필 수정"""
    profile = await service.update_profile(user_id, data)
    return create_response(data=profile, message="프로필이 수정되었습니다.")


@router.get("/{user_id}", response_model=APIResponse[UserResponse])
async def get_user(
    user_id: int = Path(..., le=INT32_MAX),
    service: UserService = Depends(get_user_service),
):
    """사용자 상세 조회"""
    user = await service.get_user(user_id)
    return create_response(
        data=UserResponse.model_validate(user),
        message="사용자 정보를 조회했습니다.",
    )


@router.delete("/{user_id}", status_code=204)
async def delete_user(
    user_id: int = Path(..., le=INT32_MAX),
    service: UserService = Depends(get_user_service),
):
    """사용자 삭제 (Soft Delete)"""
    await service.delete_user(user_id)
    return None
