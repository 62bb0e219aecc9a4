"""공통 의존성 함수 정의

이 모듈은 FastAPI 엔드포인트에서 사용되는 공통 의존성 함수들을 정의합니다.
인증 자체는 외부 인증 게이트웨이가 담당하며, 이 서비스는 게이트웨이가
전달하는 헤더만 신뢰합니다.
"""

from typing import Optional

from fastapi import Depends, Header

from app.core.config import settings
from app.core.exceptions import ErrorCode, UnauthorizedException
from app.core.utils.pagination import INT32_MAX


async def verify_internal_api_key(
    x_internal_api_key: str = Header(..., alias="X-Internal-Api-Key")
) -> None:
    """내부 API Key 검증 (인증 게이트웨이 통신용)

    Args:
        x_internal_api_key: 요청 헤더의 X-Internal-Api-Key 값

    Raises:
        UnauthorizedException: API Key가 유효하지 않은 경우

    Example:
        @router.get("/articles", dependencies=[Depends(verify_internal_api_key)])
        async def list_articles():
            ...
    """
    if x_internal_api_key != settings.internal_api_key:
        raise UnauthorizedException(
            message="유효하지 않은 API 키입니다.",
            error_code=ErrorCode.INVALID_API_KEY,
        )


async def get_current_user_id(
    x_user_id: Optional[str] = Header(None, alias="X-User-Id")
) -> Optional[int]:
    """게이트웨이가 인증한 호출자 ID (없으면 None)

    양의 정수가 아니거나 사용자 ID 범위를 넘는 값은 익명 호출로 취급합니다.
    """
    if x_user_id is None:
        return None
    try:
        user_id = int(x_user_id.strip())
    except ValueError:
        return None
    return user_id if 0 < user_id <= INT32_MAX else None


async def require_current_user_id(
    user_id: Optional[int] = Depends(get_current_user_id),
) -> int:
    """호출자 ID 필수 의존성

    Raises:
        UnauthorizedException: X-User-Id가 없거나 유효하지 않은 경우
    """
    if user_id is None:
        raise UnauthorizedException(
            message="로그인이 필요합니다.",
            error_code=ErrorCode.MISSING_USER_ID,
        )
    return user_id
