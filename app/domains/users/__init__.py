"""Users 도메인 모듈

인증 게이트웨이와의 사용자 동기화 및 프로필 관리를 위한 도메인입니다.

구조:
    - models.py: SQLAlchemy 모델 정의 (User)
    - schemas.py: Pydantic 스키마 (UserSync, ProfileResponse, etc.)
    - repository.py: 데이터 접근 계층
    - service.py: 비즈니스 로직 (동기화, 프로필, 이름 분리)
    - router.py: API 엔드포인트 (API Key 인증 포함)
    - exceptions.py: 도메인 예외
"""

from app.domains.users.exceptions import (
    UserAlreadyExistsException,
    UserErrorCode,
    UserNotFoundException,
)
from app.domains.users.models import User
from app.domains.users.router import router
from app.domains.users.schemas import (
    AuthorSummary,
    ProfileResponse,
    ProfileUpdateRequest,
    UserResponse,
    UserSync,
)
from app.domains.users.service import UserService, split_name

__all__ = [
    "User",
    "UserService",
    "UserSync",
    "UserResponse",
    "ProfileResponse",
    "ProfileUpdateRequest",
    "AuthorSummary",
    "split_name",
    "router",
    "UserErrorCode",
    "UserNotFoundException",
    "UserAlreadyExistsException",
]
