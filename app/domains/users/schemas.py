"""Users 도메인 스키마 정의

인증 게이트웨이 동기화 및 프로필 조회/수정을 위한 Pydantic 스키마입니다.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.core.utils.pagination import INT32_MAX

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class UserSync(BaseModel):
    """사용자 동기화 요청 스키마

    인증 게이트웨이에서 가입/로그인한 사용자 정보를 받아 동기화합니다.
    """

    id: int = Field(
        ..., gt=0, le=INT32_MAX, description="게이트웨이 사용자 ID"
    )
    username: str = Field(
        ...,
        min_length=5,
        max_length=15,
        pattern=r"^[A-Za-z0-9]+$",
        description="사용자명 (영숫자, 공백 불가)",
    )
    email: str = Field(
        ..., max_length=255, pattern=EMAIL_PATTERN, description="이메일"
    )
    name: Optional[str] = Field(None, max_length=255, description="전체 이름")
    bio: Optional[str] = Field(None, description="자기소개")


class ProfileUpdateRequest(BaseModel):
    """프로필 수정 요청 스키마"""

    firstname: str = Field(
        ..., min_length=1, max_length=100, pattern=r"^[A-Za-z0-9]+$"
    )
    lastname: str = Field(
        ..., min_length=1, max_length=100, pattern=r"^[A-Za-z0-9]+$"
    )
    bio: str = Field(..., description="자기소개")

    @field_validator("bio")
    @classmethod
    def strip_bio(cls, v: str) -> str:
        return v.strip()


class UserResponse(BaseModel):
    """사용자 응답 스키마"""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    email: str
    name: Optional[str] = None
    bio: Optional[str] = None
    created_at: datetime
    updated_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = None
    last_sync_at: Optional[datetime] = None


class ProfileResponse(UserResponse):
    """프로필 응답 스키마 (이름 분리 포함)"""

    firstname: Optional[str] = None
    lastname: Optional[str] = None


class AuthorSummary(BaseModel):
    """게시글에 포함되는 작성자 요약"""

    model_config = ConfigDict(from_attributes=True)

    username: str
    name: Optional[str] = None
    bio: Optional[str] = None
