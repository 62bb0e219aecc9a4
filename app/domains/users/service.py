"""Users 도메인 서비스

사용자 동기화 및 프로필 관리를 위한 비즈니스 로직 계층입니다.
"""

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.logging import get_logger
from app.core.middlewares.context import get_request_id
from app.core.utils.datetime import now_utc
from app.domains.users.exceptions import (
    UserAlreadyExistsException,
    UserNotFoundException,
)
from app.domains.users.models import User
from app.domains.users.repository import UserRepository
from app.domains.users.schemas import (
    ProfileResponse,
    ProfileUpdateRequest,
    UserSync,
)

logger = get_logger(__name__)


def split_name(full_name: Optional[str]) -> tuple[Optional[str], Optional[str]]:
    """전체 이름을 (이름, 성)으로 분리

    공백 기준 앞의 두 부분만 사용합니다.

    Example::

        split_name("Ada Lovelace")        # ("Ada", "Lovelace")
        split_name("Ada")                 # ("Ada", None)
        split_name("Ada King Lovelace")   # ("Ada", "King")
    """
    if not full_name or not full_name.strip():
        return None, None
    parts = full_name.split()
    firstname = parts[0]
    lastname = parts[1] if len(parts) > 1 else None
    return firstname, lastname


class UserService:
    """사용자 서비스"""

    def __init__(self, session: AsyncSession):
        self.repository = UserRepository(session)

    async def get_user(self, user_id: int) -> User:
        """사용자 조회

        Args:
            user_id: 사용자 ID

        Returns:
            사용자 객체

        Raises:
            UserNotFoundException: 사용자를 찾을 수 없는 경우
        """
        user = await self.repository.get_by_id(user_id)
        if not user:
            raise UserNotFoundException(user_id=user_id)
        return user

    async def upsert_user(self, user_data: UserSync) -> User:
        """사용자 Upsert (생성 또는 업데이트)

        - 존재하지 않으면 생성
        - 이미 존재하면 사용자 정보와 last_sync_at 업데이트
        - 삭제된 사용자는 복구 (deleted_at = NULL)

        Raises:
            UserAlreadyExistsException: username/email이 다른 사용자와 중복
        """
        conflict = await self.repository.find_conflict(
            user_data.id, user_data.username, user_data.email
        )
        if conflict:
            field = (
                "username"
                if conflict.username == user_data.username
                else "email"
            )
            raise UserAlreadyExistsException(
                field=field, value=getattr(user_data, field)
            )

        existing = await self.repository.get_by_id(
            user_data.id, include_deleted=True
        )

        if existing:
            action = "restored" if existing.deleted_at else "updated"
            existing.deleted_at = None
            existing.username = user_data.username
            existing.email = user_data.email
            if user_data.name is not None:
                existing.name = user_data.name
            if user_data.bio is not None:
                existing.bio = user_data.bio
            existing.last_sync_at = now_utc()
            user = await self.repository.update(existing)
        else:
            user = await self.repository.create(
                User(
                    id=user_data.id,
                    username=user_data.username,
                    email=user_data.email,
                    name=user_data.name,
                    bio=user_data.bio,
                    last_sync_at=now_utc(),
                )
            )
            action = "created"

        logger.info(
            "User synced",
            extra={
                "request_id": get_request_id(),
                "user_id": user.id,
                "action": action,
            },
        )
        return user

    async def get_profile(self, user_id: int) -> ProfileResponse:
        """프로필 조회 (이름을 firstname/lastname으로 분리)"""
        user = await self.get_user(user_id)
        return self._to_profile(user)

    async def update_profile(
        self, user_id: int, data: ProfileUpdateRequest
    ) -> ProfileResponse:
        """프로필 수정

        Args:
            user_id: 사용자 ID
            data: 수정할 이름/자기소개

        Returns:
            수정된 프로필
        """
        user = await self.get_user(user_id)
        user.bio = data.bio
        user.name = f"{data.firstname} {data.lastname}"
        user = await self.repository.update(user)

        logger.info(
            "Profile updated",
            extra={"request_id": get_request_id(), "user_id": user_id},
        )
        return self._to_profile(user)

    async def delete_user(self, user_id: int) -> None:
        """사용자 Soft Delete

        Raises:
            UserNotFoundException: 사용자를 찾을 수 없는 경우
        """
        user = await self.get_user(user_id)
        await self.repository.soft_delete(user)

        logger.info(
            "User deleted",
            extra={
                "request_id": get_request_id(),
                "user_id": user_id,
                "action": "deleted",
            },
        )

    @staticmethod
    def _to_profile(user: User) -> ProfileResponse:
        firstname, lastname = split_name(user.name)
        profile = ProfileResponse.model_validate(user)
        return profile.model_copy(
            update={"firstname": firstname, "lastname": lastname}
        )
