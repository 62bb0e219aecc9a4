"""User Service 단위 테스트"""

from datetime import datetime
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from app.domains.users.exceptions import (
    UserAlreadyExistsException,
    UserNotFoundException,
)
from app.domains.users.models import User
from app.domains.users.schemas import ProfileUpdateRequest, UserSync
from app.domains.users.service import UserService, split_name


def _user(user_id: int = 1, **kwargs) -> User:
    values = {
        "username": "writer01",
        "email": "writer01@example.com",
        "created_at": datetime(2024, 1, 1),
        "last_sync_at": datetime.now(),
    }
    values.update(kwargs)
    return User(id=user_id, **values)


@pytest.fixture
def mock_session():
    """Mock AsyncSession"""
    return MagicMock()


@pytest.fixture
def user_service(mock_session):
    """UserService 인스턴스"""
    return UserService(mock_session)


@pytest.fixture
def sync_data():
    return UserSync(
        id=1, username="writer01", email="writer01@example.com", name="Ada"
    )


class TestSplitName:
    """split_name() 테스트"""

    @pytest.mark.parametrize(
        "full_name, expected",
        [
            ("Ada Lovelace", ("Ada", "Lovelace")),
            ("Ada", ("Ada", None)),
            ("Ada King Lovelace", ("Ada", "King")),
            ("  ", (None, None)),
            (None, (None, None)),
        ],
    )
    def test_split(self, full_name, expected):
        assert split_name(full_name) == expected


class TestUserServiceGet:
    """UserService 조회 메서드 테스트"""

    @pytest.mark.asyncio
    async def test_get_user_success(self, user_service):
        """사용자 조회 성공 테스트"""
        # Given
        mock_user = _user()
        user_service.repository.get_by_id = AsyncMock(return_value=mock_user)

        # When
        result = await user_service.get_user(1)

        # Then
        assert result == mock_user
        user_service.repository.get_by_id.assert_called_once_with(1)

    @pytest.mark.asyncio
    async def test_get_user_not_found(self, user_service):
        """사용자 조회 실패 테스트 (사용자 없음)"""
        user_service.repository.get_by_id = AsyncMock(return_value=None)

        with pytest.raises(UserNotFoundException):
            await user_service.get_user(999)

    @pytest.mark.asyncio
    async def test_get_profile_splits_name(self, user_service):
        user_service.repository.get_by_id = AsyncMock(
            return_value=_user(name="Ada Lovelace")
        )

        profile = await user_service.get_profile(1)

        assert profile.firstname == "Ada"
        assert profile.lastname == "Lovelace"
        assert profile.username == "writer01"


class TestUserServiceUpsert:
    """UserService Upsert 메서드 테스트"""

    @pytest.mark.asyncio
    async def test_upsert_user_create_new(self, user_service, sync_data):
        """새 사용자 생성 테스트"""
        # Given
        user_service.repository.find_conflict = AsyncMock(return_value=None)
        user_service.repository.get_by_id = AsyncMock(return_value=None)
        user_service.repository.create = AsyncMock(side_effect=lambda u: u)

        # When
        with patch("app.domains.users.service.logger") as mock_logger:
            result = await user_service.upsert_user(sync_data)

            # Then
            assert result.id == 1
            assert result.name == "Ada"
            user_service.repository.create.assert_called_once()
            mock_logger.info.assert_called_once()

    @pytest.mark.asyncio
    async def test_upsert_user_restore_deleted(self, user_service, sync_data):
        """삭제된 사용자 복구 테스트"""
        # Given
        deleted_user = _user(deleted_at=datetime.now())
        user_service.repository.find_conflict = AsyncMock(return_value=None)
        user_service.repository.get_by_id = AsyncMock(
            return_value=deleted_user
        )
        user_service.repository.update = AsyncMock(return_value=deleted_user)

        # When
        with patch("app.domains.users.service.logger"):
            result = await user_service.upsert_user(sync_data)

        # Then
        assert result.deleted_at is None  # 복구됨
        user_service.repository.get_by_id.assert_called_once_with(
            1, include_deleted=True
        )
        user_service.repository.update.assert_called_once()

    @pytest.mark.asyncio
    async def test_upsert_user_conflict(self, user_service, sync_data):
        """다른 사용자와 username 중복"""
        user_service.repository.find_conflict = AsyncMock(
            return_value=_user(2, email="other@example.com")
        )

        with pytest.raises(UserAlreadyExistsException) as exc_info:
            await user_service.upsert_user(sync_data)

        assert exc_info.value.detail_info == {"username": "writer01"}


class TestUserServiceProfile:
    @pytest.mark.asyncio
    async def test_update_profile_joins_name(self, user_service):
        user = _user()
        user_service.repository.get_by_id = AsyncMock(return_value=user)
        user_service.repository.update = AsyncMock(side_effect=lambda u: u)

        profile = await user_service.update_profile(
            1,
            ProfileUpdateRequest(firstname="Ada", lastname="King", bio=" hi "),
        )

        assert user.name == "Ada King"
        assert user.bio == "hi"
        assert profile.firstname == "Ada"
        assert profile.lastname == "King"


class TestUserServiceDelete:
    """UserService 삭제 메서드 테스트"""

    @pytest.mark.asyncio
    async def test_delete_user_success(self, user_service):
        """사용자 삭제 성공 테스트"""
        mock_user = _user()
        user_service.repository.get_by_id = AsyncMock(return_value=mock_user)
        user_service.repository.soft_delete = AsyncMock()

        with patch("app.domains.users.service.logger") as mock_logger:
            await user_service.delete_user(1)

            user_service.repository.soft_delete.assert_called_once_with(
                mock_user
            )
            mock_logger.info.assert_called_once()

    @pytest.mark.asyncio
    async def test_delete_user_not_found(self, user_service):
        """존재하지 않는 사용자 삭제 실패 테스트"""
        user_service.repository.get_by_id = AsyncMock(return_value=None)

        with pytest.raises(UserNotFoundException):
            await user_service.delete_user(999)
