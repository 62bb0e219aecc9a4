"""Users 도메인 테스트 - 스키마"""

import pytest
from pydantic import ValidationError

from app.domains.users.schemas import ProfileUpdateRequest, UserSync


class TestUserSyncSchema:
    """사용자 동기화 스키마 테스트"""

    def test_valid(self):
        data = UserSync(id=1, username="writer01", email="w@example.com")

        assert data.name is None
        assert data.bio is None

    @pytest.mark.parametrize(
        "username", ["abcd", "a" * 16, "with space", "under_score"]
    )
    def test_invalid_username(self, username):
        """username은 영숫자 5~15자"""
        with pytest.raises(ValidationError):
            UserSync(id=1, username=username, email="w@example.com")

    def test_invalid_email(self):
        with pytest.raises(ValidationError):
            UserSync(id=1, username="writer01", email="not-an-email")

    def test_non_positive_id(self):
        with pytest.raises(ValidationError):
            UserSync(id=0, username="writer01", email="w@example.com")


class TestProfileUpdateSchema:
    def test_bio_is_stripped(self):
        data = ProfileUpdateRequest(
            firstname="Ada", lastname="Lovelace", bio="  writer  "
        )

        assert data.bio == "writer"

    def test_names_must_be_alphanumeric(self):
        with pytest.raises(ValidationError):
            ProfileUpdateRequest(firstname="Ada!", lastname="L", bio="")
