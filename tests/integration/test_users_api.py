"""Users API 통합 테스트 - 동기화, 프로필, 삭제"""

import pytest

BASE = "/api/v1/users"


def _sync_payload(user_id: int, username: str, **kwargs) -> dict:
    payload = {
        "id": user_id,
        "username": username,
        "email": f"{username}@example.com",
    }
    payload.update(kwargs)
    return payload


class TestUserUpsertAPI:
    """사용자 동기화 (Upsert) API 테스트"""

    @pytest.mark.asyncio
    async def test_create_then_update(
        self, client, api_key_header, user_id_factory
    ):
        user_id = user_id_factory()

        created = await client.post(
            BASE,
            json=_sync_payload(user_id, "writer01", name="Ada Lovelace"),
            headers=api_key_header,
        )
        updated = await client.post(
            BASE,
            json=_sync_payload(user_id, "writer02"),
            headers=api_key_header,
        )

        assert created.status_code == 201
        assert created.json()["data"]["username"] == "writer01"
        assert updated.status_code == 201
        data = updated.json()["data"]
        assert data["username"] == "writer02"
        # 전달되지 않은 name은 유지
        assert data["name"] == "Ada Lovelace"

    @pytest.mark.asyncio
    async def test_username_conflict_returns_409(
        self, client, api_key_header, create_user, user_id_factory
    ):
        await create_user(username="takenname")

        response = await client.post(
            BASE,
            json=_sync_payload(user_id_factory(), "takenname"),
            headers=api_key_header,
        )

        assert response.status_code == 409
        assert response.json()["error"]["code"] == "USER_ALREADY_EXISTS"

    @pytest.mark.asyncio
    async def test_invalid_username_returns_422(
        self, client, api_key_header
    ):
        response = await client.post(
            BASE,
            json=_sync_payload(1, "bad name"),
            headers=api_key_header,
        )

        assert response.status_code == 422
        assert response.json()["success"] is False


class TestProfileAPI:
    """내 프로필 API 테스트"""

    @pytest.mark.asyncio
    async def test_view_profile_splits_name(
        self, client, user_header_factory, create_user
    ):
        user = await create_user(name="Grace Brewster Hopper")

        response = await client.get(
            f"{BASE}/me", headers=user_header_factory(user.id)
        )

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["firstname"] == "Grace"
        assert data["lastname"] == "Brewster"

    @pytest.mark.asyncio
    async def test_edit_profile(
        self, client, user_header_factory, create_user
    ):
        user = await create_user()

        response = await client.patch(
            f"{BASE}/me",
            json={"firstname": "Ada", "lastname": "Lovelace", "bio": "  math  "},
            headers=user_header_factory(user.id),
        )

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["name"] == "Ada Lovelace"
        assert data["bio"] == "math"

    @pytest.mark.asyncio
    async def test_profile_requires_user_header(self, client, api_key_header):
        response = await client.get(f"{BASE}/me", headers=api_key_header)

        assert response.status_code == 401
        assert response.json()["error"]["code"] == "MISSING_USER_ID"


class TestUserDetailAndDeleteAPI:
    """사용자 조회/삭제 API 테스트"""

    @pytest.mark.asyncio
    async def test_get_user_not_found(self, client, api_key_header):
        response = await client.get(f"{BASE}/999999", headers=api_key_header)

        assert response.status_code == 404
        data = response.json()
        assert data["success"] is False
        assert data["error"]["code"] == "USER_NOT_FOUND"

    @pytest.mark.asyncio
    async def test_delete_user(self, client, api_key_header, create_user):
        user_id = (await create_user()).id

        deleted = await client.delete(
            f"{BASE}/{user_id}", headers=api_key_header
        )
        after = await client.get(f"{BASE}/{user_id}", headers=api_key_header)

        assert deleted.status_code == 204
        assert after.status_code == 404
