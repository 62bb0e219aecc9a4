"""사용자 시나리오 E2E 테스트

게이트웨이 동기화부터 작성, 댓글, 평점, 랭킹, 검색, 삭제까지
한 사용자의 전체 플로우를 검증합니다. (Docker 필요)
"""

import pytest

USERS = "/api/v1/users"
ARTICLES = "/api/v1/articles"


class TestAuthorJourney:
    """작성자/독자 시나리오"""

    @pytest.mark.asyncio
    async def test_publish_discuss_rank_and_remove(
        self, client, api_key_header, user_header_factory, user_id_factory
    ):
        writer_id, reader_id = user_id_factory(2)

        # 1. 게이트웨이 동기화
        for user_id, username in [(writer_id, "writer01"), (reader_id, "reader01")]:
            response = await client.post(
                USERS,
                json={
                    "id": user_id,
                    "username": username,
                    "email": f"{username}@example.com",
                },
                headers=api_key_header,
            )
            assert response.status_code == 201

        writer = user_header_factory(writer_id)
        reader = user_header_factory(reader_id)

        # 2. 게시글 작성
        created = await client.post(
            ARTICLES,
            headers=writer,
            json={
                "title": "Scenario article",
                "description": "an end to end story",
                "body": "scenario body text",
                "taglist": ["story", "e2e"],
            },
        )
        assert created.status_code == 201
        article = created.json()["data"]

        # 3. 독자가 읽고, 댓글 달고, 평가
        detail = await client.get(f"{ARTICLES}/{article['slug']}", headers=reader)
        assert detail.status_code == 200
        assert detail.json()["data"]["comments"] == []

        comment = await client.post(
            f"{ARTICLES}/{article['slug']}/comments",
            headers=reader,
            json={"comment": "great read"},
        )
        assert comment.status_code == 201

        rating = await client.post(
            f"{ARTICLES}/{article['id']}/ratings",
            headers=reader,
            json={"rating": 5},
        )
        assert rating.status_code == 201

        # 4. 상세 응답에 반영
        detail = await client.get(
            f"{ARTICLES}/{article['slug']}", headers=api_key_header
        )
        body = detail.json()["data"]
        assert body["average_rating"] == 5.0
        assert [c["comment"] for c in body["comments"]] == ["great read"]
        assert body["comments"][0]["author"]["username"] == "reader01"

        # 5. 랭킹과 검색
        for strategy in ["ratings", "comments", "latest"]:
            top = await client.get(
                f"{ARTICLES}/top?type={strategy}", headers=api_key_header
            )
            assert [a["id"] for a in top.json()["articles"]] == [article["id"]]

        search = await client.get(
            f"{ARTICLES}/search?author=writer&tags=story", headers=api_key_header
        )
        assert search.json()["total_count"] == 1

        # 6. 삭제 후 목록/랭킹에서 사라짐
        deleted = await client.delete(f"{ARTICLES}/{article['slug']}", headers=writer)
        assert deleted.status_code == 204

        listing = await client.get(ARTICLES, headers=api_key_header)
        top = await client.get(f"{ARTICLES}/top?type=comments", headers=api_key_header)
        assert listing.json()["total_count"] == 0
        assert top.json()["articles"] == []


class TestUserSyncScenarios:
    """사용자 동기화 시나리오"""

    @pytest.mark.asyncio
    async def test_deleted_user_is_restored_by_sync(
        self, client, api_key_header, user_id_factory
    ):
        user_id = user_id_factory()
        payload = {
            "id": user_id,
            "username": "phoenix01",
            "email": "phoenix@example.com",
        }

        await client.post(USERS, json=payload, headers=api_key_header)
        deleted = await client.delete(f"{USERS}/{user_id}", headers=api_key_header)
        restored = await client.post(USERS, json=payload, headers=api_key_header)
        fetched = await client.get(f"{USERS}/{user_id}", headers=api_key_header)

        assert deleted.status_code == 204
        assert restored.status_code == 201
        assert fetched.status_code == 200
        assert fetched.json()["data"]["deleted_at"] is None
