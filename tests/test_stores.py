"""매장 목록 API 테스트 — 로그인 사용자용 목록.

Store listing API tests — Listing visible to every authenticated caller,
with the caller's own rating per store.
"""

from httpx import AsyncClient

from store_ratings.models.rating import Rating
from tests.conftest import auth_header, make_store_owner

URL = "/api/stores"


class TestStoreList:
    """매장 목록 조회 테스트."""

    async def test_list_stores(self, client: AsyncClient, user_token, store):
        """매장 목록 조회 — 평점이 없으면 0."""
        res = await client.get(URL, headers=auth_header(user_token))
        assert res.status_code == 200
        data = res.json()
        assert data == [{
            "id": store.id,
            "store_name": "Corner Shop",
            "store_address": "5 High Street",
            "avg_rating": 0,
            "rating_count": 0,
            "user_rating": None,
        }]

    async def test_owner_email_not_exposed(self, client: AsyncClient, user_token, store):
        """사용자용 목록에는 소유자 이메일이 없음."""
        res = await client.get(URL, headers=auth_header(user_token))
        assert "email" not in res.json()[0]

    async def test_user_rating_is_callers_own(
        self, client: AsyncClient, db, user_token, normal_user, store,
    ):
        """user_rating은 요청자의 평점만 반영."""
        other, _ = await make_store_owner(
            db,
            name="Other Shop Owner Person",
            email="other@test.com",
            store_name="Other Store",
            store_address="3 Elm Street",
        )
        db.add(Rating(user_id=normal_user.id, store_id=store.id, rating=4))
        db.add(Rating(user_id=other.id, store_id=store.id, rating=2))
        await db.flush()

        res = await client.get(URL, headers=auth_header(user_token))
        rows = {row["store_name"]: row for row in res.json()}
        assert rows["Corner Shop"]["user_rating"] == 4
        assert rows["Corner Shop"]["avg_rating"] == 3
        assert rows["Corner Shop"]["rating_count"] == 2
        assert rows["Other Store"]["user_rating"] is None

    async def test_admin_and_owner_can_list(self, client: AsyncClient, admin_token, owner_token, store):
        """관리자와 매장 소유자도 조회 가능."""
        for token in (admin_token, owner_token):
            res = await client.get(URL, headers=auth_header(token))
            assert res.status_code == 200

    async def test_filter_by_name_case_insensitive(self, client: AsyncClient, user_token, store):
        """매장 이름 필터는 대소문자 무관."""
        res = await client.get(URL, params={"name": "cORNER"}, headers=auth_header(user_token))
        assert [row["id"] for row in res.json()] == [store.id]

    async def test_filter_by_address(self, client: AsyncClient, user_token, store):
        res = await client.get(URL, params={"address": "elm"}, headers=auth_header(user_token))
        assert res.json() == []

    async def test_empty_filter_ignored(self, client: AsyncClient, user_token, store):
        """빈 필터 값은 무시."""
        res = await client.get(URL, params={"name": ""}, headers=auth_header(user_token))
        assert len(res.json()) == 1

    async def test_sort_by_rating(self, client: AsyncClient, db, user_token, normal_user, store):
        """평균 평점 내림차순 정렬."""
        _, top = await make_store_owner(
            db,
            name="Top Rated Owner Person",
            email="top@test.com",
            store_name="Best Bistro",
            store_address="1 Top Lane",
        )
        db.add(Rating(user_id=normal_user.id, store_id=top.id, rating=5))
        db.add(Rating(user_id=normal_user.id, store_id=store.id, rating=1))
        await db.flush()

        res = await client.get(
            URL, params={"sortBy": "avg_rating", "sortOrder": "DESC"}, headers=auth_header(user_token),
        )
        assert [row["store_name"] for row in res.json()] == ["Best Bistro", "Corner Shop"]

    async def test_email_sort_not_allowed(self, client: AsyncClient, user_token):
        """사용자용 목록은 이메일 정렬 불가."""
        res = await client.get(URL, params={"sortBy": "email"}, headers=auth_header(user_token))
        assert res.status_code == 400
        assert res.json()["error"] == "Invalid sort field: email"

    async def test_list_no_auth(self, client: AsyncClient):
        """인증 없이 401."""
        res = await client.get(URL)
        assert res.status_code == 401
