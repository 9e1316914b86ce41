"""평점 제출 API 테스트 — 업서트, 값 검증, 역할 제한.

Rating submission API tests — Upsert semantics, value validation, and the
"normal users only" rule.
"""

from datetime import datetime, timedelta, timezone

import pytest
from httpx import AsyncClient
from sqlalchemy import func, select, update

from store_ratings.models.rating import Rating
from store_ratings.utils.validators import RATING_ERROR
from tests.conftest import auth_header

URL = "/api/ratings"


async def count_ratings(db) -> int:
    return (await db.execute(select(func.count(Rating.id)))).scalar_one()


async def backdate_updated_at(db, rating_id: int) -> datetime:
    """updated_at을 하루 전으로 되돌리고 저장된 값을 반환합니다."""
    await db.execute(
        update(Rating)
        .where(Rating.id == rating_id)
        .values(updated_at=datetime.now(timezone.utc) - timedelta(days=1))
    )
    stored = await db.execute(select(Rating.updated_at).where(Rating.id == rating_id))
    return stored.scalar_one().replace(tzinfo=None)


def parse_timestamp(value: str) -> datetime:
    return datetime.fromisoformat(value).replace(tzinfo=None)


class TestSubmitRating:
    """평점 제출 테스트."""

    async def test_submit_rating(self, client: AsyncClient, user_token, normal_user, store):
        """평점 제출 성공."""
        res = await client.post(URL, json={"storeId": store.id, "rating": 4}, headers=auth_header(user_token))
        assert res.status_code == 200
        data = res.json()
        assert data["message"] == "Rating submitted successfully"
        assert data["rating"]["rating"] == 4
        assert data["rating"]["user_id"] == normal_user.id
        assert data["rating"]["store_id"] == store.id

    async def test_resubmit_overwrites(self, client: AsyncClient, db, user_token, store):
        """같은 매장 재제출 시 값만 덮어쓰고 created_at 유지."""
        first = await client.post(URL, json={"storeId": store.id, "rating": 2}, headers=auth_header(user_token))
        second = await client.post(URL, json={"storeId": store.id, "rating": 5}, headers=auth_header(user_token))
        assert second.status_code == 200

        assert second.json()["rating"]["id"] == first.json()["rating"]["id"]
        assert second.json()["rating"]["rating"] == 5
        assert second.json()["rating"]["created_at"] == first.json()["rating"]["created_at"]
        assert await count_ratings(db) == 1

        listing = await client.get("/api/stores", headers=auth_header(user_token))
        row = listing.json()[0]
        assert row["user_rating"] == 5
        assert row["avg_rating"] == 5
        assert row["rating_count"] == 1

    @pytest.mark.parametrize("values", [(2, 5), (3, 3)])
    async def test_resubmit_refreshes_updated_at(self, client: AsyncClient, db, user_token, store, values):
        """재제출 시 값이 같아도 updated_at은 갱신되고 created_at은 유지."""
        first_value, second_value = values
        first = await client.post(URL, json={"storeId": store.id, "rating": first_value}, headers=auth_header(user_token))
        first_rating = first.json()["rating"]
        previous = await backdate_updated_at(db, first_rating["id"])

        second = await client.post(URL, json={"storeId": store.id, "rating": second_value}, headers=auth_header(user_token))
        assert second.status_code == 200
        second_rating = second.json()["rating"]
        assert second_rating["rating"] == second_value
        assert second_rating["created_at"] == first_rating["created_at"]
        assert parse_timestamp(second_rating["updated_at"]) > previous

    @pytest.mark.parametrize("value", [0, 6, -1, 3.5, "4", True, None])
    async def test_invalid_rating_value(self, client: AsyncClient, db, user_token, store, value):
        """1~5 정수가 아니면 400, 저장되지 않음."""
        res = await client.post(URL, json={"storeId": store.id, "rating": value}, headers=auth_header(user_token))
        assert res.status_code == 400
        assert res.json() == {"error": RATING_ERROR}
        assert await count_ratings(db) == 0

    async def test_value_checked_before_role(self, client: AsyncClient, owner_token, store):
        """값 검증이 역할 검증보다 먼저 수행됨."""
        res = await client.post(URL, json={"storeId": store.id, "rating": 9}, headers=auth_header(owner_token))
        assert res.status_code == 400

    async def test_admin_forbidden(self, client: AsyncClient, db, admin_token, store):
        """관리자는 평점 제출 불가."""
        res = await client.post(URL, json={"storeId": store.id, "rating": 3}, headers=auth_header(admin_token))
        assert res.status_code == 403
        assert res.json()["error"] == "Only normal users can submit ratings"
        assert await count_ratings(db) == 0

    async def test_owner_forbidden(self, client: AsyncClient, db, owner_token, store):
        """매장 소유자는 평점 제출 불가."""
        res = await client.post(URL, json={"storeId": store.id, "rating": 3}, headers=auth_header(owner_token))
        assert res.status_code == 403
        assert await count_ratings(db) == 0

    async def test_store_not_found(self, client: AsyncClient, user_token):
        """존재하지 않는 매장 시 404."""
        res = await client.post(URL, json={"storeId": 9999, "rating": 3}, headers=auth_header(user_token))
        assert res.status_code == 404
        assert res.json()["error"] == "Store not found"

    @pytest.mark.parametrize("store_id", ["1", None, 1.5])
    async def test_invalid_store_id(self, client: AsyncClient, user_token, store_id):
        """정수가 아닌 매장 ID 시 400."""
        res = await client.post(URL, json={"storeId": store_id, "rating": 3}, headers=auth_header(user_token))
        assert res.status_code == 400
        assert res.json()["error"] == "Invalid store id"

    async def test_submit_no_auth(self, client: AsyncClient, store):
        """인증 없이 401."""
        res = await client.post(URL, json={"storeId": store.id, "rating": 3})
        assert res.status_code == 401
