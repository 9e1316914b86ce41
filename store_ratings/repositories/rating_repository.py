"""평점 레포지토리 — 평점 업서트 및 매장별 평점 조회.

Rating Repository — Rating upsert and per-store rating queries.
"""

from datetime import datetime, timezone
from typing import Any

from sqlalchemy import Select, func, select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession

from store_ratings.models.rating import Rating
from store_ratings.models.user import User
from store_ratings.repositories.base import BaseRepository

# 방언별 INSERT 구성자 — Dialect-specific insert constructs supporting ON CONFLICT
_UPSERT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


class RatingRepository(BaseRepository[Rating]):
    """평점 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the ratings table.
    """

    def __init__(self) -> None:
        super().__init__(Rating)

    async def upsert(
        self,
        db: AsyncSession,
        user_id: int,
        store_id: int,
        value: int,
    ) -> Rating:
        """사용자/매장 쌍의 평점을 삽입하거나 덮어씁니다.

        Insert the rating for (user_id, store_id), or on conflict overwrite
        ``rating`` and refresh ``updated_at``. ``created_at`` of an existing
        row is left untouched. Runs as one ``INSERT ... ON CONFLICT DO UPDATE``
        statement so concurrent submissions for the same pair cannot create a
        second row.

        Returns:
            Rating: 저장된 평점 행 (The stored rating row, freshly loaded)
        """
        dialect: str = db.get_bind().dialect.name
        insert = _UPSERT_INSERTS[dialect]
        now: datetime = datetime.now(timezone.utc)

        stmt = insert(Rating).values(
            user_id=user_id,
            store_id=store_id,
            rating=value,
            created_at=now,
            updated_at=now,
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=[Rating.user_id, Rating.store_id],
            set_={"rating": stmt.excluded.rating, "updated_at": stmt.excluded.updated_at},
        )
        await db.execute(stmt)

        result = await db.execute(self._pair_query(user_id, store_id))
        return result.scalar_one()

    def _pair_query(self, user_id: int, store_id: int) -> Select:
        # populate_existing: 업서트 후 세션에 캐시된 객체를 최신 값으로 갱신
        return (
            select(Rating)
            .where(Rating.user_id == user_id, Rating.store_id == store_id)
            .execution_options(populate_existing=True)
        )

    async def get_for_pair(
        self,
        db: AsyncSession,
        user_id: int,
        store_id: int,
    ) -> Rating | None:
        result = await db.execute(self._pair_query(user_id, store_id))
        return result.scalar_one_or_none()

    async def summary_for_store(
        self,
        db: AsyncSession,
        store_id: int,
    ) -> tuple[float, int]:
        """매장의 평균 평점과 평점 수를 반환합니다.

        Return ``(avg_rating, rating_count)`` for a store; ``(0.0, 0)`` when
        it has no ratings.
        """
        query: Select = select(
            func.coalesce(func.avg(Rating.rating), 0),
            func.count(Rating.id),
        ).where(Rating.store_id == store_id)
        avg_rating, rating_count = (await db.execute(query)).one()
        return float(avg_rating), int(rating_count)

    async def list_for_store(
        self,
        db: AsyncSession,
        store_id: int,
    ) -> list[dict[str, Any]]:
        """매장의 개별 평점을 작성자 정보와 함께 최근 수정순으로 조회합니다.

        Individual ratings for a store joined with the author's name and
        email, most recently updated first.
        """
        query: Select = (
            select(
                User.name,
                User.email,
                Rating.rating,
                Rating.created_at,
                Rating.updated_at,
            )
            .join(User, Rating.user_id == User.id)
            .where(Rating.store_id == store_id)
            .order_by(Rating.updated_at.desc(), Rating.id.desc())
        )
        result = await db.execute(query)
        return [dict(row) for row in result.mappings().all()]


# 싱글턴 인스턴스 — Singleton instance
rating_repository: RatingRepository = RatingRepository()
