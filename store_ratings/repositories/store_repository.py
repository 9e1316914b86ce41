"""매장 레포지토리 — 매장 생성 및 목록 쿼리.

Store Repository — Store creation and listing queries.
Both store listings (admin and user-facing) aggregate ratings with a left
join, so stores without ratings report ``avg_rating`` 0 and
``rating_count`` 0.
"""

from typing import Any, Mapping

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import aliased

from store_ratings.models.rating import Rating
from store_ratings.models.store import Store
from store_ratings.models.user import User, UserRole
from store_ratings.repositories.base import BaseRepository
from store_ratings.utils.exceptions import BadRequestError
from store_ratings.utils.listing import apply_sort, apply_text_filters


class StoreRepository(BaseRepository[Store]):
    """매장 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the stores table.
    """

    DEFAULT_SORT: str = "store_name"

    def __init__(self) -> None:
        super().__init__(Store)

    async def create_for_owner(
        self,
        db: AsyncSession,
        owner: User,
        store_name: str,
        store_address: str,
    ) -> Store:
        """매장 소유자에게 매장을 생성합니다.

        Create the store row for ``owner``. The owner must have role
        store_owner; this is the only path that creates stores.

        Raises:
            BadRequestError: 소유자 역할이 store_owner가 아닐 때
                             (Owner does not have role store_owner)
        """
        if owner.role != UserRole.STORE_OWNER.value:
            raise BadRequestError("Store owner must have role store_owner")
        return await self.create(
            db,
            {"user_id": owner.id, "store_name": store_name, "store_address": store_address},
        )

    async def get_by_owner(
        self,
        db: AsyncSession,
        user_id: int,
    ) -> Store | None:
        """소유자 ID로 매장을 조회합니다 — Store owned by ``user_id``."""
        result = await db.execute(select(Store).where(Store.user_id == user_id))
        return result.scalar_one_or_none()

    async def list_for_admin(
        self,
        db: AsyncSession,
        filters: Mapping[str, str | None],
        sort_by: str | None = None,
        sort_order: str | None = None,
    ) -> list[dict[str, Any]]:
        """관리자용 매장 목록을 소유자 이메일 및 평점 집계와 함께 조회합니다.

        Admin store listing with owner email and rating aggregates.
        Filters: ``name`` (store name), ``email`` (owner email),
        ``address`` (store address).
        """
        avg_rating = func.coalesce(func.avg(Rating.rating), 0).label("avg_rating")
        rating_count = func.count(Rating.id).label("rating_count")

        query: Select = (
            select(
                Store.id,
                Store.store_name,
                Store.store_address,
                User.email,
                User.name.label("owner_name"),
                avg_rating,
                rating_count,
            )
            .join(User, Store.user_id == User.id)
            .outerjoin(Rating, Rating.store_id == Store.id)
            .group_by(Store.id, User.id)
        )
        query = apply_text_filters(
            query,
            {"name": Store.store_name, "email": User.email, "address": Store.store_address},
            filters,
        )

        sortable: dict[str, Any] = {
            "store_name": Store.store_name,
            "name": Store.store_name,
            "email": User.email,
            "store_address": Store.store_address,
            "address": Store.store_address,
            "avg_rating": avg_rating,
            "rating_count": rating_count,
        }
        query = apply_sort(query, sortable, sort_by, sort_order, self.DEFAULT_SORT, tiebreak=Store.id)

        result = await db.execute(query)
        return [dict(row) for row in result.mappings().all()]

    async def list_for_user(
        self,
        db: AsyncSession,
        user_id: int,
        filters: Mapping[str, str | None],
        sort_by: str | None = None,
        sort_order: str | None = None,
    ) -> list[dict[str, Any]]:
        """사용자용 매장 목록 — 본인의 기존 평점 포함.

        User-facing store listing. A second left join on ratings surfaces the
        caller's own rating per store (``user_rating``, null if none).
        Filters: ``name`` and ``address``.
        """
        own_rating = aliased(Rating, name="own_rating")
        avg_rating = func.coalesce(func.avg(Rating.rating), 0).label("avg_rating")
        rating_count = func.count(Rating.id).label("rating_count")
        # 사용자/매장 쌍당 최대 1행이므로 MAX는 해당 값 그대로 (at most one row per pair)
        user_rating = func.max(own_rating.rating).label("user_rating")

        query: Select = (
            select(
                Store.id,
                Store.store_name,
                Store.store_address,
                avg_rating,
                rating_count,
                user_rating,
            )
            .outerjoin(Rating, Rating.store_id == Store.id)
            .outerjoin(
                own_rating,
                (own_rating.store_id == Store.id) & (own_rating.user_id == user_id),
            )
            .group_by(Store.id)
        )
        query = apply_text_filters(
            query,
            {"name": Store.store_name, "address": Store.store_address},
            filters,
        )

        sortable: dict[str, Any] = {
            "store_name": Store.store_name,
            "name": Store.store_name,
            "store_address": Store.store_address,
            "address": Store.store_address,
            "avg_rating": avg_rating,
            "rating_count": rating_count,
        }
        query = apply_sort(query, sortable, sort_by, sort_order, self.DEFAULT_SORT, tiebreak=Store.id)

        result = await db.execute(query)
        return [dict(row) for row in result.mappings().all()]


# 싱글턴 인스턴스 — Singleton instance
store_repository: StoreRepository = StoreRepository()
