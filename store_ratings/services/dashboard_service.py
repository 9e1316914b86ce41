"""대시보드 서비스 — 관리자 집계 및 매장 소유자 리포트.

Dashboard Service — Platform totals for administrators and the feedback
report for store owners.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from store_ratings.models.store import Store
from store_ratings.repositories.rating_repository import RatingRepository, rating_repository
from store_ratings.repositories.store_repository import StoreRepository, store_repository
from store_ratings.repositories.user_repository import UserRepository, user_repository
from store_ratings.schemas.store import (
    AdminDashboardResponse,
    StoreOwnerDashboardResponse,
    StoreRatingEntry,
)
from store_ratings.utils.exceptions import NotFoundError


class DashboardService:
    """대시보드 집계를 처리하는 서비스."""

    def __init__(
        self,
        users: UserRepository = user_repository,
        stores: StoreRepository = store_repository,
        ratings: RatingRepository = rating_repository,
    ) -> None:
        self.users: UserRepository = users
        self.stores: StoreRepository = stores
        self.ratings: RatingRepository = ratings

    async def get_admin_stats(self, db: AsyncSession) -> AdminDashboardResponse:
        """전체 사용자/매장/평점 수 — Platform-wide row counts."""
        return AdminDashboardResponse(
            total_users=await self.users.count(db),
            total_stores=await self.stores.count(db),
            total_ratings=await self.ratings.count(db),
        )

    async def get_owner_dashboard(
        self,
        db: AsyncSession,
        owner_id: int,
    ) -> StoreOwnerDashboardResponse:
        """매장 소유자 대시보드를 조회합니다.

        Resolve the caller's store, then return its average rating, rating
        count, and every individual rating with the author's name and email,
        most recently updated first.

        Raises:
            NotFoundError: 소유한 매장이 없을 때 (Caller owns no store)
        """
        store: Store | None = await self.stores.get_by_owner(db, owner_id)
        if store is None:
            raise NotFoundError("Store not found")

        avg_rating, rating_count = await self.ratings.summary_for_store(db, store.id)
        rows = await self.ratings.list_for_store(db, store.id)
        return StoreOwnerDashboardResponse(
            store_id=store.id,
            store_name=store.store_name,
            store_address=store.store_address,
            avg_rating=avg_rating,
            rating_count=rating_count,
            ratings=[StoreRatingEntry.model_validate(row) for row in rows],
        )


# 싱글턴 인스턴스 — Singleton instance
dashboard_service: DashboardService = DashboardService()
