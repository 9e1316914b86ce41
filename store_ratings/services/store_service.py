"""매장 서비스 — 매장 목록 조회 비즈니스 로직.

Store Service — Business logic for the admin and user-facing store listings.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from store_ratings.repositories.store_repository import StoreRepository, store_repository
from store_ratings.schemas.store import AdminStoreResponse, StoreResponse


class StoreService:
    """매장 관련 비즈니스 로직을 처리하는 서비스.

    Service handling store listings.
    """

    def __init__(self, stores: StoreRepository = store_repository) -> None:
        self.stores: StoreRepository = stores

    async def list_for_admin(
        self,
        db: AsyncSession,
        filters: dict[str, str | None],
        sort_by: str | None = None,
        sort_order: str | None = None,
    ) -> list[AdminStoreResponse]:
        """관리자용 매장 목록 — Admin store listing with owner email."""
        rows = await self.stores.list_for_admin(db, filters, sort_by, sort_order)
        return [AdminStoreResponse.model_validate(row) for row in rows]

    async def list_for_user(
        self,
        db: AsyncSession,
        user_id: int,
        filters: dict[str, str | None],
        sort_by: str | None = None,
        sort_order: str | None = None,
    ) -> list[StoreResponse]:
        """사용자용 매장 목록을 조회합니다.

        User-facing store listing including the caller's own rating.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            user_id: 요청자 ID (Caller id, used for ``user_rating``)
            filters: 필터 (name, address)
            sort_by: 정렬 키 (Sort key)
            sort_order: 정렬 방향 (ASC | DESC)
        """
        rows = await self.stores.list_for_user(db, user_id, filters, sort_by, sort_order)
        return [StoreResponse.model_validate(row) for row in rows]


# 싱글턴 인스턴스 — Singleton instance
store_service: StoreService = StoreService()
