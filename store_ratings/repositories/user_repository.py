"""사용자 레포지토리 — 사용자 CRUD 및 관리자 목록 쿼리.

User Repository — CRUD and admin listing queries for users.
Extends BaseRepository with lookup by email, the filtered/sorted admin
listing with store rating aggregates, and password updates.
"""

from typing import Any, Mapping

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from store_ratings.models.rating import Rating
from store_ratings.models.store import Store
from store_ratings.models.user import User
from store_ratings.repositories.base import BaseRepository
from store_ratings.utils.listing import apply_sort, apply_text_filters


class UserRepository(BaseRepository[User]):
    """사용자 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the users table.
    """

    DEFAULT_SORT: str = "name"

    def __init__(self) -> None:
        super().__init__(User)

    async def get_by_email(
        self,
        db: AsyncSession,
        email: str,
    ) -> User | None:
        """이메일로 사용자를 조회합니다.

        Retrieve a user by login email (exact match).
        """
        result = await db.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

    async def email_exists(self, db: AsyncSession, email: str) -> bool:
        return await self.exists(db, {"email": email})

    async def list_with_stats(
        self,
        db: AsyncSession,
        filters: Mapping[str, str | None],
        sort_by: str | None = None,
        sort_order: str | None = None,
    ) -> list[dict[str, Any]]:
        """사용자 목록을 매장 평점 집계와 함께 조회합니다.

        List users with their store (if any) and that store's rating
        aggregates. Filters ``name``, ``email``, ``address`` are
        case-insensitive substrings; ``role`` is an exact match.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            filters: 필터 딕셔너리 (name, email, address, role)
            sort_by: 정렬 키 (name, email, address, role, created_at, avg_rating)
            sort_order: "ASC" | "DESC"

        Returns:
            list[dict[str, Any]]: 행 딕셔너리 목록 (Row mappings)

        Raises:
            BadRequestError: 허용되지 않은 정렬 키/방향 (Invalid sort key or order)
        """
        avg_rating = func.coalesce(func.avg(Rating.rating), 0).label("avg_rating")
        rating_count = func.count(Rating.id).label("rating_count")

        query: Select = (
            select(
                User.id,
                User.name,
                User.email,
                User.address,
                User.role,
                User.created_at,
                Store.store_name,
                Store.store_address,
                avg_rating,
                rating_count,
            )
            .outerjoin(Store, Store.user_id == User.id)
            .outerjoin(Rating, Rating.store_id == Store.id)
            .group_by(User.id, Store.id)
        )

        query = apply_text_filters(
            query,
            {"name": User.name, "email": User.email, "address": User.address},
            filters,
        )
        role: str | None = filters.get("role")
        if role:
            query = query.where(User.role == role)

        sortable: dict[str, Any] = {
            "name": User.name,
            "email": User.email,
            "address": User.address,
            "role": User.role,
            "created_at": User.created_at,
            "avg_rating": avg_rating,
        }
        query = apply_sort(query, sortable, sort_by, sort_order, self.DEFAULT_SORT, tiebreak=User.id)

        result = await db.execute(query)
        return [dict(row) for row in result.mappings().all()]

    async def update_password(
        self,
        db: AsyncSession,
        user: User,
        password_hash: str,
    ) -> User:
        """비밀번호 해시를 교체하고 토큰 버전을 올립니다.

        Replace the password hash and bump ``token_version`` so tokens issued
        before the change can be rejected when revocation is enabled.
        """
        user.password_hash = password_hash
        user.token_version = (user.token_version or 0) + 1
        await db.flush()
        return user


# 싱글턴 인스턴스 — Singleton instance
user_repository: UserRepository = UserRepository()
