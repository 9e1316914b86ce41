"""평점 서비스 — 평점 제출(업서트) 비즈니스 로직.

Rating Service — Business logic for rating submission.
A user has at most one rating per store; resubmitting replaces the value.
"""

from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from store_ratings.models.rating import Rating
from store_ratings.models.user import UserRole
from store_ratings.repositories.rating_repository import RatingRepository, rating_repository
from store_ratings.repositories.store_repository import StoreRepository, store_repository
from store_ratings.schemas.rating import RatingResponse, RatingSubmit, RatingSubmitResponse
from store_ratings.utils.exceptions import BadRequestError, ForbiddenError, NotFoundError
from store_ratings.utils.validators import validate_rating_value


class RatingService:
    """평점 관련 비즈니스 로직을 처리하는 서비스.

    Attributes:
        ratings: 평점 레포지토리 (Rating repository)
        stores: 매장 레포지토리 (Store repository)
    """

    def __init__(
        self,
        ratings: RatingRepository = rating_repository,
        stores: StoreRepository = store_repository,
    ) -> None:
        self.ratings: RatingRepository = ratings
        self.stores: StoreRepository = stores

    @staticmethod
    def _parse_store_id(value: Any) -> int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise BadRequestError("Invalid store id")
        return value

    async def submit(
        self,
        db: AsyncSession,
        user_id: int,
        role: str,
        data: RatingSubmit,
    ) -> RatingSubmitResponse:
        """평점을 제출하거나 기존 평점을 덮어씁니다.

        Submit a rating, or overwrite the caller's previous rating for the
        same store. Checks run in order: value range, caller role, store id,
        store existence. Nothing is written when any check fails.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            user_id: 요청자 ID (Caller id from token claims)
            role: 요청자 역할 (Caller role from token claims)
            data: 제출 데이터 (storeId, rating)

        Raises:
            BadRequestError: 평점 범위 또는 매장 ID 오류 (Invalid rating or store id)
            ForbiddenError: 일반 사용자가 아닐 때 (Caller is not a normal user)
            NotFoundError: 매장이 없을 때 (Store does not exist)
        """
        value: int = validate_rating_value(data.rating)

        if role != UserRole.USER.value:
            raise ForbiddenError("Only normal users can submit ratings")

        store_id: int = self._parse_store_id(data.store_id)
        if await self.stores.get_by_id(db, store_id) is None:
            raise NotFoundError("Store not found")

        rating: Rating = await self.ratings.upsert(db, user_id, store_id, value)
        return RatingSubmitResponse(
            message="Rating submitted successfully",
            rating=RatingResponse.model_validate(rating),
        )


# 싱글턴 인스턴스 — Singleton instance
rating_service: RatingService = RatingService()
