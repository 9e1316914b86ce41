"""평점 라우터 — 평점 제출 엔드포인트.

Rating Router — Submit or overwrite the caller's rating for a store.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from store_ratings.api.deps import CurrentUser, get_current_user, get_rating_service
from store_ratings.database import get_db
from store_ratings.schemas.rating import RatingSubmit, RatingSubmitResponse
from store_ratings.services.rating_service import RatingService

router: APIRouter = APIRouter()


@router.post("", response_model=RatingSubmitResponse)
async def submit_rating(
    data: RatingSubmit,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    service: Annotated[RatingService, Depends(get_rating_service)],
) -> RatingSubmitResponse:
    """평점 제출 — 일반 사용자만 가능, 같은 매장 재제출 시 덮어씀.

    Submit a rating (role "user" only). Resubmitting for the same store
    replaces the previous value.
    """
    result: RatingSubmitResponse = await service.submit(
        db, current_user.id, current_user.role, data
    )
    await db.commit()
    return result
