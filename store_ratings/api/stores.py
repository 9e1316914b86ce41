"""매장 라우터 — 로그인 사용자용 매장 목록.

Store Router — Store listing for any authenticated caller, including the
caller's own rating per store.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from store_ratings.api.deps import CurrentUser, get_current_user, get_store_service
from store_ratings.database import get_db
from store_ratings.schemas.store import StoreResponse
from store_ratings.services.store_service import StoreService

router: APIRouter = APIRouter()


@router.get("", response_model=list[StoreResponse])
async def list_stores(
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    service: Annotated[StoreService, Depends(get_store_service)],
    name: Annotated[str | None, Query(description="매장 이름 부분 일치")] = None,
    address: Annotated[str | None, Query(description="매장 주소 부분 일치")] = None,
    sort_by: Annotated[str | None, Query(alias="sortBy")] = None,
    sort_order: Annotated[str | None, Query(alias="sortOrder")] = None,
) -> list[StoreResponse]:
    """매장 목록 조회 — 평균 평점, 평점 수, 본인 평점 포함.

    List stores with average rating, rating count, and the caller's rating.
    """
    filters: dict[str, str | None] = {"name": name, "address": address}
    return await service.list_for_user(db, current_user.id, filters, sort_by, sort_order)
