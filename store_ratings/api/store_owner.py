"""매장 소유자 라우터 — 소유 매장의 평점 리포트.

Store Owner Router — Feedback report for the caller's own store.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from store_ratings.api.deps import CurrentUser, get_dashboard_service, require_store_owner
from store_ratings.database import get_db
from store_ratings.schemas.store import StoreOwnerDashboardResponse
from store_ratings.services.dashboard_service import DashboardService

router: APIRouter = APIRouter()


@router.get("/dashboard", response_model=StoreOwnerDashboardResponse)
async def get_owner_dashboard(
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[CurrentUser, Depends(require_store_owner)],
    service: Annotated[DashboardService, Depends(get_dashboard_service)],
) -> StoreOwnerDashboardResponse:
    """소유 매장의 평균 평점, 평점 수, 개별 평점 목록 조회."""
    return await service.get_owner_dashboard(db, current_user.id)
