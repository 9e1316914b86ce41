"""관리자 대시보드 라우터 — 전체 집계 API.

Admin Dashboard Router — Platform-wide user, store and rating totals.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from store_ratings.api.deps import CurrentUser, get_dashboard_service, require_admin
from store_ratings.database import get_db
from store_ratings.schemas.store import AdminDashboardResponse
from store_ratings.services.dashboard_service import DashboardService

router: APIRouter = APIRouter()


@router.get("", response_model=AdminDashboardResponse)
async def get_dashboard(
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[CurrentUser, Depends(require_admin)],
    service: Annotated[DashboardService, Depends(get_dashboard_service)],
) -> AdminDashboardResponse:
    """전체 사용자/매장/평점 수 조회."""
    return await service.get_admin_stats(db)
