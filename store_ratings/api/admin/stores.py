"""관리자 매장 라우터 — 매장 목록 엔드포인트.

Admin Store Router — Filtered store listing with owner email and rating
aggregates. Stores are created through POST /api/admin/users.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from store_ratings.api.deps import CurrentUser, get_store_service, require_admin
from store_ratings.database import get_db
from store_ratings.schemas.store import AdminStoreResponse
from store_ratings.services.store_service import StoreService

router: APIRouter = APIRouter()


@router.get("", response_model=list[AdminStoreResponse])
async def list_stores(
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[CurrentUser, Depends(require_admin)],
    service: Annotated[StoreService, Depends(get_store_service)],
    name: Annotated[str | None, Query(description="매장 이름 부분 일치")] = None,
    email: Annotated[str | None, Query(description="소유자 이메일 부분 일치")] = None,
    address: Annotated[str | None, Query(description="매장 주소 부분 일치")] = None,
    sort_by: Annotated[str | None, Query(alias="sortBy")] = None,
    sort_order: Annotated[str | None, Query(alias="sortOrder")] = None,
) -> list[AdminStoreResponse]:
    """매장 목록을 필터/정렬 조건으로 조회합니다."""
    filters: dict[str, str | None] = {"name": name, "email": email, "address": address}
    return await service.list_for_admin(db, filters, sort_by, sort_order)
