"""관리자 사용자 라우터 — 사용자 생성 및 목록 엔드포인트.

Admin User Router — Provisioning and filtered listing of users.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from store_ratings.api.deps import CurrentUser, get_user_service, require_admin
from store_ratings.database import get_db
from store_ratings.schemas.user import UserCreate, UserCreateResponse, UserListResponse
from store_ratings.services.user_service import UserService

router: APIRouter = APIRouter()


@router.post("", response_model=UserCreateResponse, status_code=201)
async def create_user(
    data: UserCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[CurrentUser, Depends(require_admin)],
    service: Annotated[UserService, Depends(get_user_service)],
) -> UserCreateResponse:
    """새 사용자를 생성합니다. store_owner이면 매장도 함께 생성.

    Create a user with any role; store owners get their store in the same
    transaction.
    """
    result: UserCreateResponse = await service.create_user(db, data)
    await db.commit()
    return result


@router.get("", response_model=list[UserListResponse])
async def list_users(
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[CurrentUser, Depends(require_admin)],
    service: Annotated[UserService, Depends(get_user_service)],
    name: Annotated[str | None, Query(description="이름 부분 일치")] = None,
    email: Annotated[str | None, Query(description="이메일 부분 일치")] = None,
    address: Annotated[str | None, Query(description="주소 부분 일치")] = None,
    role: Annotated[str | None, Query(description="역할 일치")] = None,
    sort_by: Annotated[str | None, Query(alias="sortBy")] = None,
    sort_order: Annotated[str | None, Query(alias="sortOrder")] = None,
) -> list[UserListResponse]:
    """사용자 목록을 필터/정렬 조건으로 조회합니다.

    List users with optional filters and sorting.
    """
    filters: dict[str, str | None] = {
        "name": name,
        "email": email,
        "address": address,
        "role": role,
    }
    return await service.list_users(db, filters, sort_by, sort_order)
