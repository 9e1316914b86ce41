"""관리자 API 라우터 패키지 — 모든 관리자 엔드포인트 통합.

Admin API Router package — Aggregates all admin-only endpoints into a
single router for inclusion in the FastAPI application.

Included routers:
    - dashboard: 전체 집계 (Platform totals)
    - users: 사용자 생성/목록 (User provisioning and listing)
    - stores: 매장 목록 (Store listing)
"""

from fastapi import APIRouter

from store_ratings.api.admin.dashboard import router as dashboard_router
from store_ratings.api.admin.stores import router as stores_router
from store_ratings.api.admin.users import router as users_router

admin_router: APIRouter = APIRouter()

admin_router.include_router(dashboard_router, prefix="/dashboard", tags=["Admin Dashboard"])
admin_router.include_router(users_router, prefix="/users", tags=["Admin Users"])
admin_router.include_router(stores_router, prefix="/stores", tags=["Admin Stores"])
