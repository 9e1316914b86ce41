"""매장 및 대시보드 관련 Pydantic 응답 스키마 정의.

Store and dashboard Pydantic response schema definitions.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class AdminStoreResponse(BaseModel):
    """관리자 매장 목록 행 — Admin store listing row."""

    id: int
    store_name: str
    store_address: str
    email: str  # 소유자 이메일 (Owner email)
    owner_name: str
    avg_rating: float = 0
    rating_count: int = 0


class StoreResponse(BaseModel):
    """사용자 매장 목록 행.

    User-facing store listing row. ``user_rating`` is the caller's own
    rating for the store, or null if they have not rated it.
    """

    id: int
    store_name: str
    store_address: str
    avg_rating: float = 0
    rating_count: int = 0
    user_rating: int | None = None


class AdminDashboardResponse(BaseModel):
    """관리자 대시보드 집계 — Platform-wide totals."""

    model_config = ConfigDict(populate_by_name=True)

    total_users: int = Field(alias="totalUsers")
    total_stores: int = Field(alias="totalStores")
    total_ratings: int = Field(alias="totalRatings")


class StoreRatingEntry(BaseModel):
    """매장 평점 항목 — One rating with its author."""

    name: str
    email: str
    rating: int
    created_at: datetime | None
    updated_at: datetime | None


class StoreOwnerDashboardResponse(BaseModel):
    """매장 소유자 대시보드.

    Store owner dashboard: aggregates and individual ratings, most recently
    updated first.
    """

    store_id: int
    store_name: str
    store_address: str
    avg_rating: float
    rating_count: int
    ratings: list[StoreRatingEntry]
