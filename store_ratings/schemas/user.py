"""사용자 관련 Pydantic 요청/응답 스키마 정의 (관리자용).

User Pydantic request/response schema definitions for admin endpoints:
provisioning (user + optional store) and the filtered user listing.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class UserCreate(BaseModel):
    """사용자 생성 요청 스키마 (관리자용).

    User creation request schema (admin-only operation).
    ``storeName``/``storeAddress`` are required only when role is
    store_owner, in which case the store is created in the same transaction.
    """

    model_config = ConfigDict(populate_by_name=True)

    name: str | None = None
    email: str | None = None
    password: str | None = None
    address: str | None = None
    role: str | None = None
    store_name: str | None = Field(default=None, alias="storeName")
    store_address: str | None = Field(default=None, alias="storeAddress")


class UserCreateResponse(BaseModel):
    """사용자 생성 응답 스키마 — Provisioning result."""

    model_config = ConfigDict(populate_by_name=True)

    message: str
    user_id: int = Field(alias="userId")
    store_id: int | None = Field(default=None, alias="storeId")


class UserListResponse(BaseModel):
    """사용자 목록 행 스키마.

    Admin user listing row. Store columns are null and the aggregates are
    zero for accounts without a store.
    """

    id: int
    name: str
    email: str
    address: str | None
    role: str
    created_at: datetime | None
    store_name: str | None = None
    store_address: str | None = None
    avg_rating: float = 0
    rating_count: int = 0
