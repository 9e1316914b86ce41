"""평점 관련 Pydantic 요청/응답 스키마 정의.

Rating Pydantic request/response schema definitions.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class RatingSubmit(BaseModel):
    """평점 제출 요청 스키마.

    Rating submission request. Both fields are accepted as raw JSON values
    and checked by the rating service, so a value such as ``3.5`` or
    ``"4"`` is rejected with the rating error rather than coerced.

    Attributes:
        store_id: 매장 ID (JSON key ``storeId``)
        rating: 평점 1~5 정수 (Integer 1 to 5)
    """

    model_config = ConfigDict(populate_by_name=True)

    store_id: Any = Field(default=None, alias="storeId")
    rating: Any = None


class RatingResponse(BaseModel):
    """평점 응답 스키마 — Stored rating row."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    store_id: int
    rating: int
    created_at: datetime | None
    updated_at: datetime | None


class RatingSubmitResponse(BaseModel):
    """평점 제출 응답 — Submission result with the stored row."""

    message: str
    rating: RatingResponse
