"""평점 SQLAlchemy ORM 모델 정의.

Rating SQLAlchemy ORM model definition.

Tables:
    - ratings: 사용자별 매장 평점 (One rating per user/store pair)
"""

from datetime import datetime, timezone

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from store_ratings.database import Base


class Rating(Base):
    """평점 모델 — 사용자가 매장에 남긴 1~5점 평가.

    Rating model — A 1 to 5 star rating left by a user for a store.
    Resubmission overwrites ``rating`` and ``updated_at`` in place
    (see RatingRepository.upsert).

    Constraints:
        uq_rating_user_store: 사용자/매장 쌍당 하나 (One row per user/store pair)
        ck_rating_range: 1 <= rating <= 5
    """

    __tablename__ = "ratings"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    store_id: Mapped[int] = mapped_column(Integer, ForeignKey("stores.id", ondelete="CASCADE"), nullable=False)
    rating: Mapped[int] = mapped_column(Integer, nullable=False)
    # 생성 일시 — 최초 제출 시각, 재제출 시 변경되지 않음 (Untouched on resubmission)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    # 수정 일시 — 재제출 시 갱신 (Refreshed on every submission)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    __table_args__ = (
        UniqueConstraint("user_id", "store_id", name="uq_rating_user_store"),
        CheckConstraint("rating >= 1 AND rating <= 5", name="ck_rating_range"),
    )

    # 관계 — Relationships
    user = relationship("User", back_populates="ratings")
    store = relationship("Store", back_populates="ratings")
