"""SQLAlchemy ORM 모델 패키지 — 모든 도메인 모델의 중앙 임포트 지점.

SQLAlchemy ORM models package — Central import point for all domain models.
Importing from this package ensures all models are registered with the
SQLAlchemy metadata, which is required for ``create_all`` and
relationship resolution.

Modules:
    user: 사용자 및 역할 (User and UserRole)
    store: 매장 (Store)
    rating: 평점 (Rating)
"""

from store_ratings.models.user import User, UserRole
from store_ratings.models.store import Store
from store_ratings.models.rating import Rating

__all__ = ["User", "UserRole", "Store", "Rating"]
