"""사용자 관련 SQLAlchemy ORM 모델 정의.

User SQLAlchemy ORM model definition.
A single ``users`` table holds all three account kinds; the ``role``
column is fixed at creation time.

Tables:
    - users: 사용자 계정 (User accounts: admin, user, store_owner)
"""

import enum
from datetime import datetime, timezone

from sqlalchemy import CheckConstraint, DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from store_ratings.database import Base


class UserRole(str, enum.Enum):
    """사용자 역할 — Account roles."""

    ADMIN = "admin"
    USER = "user"
    STORE_OWNER = "store_owner"

    @classmethod
    def values(cls) -> tuple[str, ...]:
        return tuple(member.value for member in cls)


class User(Base):
    """사용자 모델 — 시스템 사용자 계정 정보.

    User model — System user account information.
    Email is globally unique. A store_owner owns at most one Store.

    Attributes:
        id: 정수 식별자 (Integer identifier)
        name: 이름, 15~60자 (Display name, 15 to 60 characters)
        email: 로그인 이메일 (Login email, unique)
        password_hash: bcrypt 해시된 비밀번호 (bcrypt-hashed password)
        address: 주소, 최대 400자 (Address, optional, at most 400 characters)
        role: 역할 (admin | user | store_owner)
        token_version: 비밀번호 변경 시 증가 (Incremented on password change)
        created_at: 생성 일시 UTC (Creation timestamp)

    Relationships:
        store: 소유 매장 (Owned store, store_owner only)
        ratings: 작성한 평점 목록 (Ratings submitted by this user)
    """

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # 이름 — 15~60자 (Name length enforced by check constraint)
    name: Mapped[str] = mapped_column(String(60), nullable=False)
    # 이메일 — 전역 고유 (Globally unique login email)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    # 비밀번호 해시 — 평문 저장 금지 (never store plaintext)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    address: Mapped[str | None] = mapped_column(String(400), nullable=True)
    role: Mapped[str] = mapped_column(String(20), nullable=False, default=UserRole.USER.value)
    token_version: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    # 생성 일시 — Record creation timestamp (UTC)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))

    __table_args__ = (
        CheckConstraint("length(name) >= 15 AND length(name) <= 60", name="ck_user_name_length"),
        CheckConstraint("address IS NULL OR length(address) <= 400", name="ck_user_address_length"),
        CheckConstraint("role IN ('admin', 'user', 'store_owner')", name="ck_user_role"),
    )

    # 관계 — Relationships
    store = relationship("Store", back_populates="owner", uselist=False, cascade="all, delete-orphan", passive_deletes=True)
    ratings = relationship("Rating", back_populates="user", cascade="all, delete-orphan", passive_deletes=True)
