"""매장 SQLAlchemy ORM 모델 정의.

Store SQLAlchemy ORM model definition.

Tables:
    - stores: 매장 (One store per store_owner user)
"""

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from store_ratings.database import Base


class Store(Base):
    """매장 모델 — 매장 소유자(store_owner)에게 1:1로 연결.

    Store model — Linked one-to-one to its store_owner user.
    The owner's role is checked when the row is created
    (see StoreRepository.create_for_owner).

    Attributes:
        id: 정수 식별자 (Integer identifier)
        user_id: 소유자 FK, 고유 (Owner foreign key, unique)
        store_name: 매장 이름 (Store name)
        store_address: 매장 주소 (Store address)
    """

    __tablename__ = "stores"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # 소유자 FK — CASCADE: 사용자 삭제 시 매장도 삭제
    user_id: Mapped[int] = mapped_column(Integer, ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False)
    store_name: Mapped[str] = mapped_column(String(255), nullable=False)
    store_address: Mapped[str] = mapped_column(String(400), nullable=False)

    # 관계 — Relationships
    owner = relationship("User", back_populates="store")
    ratings = relationship("Rating", back_populates="store", cascade="all, delete-orphan", passive_deletes=True)
