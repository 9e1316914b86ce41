"""서비스/레포지토리 단위 테스트 — 트랜잭션 롤백, 시드, 유틸리티.

Service and repository level tests that do not go through HTTP:
provisioning rollback, admin seeding, the store owner guard, and the
listing and masking helpers.
"""

from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy import func, select, update
from sqlalchemy.exc import SQLAlchemyError

from store_ratings.config import settings
from store_ratings.middleware.request_logging import mask_sensitive
from store_ratings.models.rating import Rating
from store_ratings.models.user import User, UserRole
from store_ratings.repositories.rating_repository import rating_repository
from store_ratings.repositories.store_repository import StoreRepository, store_repository
from store_ratings.repositories.user_repository import user_repository
from store_ratings.schemas.user import UserCreate
from store_ratings.seed import seed, seed_admin
from store_ratings.services.user_service import UserService
from store_ratings.utils.exceptions import BadRequestError, InternalError
from store_ratings.utils.listing import escape_like
from store_ratings.utils.password import verify_password
from store_ratings.utils.validators import validate_rating_value


class FailingStoreRepository(StoreRepository):
    """매장 INSERT가 항상 실패하는 테스트 더블."""

    async def create_for_owner(self, db, owner, store_name, store_address):
        raise SQLAlchemyError("store insert failed")


# ===== Provisioning =====

class TestProvisioningRollback:
    """사용자+매장 생성 트랜잭션 테스트."""

    async def test_store_failure_leaves_no_user(self, db):
        """매장 생성 실패 시 사용자도 남지 않음."""
        service = UserService(stores=FailingStoreRepository())
        data = UserCreate(
            name="Rollback Candidate Owner",
            email="rollback@test.com",
            password="Rollback@1",
            role="store_owner",
            store_name="Doomed Store",
            store_address="0 Nowhere",
        )

        with pytest.raises(InternalError):
            await service.create_user(db, data)

        assert await user_repository.email_exists(db, "rollback@test.com") is False
        assert await store_repository.count(db) == 0

    async def test_store_requires_store_owner_role(self, db, normal_user):
        """store_owner가 아닌 사용자에게 매장 생성 불가."""
        with pytest.raises(BadRequestError):
            await store_repository.create_for_owner(db, normal_user, "Illegal Store", "1 Road")


# ===== Rating upsert =====

class TestRatingUpsert:
    """평점 업서트 레포지토리 테스트."""

    async def test_upsert_keeps_single_row(self, db, normal_user, store):
        """같은 쌍에 대한 반복 업서트는 한 행만 유지."""
        first = await rating_repository.upsert(db, normal_user.id, store.id, 1)
        first_id, created_at = first.id, first.created_at
        await db.execute(
            update(Rating)
            .where(Rating.id == first_id)
            .values(updated_at=datetime.now(timezone.utc) - timedelta(days=1))
        )
        previous = (await rating_repository.get_for_pair(db, normal_user.id, store.id)).updated_at

        second = await rating_repository.upsert(db, normal_user.id, store.id, 4)

        assert second.id == first_id
        assert second.rating == 4
        assert second.created_at == created_at
        assert second.updated_at > previous
        assert await rating_repository.count(db) == 1
        assert await rating_repository.summary_for_store(db, store.id) == (4.0, 1)

    async def test_same_value_still_refreshes_updated_at(self, db, normal_user, store):
        """같은 값으로 재제출해도 updated_at 갱신."""
        first = await rating_repository.upsert(db, normal_user.id, store.id, 3)
        await db.execute(
            update(Rating)
            .where(Rating.id == first.id)
            .values(updated_at=datetime.now(timezone.utc) - timedelta(days=1))
        )
        previous = (await rating_repository.get_for_pair(db, normal_user.id, store.id)).updated_at

        again = await rating_repository.upsert(db, normal_user.id, store.id, 3)
        assert again.rating == 3
        assert again.updated_at > previous

    async def test_get_for_pair_missing(self, db, normal_user, store):
        """평점이 없는 쌍은 None."""
        assert await rating_repository.get_for_pair(db, normal_user.id, store.id) is None

    async def test_summary_without_ratings(self, db, store):
        assert await rating_repository.summary_for_store(db, store.id) == (0.0, 0)


# ===== Seeding =====

class TestSeed:
    """관리자 시드 테스트."""

    async def test_seed_admin_is_idempotent(self, db):
        """두 번 실행해도 관리자는 하나."""
        admin = await seed_admin(db)
        assert admin is not None
        assert admin.role == UserRole.ADMIN.value
        assert admin.email == settings.SEED_ADMIN_EMAIL
        assert verify_password(settings.SEED_ADMIN_PASSWORD, admin.password_hash)

        assert await seed_admin(db) is None
        total = (await db.execute(select(func.count(User.id)))).scalar_one()
        assert total == 1

    async def test_seed_disabled(self, db):
        """SEED_ADMIN_ENABLED=False이면 생성하지 않음."""
        config = settings.model_copy(update={"SEED_ADMIN_ENABLED": False})
        assert await seed_admin(db, config) is None
        assert await user_repository.count(db) == 0

    async def test_seed_creates_tables_and_admin(self, engine, session_factory):
        """seed()는 테이블 생성 후 관리자를 시드."""
        await seed(engine, session_factory)
        async with session_factory() as session:
            assert await user_repository.email_exists(session, settings.SEED_ADMIN_EMAIL)


# ===== Helpers =====

class TestHelpers:
    """유틸리티 함수 테스트."""

    def test_escape_like(self):
        assert escape_like("50%_off\\") == "50\\%\\_off\\\\"

    @pytest.mark.parametrize("value", [1, 3, 5])
    def test_rating_value_accepts_range(self, value):
        assert validate_rating_value(value) == value

    @pytest.mark.parametrize("value", [0, 6, 2.0, "3", False, None])
    def test_rating_value_rejects(self, value):
        with pytest.raises(BadRequestError):
            validate_rating_value(value)

    def test_mask_sensitive(self):
        masked = mask_sensitive({
            "email": "a@b.com",
            "currentPassword": "Secret@1",
            "nested": {"newPassword": "Secret@2", "rating": 4},
        })
        assert masked == {
            "email": "a@b.com",
            "currentPassword": "***",
            "nested": {"newPassword": "***", "rating": 4},
        }
