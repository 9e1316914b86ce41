"""초기 데이터 시드 스크립트 — 테이블 생성 및 관리자 계정 생성.

Seed script — Creates the tables and the default administrator account.
Runs automatically at application startup and can be run standalone.

Usage:
    python -m store_ratings.seed

The administrator's name, email, password and address come from the
SEED_ADMIN_* settings. Idempotent: an existing account with the configured
email is left untouched (its password is not reset).
"""

import asyncio
import logging

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from store_ratings.config import Settings, settings
from store_ratings.database import Base, async_session, engine
from store_ratings.models import User, UserRole  # noqa: F401 — register all models with metadata
from store_ratings.repositories.user_repository import user_repository
from store_ratings.utils.password import hash_password_async

logger = logging.getLogger(__name__)


async def create_tables(bind: AsyncEngine = engine) -> None:
    """ORM 메타데이터로 테이블을 생성합니다 — Create missing tables."""
    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def seed_admin(db: AsyncSession, config: Settings = settings) -> User | None:
    """기본 관리자 계정을 생성합니다.

    Create the configured administrator unless an account with that email
    already exists or seeding is disabled.

    Args:
        db: 비동기 데이터베이스 세션 (Async database session)
        config: 설정 (Settings carrying SEED_ADMIN_* values)

    Returns:
        User | None: 새로 생성된 관리자 또는 None (Created admin, or None when skipped)
    """
    if not config.SEED_ADMIN_ENABLED:
        return None

    if await user_repository.email_exists(db, config.SEED_ADMIN_EMAIL):
        logger.info("Admin account %s already exists, skipping seed", config.SEED_ADMIN_EMAIL)
        return None

    admin: User = await user_repository.create(
        db,
        {
            "name": config.SEED_ADMIN_NAME,
            "email": config.SEED_ADMIN_EMAIL,
            "password_hash": await hash_password_async(config.SEED_ADMIN_PASSWORD),
            "address": config.SEED_ADMIN_ADDRESS,
            "role": UserRole.ADMIN.value,
        },
    )
    await db.commit()
    logger.info("Seeded admin account %s (id=%s)", admin.email, admin.id)
    return admin


async def seed(
    bind: AsyncEngine = engine,
    session_factory: async_sessionmaker[AsyncSession] = async_session,
) -> None:
    """테이블 생성 후 관리자 계정을 시드합니다 — Create tables, then seed."""
    await create_tables(bind)
    async with session_factory() as db:
        await seed_admin(db)


if __name__ == "__main__":
    logging.basicConfig(level=settings.LOG_LEVEL)
    asyncio.run(seed())
