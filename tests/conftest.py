"""테스트 인프라 — 인메모리 SQLite DB, 세션, httpx 클라이언트 픽스처.

Test infrastructure — In-memory SQLite DB, session, and httpx client fixtures.
Each test gets a fresh aiosqlite engine (StaticPool keeps the single
in-memory connection alive) with the schema created from the ORM metadata.
"""

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import select
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from store_ratings.config import settings
from store_ratings.database import Base, get_db
from store_ratings.main import app
from store_ratings.models import *  # noqa: F401,F403 — register all models with metadata
from store_ratings.models.store import Store
from store_ratings.models.user import User, UserRole
from store_ratings.utils.jwt import create_access_token
from store_ratings.utils.password import hash_password

# 테스트 속도를 위해 bcrypt 비용을 최소화 — Minimum bcrypt cost for fast tests
settings.BCRYPT_ROUNDS = 4

TEST_DATABASE_URL = "sqlite+aiosqlite://"

ADMIN_PASSWORD = "Admin@1234"
USER_PASSWORD = "User@12345"
OWNER_PASSWORD = "Owner@1234"


# ---------------------------------------------------------------------------
# Function-scoped: 엔진, 세션, 클라이언트
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """테스트용 async 엔진. 매 테스트마다 스키마를 새로 생성합니다."""
    eng = create_async_engine(
        TEST_DATABASE_URL,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield eng
    await eng.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db(session_factory: async_sessionmaker[AsyncSession]) -> AsyncGenerator[AsyncSession, None]:
    """각 테스트에 격리된 DB 세션을 제공합니다."""
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(db: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """FastAPI 테스트 클라이언트 — DB 세션을 오버라이드합니다."""
    async def _override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db

    app.dependency_overrides[get_db] = _override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# 헬퍼 픽스처: 테스트용 데이터 생성
# ---------------------------------------------------------------------------
async def make_user(
    db: AsyncSession,
    *,
    name: str,
    email: str,
    password: str,
    role: UserRole,
    address: str | None = None,
) -> User:
    """사용자를 직접 생성합니다 — Insert a user bypassing the API."""
    user = User(
        name=name,
        email=email,
        password_hash=hash_password(password),
        address=address,
        role=role.value,
    )
    db.add(user)
    await db.flush()
    await db.refresh(user)
    return user


async def make_store_owner(
    db: AsyncSession,
    *,
    name: str,
    email: str,
    store_name: str,
    store_address: str,
) -> tuple[User, Store]:
    """매장 소유자와 매장을 생성합니다."""
    owner = await make_user(
        db, name=name, email=email, password=OWNER_PASSWORD, role=UserRole.STORE_OWNER,
    )
    store = Store(user_id=owner.id, store_name=store_name, store_address=store_address)
    db.add(store)
    await db.flush()
    await db.refresh(store)
    return owner, store


@pytest_asyncio.fixture
async def admin_user(db: AsyncSession) -> User:
    """관리자 사용자를 생성합니다."""
    return await make_user(
        db,
        name="Platform Test Administrator",
        email="admin@test.com",
        password=ADMIN_PASSWORD,
        role=UserRole.ADMIN,
        address="1 Admin Road",
    )


@pytest_asyncio.fixture
async def normal_user(db: AsyncSession) -> User:
    """일반 사용자를 생성합니다."""
    return await make_user(
        db,
        name="Regular Shopper Account",
        email="shopper@test.com",
        password=USER_PASSWORD,
        role=UserRole.USER,
        address="22 Market Lane",
    )


@pytest_asyncio.fixture
async def owner_user(db: AsyncSession) -> User:
    """매장 소유자(매장 포함)를 생성합니다."""
    owner, _ = await make_store_owner(
        db,
        name="Corner Shop Owner Person",
        email="owner@test.com",
        store_name="Corner Shop",
        store_address="5 High Street",
    )
    return owner


@pytest_asyncio.fixture
async def store(db: AsyncSession, owner_user: User) -> Store:
    """owner_user의 매장을 반환합니다."""
    result = await db.execute(select(Store).where(Store.user_id == owner_user.id))
    return result.scalar_one()


def make_token(user: User) -> str:
    """테스트용 JWT 액세스 토큰을 생성합니다."""
    return create_access_token({
        "id": user.id,
        "email": user.email,
        "role": user.role,
        "ver": user.token_version or 0,
    })


@pytest.fixture
def admin_token(admin_user: User) -> str:
    return make_token(admin_user)


@pytest.fixture
def user_token(normal_user: User) -> str:
    return make_token(normal_user)


@pytest.fixture
def owner_token(owner_user: User) -> str:
    return make_token(owner_user)


def auth_header(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}
