"""사용자 서비스 — 관리자용 사용자/매장 생성 및 사용자 목록.

User Service — Admin provisioning (user plus optional store) and the
filtered user listing.
"""

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from store_ratings.models.store import Store
from store_ratings.models.user import User, UserRole
from store_ratings.repositories.store_repository import StoreRepository, store_repository
from store_ratings.repositories.user_repository import UserRepository, user_repository
from store_ratings.schemas.user import UserCreate, UserCreateResponse, UserListResponse
from store_ratings.utils.exceptions import BadRequestError, DuplicateError, InternalError
from store_ratings.utils.password import hash_password_async
from store_ratings.utils.validators import (
    STORE_FIELDS_ERROR,
    validate_account_fields,
    validate_role,
)


class UserService:
    """관리자 사용자 관리 비즈니스 로직을 처리하는 서비스.

    Service handling admin-side user management.

    Attributes:
        users: 사용자 레포지토리 (User repository)
        stores: 매장 레포지토리 (Store repository)
    """

    def __init__(
        self,
        users: UserRepository = user_repository,
        stores: StoreRepository = store_repository,
    ) -> None:
        self.users: UserRepository = users
        self.stores: StoreRepository = stores

    async def create_user(
        self,
        db: AsyncSession,
        data: UserCreate,
    ) -> UserCreateResponse:
        """사용자를 생성하고, store_owner이면 매장도 함께 생성합니다.

        Create a user with any role. For store_owner the paired store is
        created in the same transaction: if either insert fails the session
        is rolled back, so no user is left behind without its store.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            data: 사용자 생성 데이터 (Provisioning payload)

        Returns:
            UserCreateResponse: 생성 결과 (Created user id and store id)

        Raises:
            BadRequestError: 필드/역할/매장 정보 검증 실패 (Validation failure)
            DuplicateError: 이메일 중복 (Email already exists)
            InternalError: 저장 실패 (Storage failure, nothing persisted)
        """
        validate_account_fields(data.name, data.email, data.password, data.address)
        validate_role(data.role)
        is_store_owner: bool = data.role == UserRole.STORE_OWNER.value
        if is_store_owner and (not data.store_name or not data.store_address):
            raise BadRequestError(STORE_FIELDS_ERROR)

        if await self.users.email_exists(db, data.email):
            raise DuplicateError("Email already exists")

        password_hash: str = await hash_password_async(data.password)

        try:
            user: User = await self.users.create(
                db,
                {
                    "name": data.name,
                    "email": data.email,
                    "password_hash": password_hash,
                    "address": data.address,
                    "role": data.role,
                },
            )
        except IntegrityError:
            await db.rollback()
            raise DuplicateError("Email already exists")

        store: Store | None = None
        if is_store_owner:
            try:
                store = await self.stores.create_for_owner(
                    db, user, data.store_name, data.store_address
                )
            except SQLAlchemyError:
                # 사용자 INSERT도 함께 롤백 — Undo the user insert as well
                await db.rollback()
                raise InternalError("Failed to create store; user was not created")

        if store is not None:
            return UserCreateResponse(
                message="Store owner created successfully",
                user_id=user.id,
                store_id=store.id,
            )
        return UserCreateResponse(message="User created successfully", user_id=user.id)

    async def list_users(
        self,
        db: AsyncSession,
        filters: dict[str, str | None],
        sort_by: str | None = None,
        sort_order: str | None = None,
    ) -> list[UserListResponse]:
        """사용자 목록을 필터/정렬 조건으로 조회합니다.

        List users with substring filters, an exact role filter, and an
        allow-listed sort key.

        Raises:
            BadRequestError: 잘못된 역할/정렬 조건 (Invalid role or sort)
        """
        if filters.get("role"):
            validate_role(filters["role"])
        rows = await self.users.list_with_stats(db, filters, sort_by, sort_order)
        return [UserListResponse.model_validate(row) for row in rows]


# 싱글턴 인스턴스 — Singleton instance
user_service: UserService = UserService()
