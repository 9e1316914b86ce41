"""인증 서비스 — 회원가입, 로그인, 비밀번호 변경 비즈니스 로직.

Auth Service — Business logic for registration, login, password change,
and profile retrieval.
"""

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from store_ratings.models.user import User, UserRole
from store_ratings.repositories.user_repository import UserRepository, user_repository
from store_ratings.schemas.auth import (
    LoginRequest,
    LoginResponse,
    PasswordChangeRequest,
    RegisterRequest,
    RegisterResponse,
    UserProfile,
)
from store_ratings.utils.exceptions import (
    DuplicateError,
    NotFoundError,
    UnauthorizedError,
)
from store_ratings.utils.jwt import create_access_token
from store_ratings.utils.password import hash_password_async, verify_password_async
from store_ratings.utils.validators import validate_account_fields, validate_password

INVALID_CREDENTIALS: str = "Invalid credentials"
EMAIL_EXISTS: str = "Email already exists"


class AuthService:
    """인증 관련 비즈니스 로직을 처리하는 서비스.

    Service handling authentication business logic.
    Routers commit; the service only flushes.

    Attributes:
        users: 사용자 레포지토리 (User repository, injectable for tests)
    """

    def __init__(self, users: UserRepository = user_repository) -> None:
        self.users: UserRepository = users

    def _build_jwt_payload(self, user: User) -> dict[str, str | int]:
        """JWT 토큰 페이로드를 생성합니다.

        Build the token claims ``{id, email, role, ver}`` for a user.
        """
        return {
            "id": user.id,
            "email": user.email,
            "role": user.role,
            "ver": user.token_version or 0,
        }

    def to_profile(self, user: User) -> UserProfile:
        return UserProfile(
            id=user.id,
            name=user.name,
            email=user.email,
            role=user.role,
            address=user.address,
        )

    async def register(
        self,
        db: AsyncSession,
        data: RegisterRequest,
    ) -> RegisterResponse:
        """일반 사용자 회원가입을 처리합니다.

        Process self-registration. Fields are validated in the order name,
        address, password, email before any database access. The role is
        always "user".

        Raises:
            BadRequestError: 검증 실패 (First failing validation rule)
            DuplicateError: 이메일 중복 (Email already registered)
        """
        validate_account_fields(data.name, data.email, data.password, data.address)

        if await self.users.email_exists(db, data.email):
            raise DuplicateError(EMAIL_EXISTS)

        password_hash: str = await hash_password_async(data.password)
        try:
            user: User = await self.users.create(
                db,
                {
                    "name": data.name,
                    "email": data.email,
                    "password_hash": password_hash,
                    "address": data.address,
                    "role": UserRole.USER.value,
                },
            )
        except IntegrityError:
            # 동시 가입 경합 — Lost a race with a concurrent registration
            await db.rollback()
            raise DuplicateError(EMAIL_EXISTS)

        return RegisterResponse(message="User registered successfully", user_id=user.id)

    async def login(
        self,
        db: AsyncSession,
        data: LoginRequest,
    ) -> LoginResponse:
        """로그인을 처리합니다.

        Unknown email and wrong password produce the same error so accounts
        cannot be enumerated.

        Raises:
            UnauthorizedError: 잘못된 인증 정보일 때 (Invalid credentials)
        """
        if not data.email or not data.password:
            raise UnauthorizedError(INVALID_CREDENTIALS)

        user: User | None = await self.users.get_by_email(db, data.email)
        if user is None or not await verify_password_async(data.password, user.password_hash):
            raise UnauthorizedError(INVALID_CREDENTIALS)

        token: str = create_access_token(self._build_jwt_payload(user))
        return LoginResponse(token=token, user=self.to_profile(user))

    async def change_password(
        self,
        db: AsyncSession,
        user_id: int,
        data: PasswordChangeRequest,
    ) -> None:
        """비밀번호를 변경합니다.

        Change the caller's password after verifying the current one.
        Previously issued tokens stay valid unless
        JWT_REVOKE_ON_PASSWORD_CHANGE is enabled.

        Raises:
            BadRequestError: 새 비밀번호가 규칙에 맞지 않을 때 (New password too weak)
            NotFoundError: 사용자가 없을 때 (Account no longer exists)
            UnauthorizedError: 현재 비밀번호 불일치 (Current password is incorrect)
        """
        validate_password(data.new_password)

        user: User | None = await self.users.get_by_id(db, user_id)
        if user is None:
            raise NotFoundError("User not found")

        if not data.current_password or not await verify_password_async(
            data.current_password, user.password_hash
        ):
            raise UnauthorizedError("Current password is incorrect")

        password_hash: str = await hash_password_async(data.new_password)
        await self.users.update_password(db, user, password_hash)

    async def get_profile(
        self,
        db: AsyncSession,
        user_id: int,
    ) -> UserProfile:
        user: User | None = await self.users.get_by_id(db, user_id)
        if user is None:
            raise NotFoundError("User not found")
        return self.to_profile(user)


# 싱글턴 인스턴스 — Singleton instance
auth_service: AuthService = AuthService()
